# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Cdom - Declarative document tree building with nested calls.

Nested builder calls attach their node to the nearest enclosing call
through an ambient parent context, so trees are written as nested
functions instead of explicit append calls::

    from genro_cdom import cdom

    el = cdom.elements
    page = el.div({'id': 'x'}, lambda: el.span('hi'))
    page.outer_html  # '<div id="x"><span>hi</span></div>'
"""

__version__ = "0.1.0"

from .attributes import BOOLEAN_ATTRIBUTES, NON_ATTRIBUTE_PROPERTIES, AttrAction, classify
from .builders import ElementsBase, HtmlElements, SvgElements, tag_builder
from .facade import Cdom, cdom
from .content import resolve_inner, stringify
from .context import attach_if_parent, current, parent_context, with_current
from .dom import Comment, Document, Element, Event, Fragment, Namespace, Node, Text
from .exceptions import (
    CdomError,
    HierarchyError,
    InvalidAttributeError,
    InvalidCallError,
)
from .factory import create_element

__all__ = [
    # Facade
    "Cdom",
    "cdom",
    # Builders
    "ElementsBase",
    "HtmlElements",
    "SvgElements",
    "tag_builder",
    "create_element",
    # Ambient parent context
    "current",
    "attach_if_parent",
    "with_current",
    "parent_context",
    # Content and attributes
    "resolve_inner",
    "stringify",
    "classify",
    "AttrAction",
    "BOOLEAN_ATTRIBUTES",
    "NON_ATTRIBUTE_PROPERTIES",
    # Host tree
    "Document",
    "Namespace",
    "Node",
    "Element",
    "Text",
    "Comment",
    "Fragment",
    "Event",
    # Exceptions
    "CdomError",
    "InvalidAttributeError",
    "InvalidCallError",
    "HierarchyError",
]
