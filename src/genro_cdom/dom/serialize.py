# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup serialization of host nodes."""

from __future__ import annotations

from html import escape

from .namespace import Namespace
from .node import Comment, Element, Node, Text

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr',
})


def serialize(node: Node) -> str:
    """Return the markup for ``node`` and its descendants.

    Text and attribute values are escaped. XHTML void elements get no end
    tag; childless SVG elements are self-closed.
    """
    if isinstance(node, Text):
        return escape(node.data, quote=False)
    if isinstance(node, Comment):
        return f"<!--{node.data}-->"
    if not isinstance(node, Element):
        return ''.join(serialize(child) for child in node.child_nodes)

    tag = node.tag_name
    attrs = ''.join(f' {name}="{escape(value)}"' for name, value in node.attributes.items())
    inner = ''.join(serialize(child) for child in node.child_nodes)

    if node.namespace is Namespace.XHTML and tag in VOID_ELEMENTS:
        return f"<{tag}{attrs}>"
    if node.namespace is Namespace.SVG and not inner:
        return f"<{tag}{attrs}/>"
    return f"<{tag}{attrs}>{inner}</{tag}>"
