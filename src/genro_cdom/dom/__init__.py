# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Host tree - the node representation the builders mutate.

The package is organized into:
- node: Node, Element, Text, Comment, Fragment and Event
- document: Document, the node factory and markup parser
- namespace: the XHTML/SVG Namespace enum
- serialize: markup output for inspection
"""

from .document import Document
from .namespace import SVG_URI, XHTML_URI, Namespace
from .node import Comment, Element, Event, Fragment, Node, Text
from .serialize import serialize

__all__ = [
    "Document",
    "Namespace",
    "SVG_URI",
    "XHTML_URI",
    "Node",
    "Element",
    "Text",
    "Comment",
    "Fragment",
    "Event",
    "serialize",
]
