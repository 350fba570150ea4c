# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Facade - the public builder surface.

Combines the HTML and SVG tag builders with helpers to splice in
existing nodes, raw markup and text, and to rebuild a node's content.

Example:
    Building a small form::

        from genro_cdom import cdom

        el = cdom.elements

        def fields():
            el.label({'for': 'name'}, 'Name')
            el.input({'id': 'name', 'value': 'Ada', 'required': True})
            el.button({'onclick': submit}, 'Send')

        form = el.form({'id': 'signup'}, fields)

    Rebuilding a list in place::

        cdom.replace_content(ul, lambda: [el.li(item) for item in items])
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

from . import context
from .builders import HtmlElements, SvgElements
from .content import Inner, resolve_inner, stringify
from .dom import Document, Node, Text

logger = logging.getLogger(__name__)

N = TypeVar('N', bound=Node)


class Cdom:
    """Declarative tree builder bound to a host Document.

    Attributes:
        document: The Document creating every node.
        elements: Builders for HTML tags (``cdom.elements.div(...)``).
        svg_elements: Builders for SVG tags (``cdom.svg_elements.circle(...)``).

    Args:
        document: Host document; a new one is created if omitted.
        drop_false_attributes: Remove generic attributes set to False
            instead of writing ``"false"``.
    """

    def __init__(
        self,
        document: Document | None = None,
        *,
        drop_false_attributes: bool = False,
    ) -> None:
        self.document = document if document is not None else Document()
        self.elements = HtmlElements(self.document, drop_false_attributes=drop_false_attributes)
        self.svg_elements = SvgElements(self.document, drop_false_attributes=drop_false_attributes)

    def __repr__(self) -> str:
        return f"Cdom(current={self.current!r})"

    @property
    def current(self) -> Node | None:
        """The node new children attach to, or None."""
        return context.current()

    def wrap_node(self, node: N) -> N:
        """Attach an externally built node to the current parent."""
        return context.attach_if_parent(node)

    def raw_markup(self, markup: str) -> list[Node]:
        """Parse ``markup`` and attach the resulting nodes to the current parent.

        Builders cannot attach inside the parsed nodes: the ambient parent
        does not change.

        Returns:
            The top-level parsed nodes.
        """
        fragment = self.document.parse_fragment(markup)
        nodes = list(fragment.child_nodes)
        context.attach_if_parent(fragment)
        return nodes

    def text(self, value: Any) -> Text:
        """Create a text node for a primitive and attach it."""
        return context.attach_if_parent(self.document.create_text_node(stringify(value)))

    def replace_content(self, node: N, inner: Inner) -> N:
        """Remove every child of ``node``, then fill it from ``inner``."""
        logger.debug("Replacing %d children of %r", len(node.child_nodes), node)
        node.clear()
        return resolve_inner(node, inner)

    @contextmanager
    def within(self, node: N) -> Iterator[N]:
        """Make ``node`` the current parent inside a ``with`` block.

        Example:
            >>> with cdom.within(root):
            ...     cdom.elements.p('attached to root')
        """
        with context.parent_context(node):
            yield node


cdom = Cdom()
