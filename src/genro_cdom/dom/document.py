# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - node factory and markup parser for the host tree.

Raw markup is parsed with lxml's HTML parser and converted into host
nodes. lxml keeps text in ``.text``/``.tail`` slots; the conversion turns
each non-empty slot into a Text node so the result has the same shape a
browser would give.

Example:
    >>> doc = Document()
    >>> fragment = doc.parse_fragment('<b>bold</b> and plain')
    >>> [type(n).__name__ for n in fragment.child_nodes]
    ['Element', 'Text']
"""

from __future__ import annotations

import logging

from lxml import etree
from lxml import html as lxml_html

from .constants import SVG_ATTRIBUTE_NAMES, SVG_TAG_NAMES
from .namespace import SVG_URI, Namespace
from .node import Comment, Element, Fragment, Node, Text

logger = logging.getLogger(__name__)


class Document:
    """Creates host nodes and parses markup into detached fragments."""

    def create_element(self, tag_name: str) -> Element:
        """Create an XHTML element."""
        return Element(tag_name, Namespace.XHTML, owner_document=self)

    def create_element_ns(self, namespace_uri: str | None, tag_name: str) -> Element:
        """Create an element in the namespace identified by ``namespace_uri``."""
        return Element(tag_name, Namespace.from_uri(namespace_uri), owner_document=self)

    def create_text_node(self, data: str) -> Text:
        return Text(data, owner_document=self)

    def create_comment(self, data: str) -> Comment:
        return Comment(data, owner_document=self)

    def create_fragment(self) -> Fragment:
        return Fragment(owner_document=self)

    def parse_fragment(self, markup: str) -> Fragment:
        """Parse ``markup`` into a detached Fragment.

        Elements inside an ``<svg>`` element are created in the SVG
        namespace, with the mixed-case tag and attribute names the HTML
        parser folded to lowercase restored (``viewBox``, ``clipPath``).
        Children of ``foreignObject`` are XHTML again. Processing
        instructions are dropped.

        Args:
            markup: An HTML snippet (not a full document).

        Returns:
            A Fragment holding the top-level parsed nodes.
        """
        fragment = self.create_fragment()
        if not markup.strip():
            if markup:
                fragment.append_child(self.create_text_node(markup))
            return fragment

        items = lxml_html.fragments_fromstring(markup)
        # lxml drops leading text that is only whitespace
        leading = markup[:len(markup) - len(markup.lstrip())]
        if leading and items and not isinstance(items[0], str):
            fragment.append_child(self.create_text_node(leading))

        for item in items:
            if isinstance(item, str):
                fragment.append_child(self.create_text_node(item))
            else:
                self._convert(item, fragment, in_svg=False)

        logger.debug("Parsed %d top-level nodes from markup", len(fragment.child_nodes))
        return fragment

    def _convert(self, source: etree._Element, target: Node, in_svg: bool) -> None:
        """Append the host version of ``source`` (and its tail) to ``target``."""
        if source.tag is etree.Comment:
            target.append_child(self.create_comment(source.text or ''))
        elif isinstance(source.tag, str):
            tag = source.tag
            in_svg = in_svg or tag == 'svg'
            if in_svg:
                tag = SVG_TAG_NAMES.get(tag, tag)
                element = self.create_element_ns(SVG_URI, tag)
            else:
                element = self.create_element(tag)
            for name, value in source.attrib.items():
                if in_svg:
                    name = SVG_ATTRIBUTE_NAMES.get(name, name)
                element.set_attribute(name, value)
            if source.text:
                element.append_child(self.create_text_node(source.text))
            in_svg = in_svg and tag != 'foreignObject'
            for child in source:
                self._convert(child, element, in_svg)
            target.append_child(element)

        if source.tail:
            target.append_child(self.create_text_node(source.tail))
