# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlElements - builders for XHTML-namespace tags.

Example:
    >>> elements = HtmlElements()
    >>> ul = elements.ul(lambda: [elements.li('Item 1'), elements.li('Item 2')])
    >>> ul.outer_html
    '<ul><li>Item 1</li><li>Item 2</li></ul>'
"""

from __future__ import annotations

from ..dom import Namespace
from .base import ElementsBase


class HtmlElements(ElementsBase):
    """Builders for HTML tags, created with ``Document.create_element``.

    Tag names are not checked against HTML5: ``elements.foo()`` creates
    a ``<foo>`` element.
    """

    _namespace = Namespace.XHTML
