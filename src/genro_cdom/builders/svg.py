# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SvgElements - builders for SVG-namespace tags."""

from __future__ import annotations

from ..dom import Namespace
from .base import ElementsBase


class SvgElements(ElementsBase):
    """Builders for SVG tags, created in the SVG namespace.

    Attribute names keep their case (``viewBox``). Tag names looked up
    by attribute are lowercased like every other tag; use
    :func:`~genro_cdom.builders.create` for mixed-case names such as
    ``foreignObject``.

    Example:
        >>> svg = SvgElements()
        >>> icon = svg.svg({'viewBox': '0 0 10 10'}, lambda: svg.circle({'r': 5}))
        >>> icon.outer_html
        '<svg viewBox="0 0 10 10"><circle r="5"/></svg>'
    """

    _namespace = Namespace.SVG
