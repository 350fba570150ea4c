# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element namespaces."""

from __future__ import annotations

from enum import Enum

XHTML_URI = "http://www.w3.org/1999/xhtml"
SVG_URI = "http://www.w3.org/2000/svg"


class Namespace(Enum):
    """Selects how an element is constructed.

    The value is the namespace URI used by the host document.
    """

    XHTML = XHTML_URI
    SVG = SVG_URI

    @classmethod
    def from_uri(cls, uri: str | None) -> Namespace:
        """Return the namespace for ``uri``, defaulting to XHTML."""
        if uri == SVG_URI:
            return cls.SVG
        return cls.XHTML
