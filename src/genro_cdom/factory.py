# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node factory - create one configured element from a tag and attributes."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .attributes import apply_attribute
from .dom import SVG_URI, Document, Element, Namespace
from .exceptions import InvalidAttributeError

logger = logging.getLogger(__name__)

EVENT_PREFIX = 'on'


def create_element(
    document: Document,
    tag_name: str,
    namespace: Namespace,
    attrs: Mapping[str, Any] | None = None,
    *,
    drop_false_attributes: bool = False,
) -> Element:
    """Create an element and apply ``attrs`` to it.

    Attributes are applied in mapping order:

    - ``on*`` names register their value as an event listener for the rest
      of the name, lowercased (``onClick`` listens for ``click``)
    - other names go through :func:`~genro_cdom.attributes.apply_attribute`,
      with None passed as the empty string

    Args:
        document: Host document creating the element.
        tag_name: Tag name, used verbatim.
        namespace: XHTML or SVG.
        attrs: Optional attribute map.
        drop_false_attributes: Remove generic attributes set to False.

    Returns:
        The new element, not attached anywhere.

    Raises:
        InvalidAttributeError: If an ``on*`` value is not callable, or any
            other value is.
    """
    if namespace is Namespace.SVG:
        element = document.create_element_ns(SVG_URI, tag_name)
    else:
        element = document.create_element(tag_name)

    if not attrs:
        return element

    for name, value in attrs.items():
        if name.startswith(EVENT_PREFIX):
            if not callable(value):
                raise InvalidAttributeError(
                    f"Got non-function for event name '{name}' on <{tag_name}>: "
                    f"{type(value).__name__}"
                )
            event_type = name[len(EVENT_PREFIX):].lower()
            element.add_event_listener(event_type, value)
            logger.debug("Registered '%s' listener on <%s>", event_type, tag_name)
        elif callable(value):
            raise InvalidAttributeError(
                f"Got function for non-event attribute name '{name}' on <{tag_name}>"
            )
        else:
            apply_attribute(
                element, name, '' if value is None else value,
                drop_false=drop_false_attributes,
            )

    return element
