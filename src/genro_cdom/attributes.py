# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute classification - decides how an attribute reaches the element.

An attribute map entry can end up in four places on an element:

- **style text**: ``style`` replaces the whole inline style
- **boolean presence**: known boolean attributes are present as ``"true"``
  when truthy and removed when falsy
- **live property**: ``value`` and ``checked`` are assigned to the element
  property, which tracks form state the markup attribute does not
- **markup attribute**: everything else, stringified; with ``drop_false``
  a generic attribute given ``False`` is removed instead

The rules are checked in that order, so ``checked`` is a boolean
attribute and never reaches the property channel.

Example:
    >>> classify('disabled', 0)
    (<AttrAction.SET_BOOLEAN_PRESENCE: 'boolean'>, False)
    >>> classify('title', None)
    (<AttrAction.SET_ATTRIBUTE: 'attribute'>, '')
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .content import stringify

if TYPE_CHECKING:
    from .dom import Element

NON_ATTRIBUTE_PROPERTIES = ('value', 'checked')

# from html-minifier's list of boolean attributes
BOOLEAN_ATTRIBUTES = frozenset({
    'allowfullscreen', 'async', 'autofocus', 'autoplay', 'checked',
    'compact', 'controls', 'declare', 'default', 'defaultchecked',
    'defaultmuted', 'defaultselected', 'defer', 'disabled', 'enabled',
    'formnovalidate', 'hidden', 'indeterminate', 'inert', 'ismap',
    'itemscope', 'loop', 'multiple', 'muted', 'nohref', 'noresize',
    'noshade', 'novalidate', 'nowrap', 'open', 'pauseonexit', 'readonly',
    'required', 'reversed', 'scoped', 'seamless', 'selected', 'sortable',
    'truespeed', 'typemustmatch', 'visible',
})


class AttrAction(Enum):
    """Where an attribute value is written."""

    SET_STYLE_TEXT = 'style'
    SET_BOOLEAN_PRESENCE = 'boolean'
    ASSIGN_PROPERTY = 'property'
    SET_ATTRIBUTE = 'attribute'
    REMOVE_ATTRIBUTE = 'remove'


def classify(name: str, value: Any, drop_false: bool = False) -> tuple[AttrAction, Any]:
    """Classify an attribute and coerce its value for the chosen action.

    Args:
        name: Attribute name as given by the caller.
        value: A primitive value (never a callable).
        drop_false: Treat a ``False`` generic attribute as absent instead
            of writing ``"false"``.

    Returns:
        Tuple of (action, coerced value). The value is a string for style
        text and markup attributes, a bool for boolean presence,
        unchanged for live properties and None for removal.
    """
    if name == 'style':
        return AttrAction.SET_STYLE_TEXT, stringify(value)
    if name.lower() in BOOLEAN_ATTRIBUTES:
        return AttrAction.SET_BOOLEAN_PRESENCE, bool(value)
    if name in NON_ATTRIBUTE_PROPERTIES:
        return AttrAction.ASSIGN_PROPERTY, value
    if drop_false and value is False:
        return AttrAction.REMOVE_ATTRIBUTE, None
    return AttrAction.SET_ATTRIBUTE, stringify(value)


def apply_attribute(element: Element, name: str, value: Any, drop_false: bool = False) -> AttrAction:
    """Classify ``name``/``value`` and write it to ``element``.

    Returns:
        The action that was applied.
    """
    action, coerced = classify(name, value, drop_false=drop_false)
    if action is AttrAction.SET_STYLE_TEXT:
        element.style_text = coerced
    elif action is AttrAction.SET_BOOLEAN_PRESENCE:
        if coerced:
            element.set_attribute(name, 'true')
        else:
            element.remove_attribute(name)
    elif action is AttrAction.ASSIGN_PROPERTY:
        element.set_property(name, coerced)
    elif action is AttrAction.REMOVE_ATTRIBUTE:
        element.remove_attribute(name)
    else:
        element.set_attribute(name, coerced)
    return action
