# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Content resolution - fill a node from an inner descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar, Union

from .context import with_current
from .dom import Text

if TYPE_CHECKING:
    from .dom import Node

N = TypeVar('N', bound='Node')

# None, a primitive shown as text, or a callback building children
Inner = Union[None, str, int, float, bool, Callable[[], object]]


def stringify(value: Any) -> str:
    """Text form of a primitive: None is empty, booleans are lowercase."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def text_node_for(node: Node | None, value: Any) -> Text:
    """Create a text node for ``value`` in ``node``'s document."""
    data = stringify(value)
    document = node.owner_document if node is not None else None
    if document is None:
        return Text(data)
    return document.create_text_node(data)


def resolve_inner(node: N, inner: Inner = None) -> N:
    """Fill ``node`` from ``inner``.

    Args:
        node: The node receiving the content.
        inner: None does nothing. A callable is run with ``node`` as the
            ambient parent, so builders called inside it attach to
            ``node``. Anything else (``False``, ``0`` and ``''`` included)
            is appended as one text node.

    Returns:
        ``node``.
    """
    if inner is None:
        return node
    if callable(inner):
        with_current(node, inner)
    else:
        node.append_child(text_node_for(node, inner))
    return node
