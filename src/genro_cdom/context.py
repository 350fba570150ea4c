# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Ambient parent context - where new nodes attach.

A single slot holds the node that newly built nodes are appended to.
Builder calls read it to attach themselves, and set it to their own node
while their nested callback runs, so nested calls find their parent
without it being passed around::

    def body():
        elements.li('one')      # attaches to the ul
        elements.li('two')

    elements.ul(body)           # ul is the ambient parent inside body()

The slot is only changed by :func:`parent_context` (and
:func:`with_current`, built on it), which always restores the previous
value, also when the callback raises. Nesting of the slot therefore
mirrors the call stack of nested callbacks.

The slot lives in a ContextVar: every thread and asyncio task sees its
own value.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Callable, Iterator, TypeVar

if TYPE_CHECKING:
    from .dom import Node

N = TypeVar('N', bound='Node')

_current_parent: ContextVar[Node | None] = ContextVar('current_parent', default=None)


def current() -> Node | None:
    """Return the node new children attach to, or None."""
    return _current_parent.get()


def attach_if_parent(node: N) -> N:
    """Append ``node`` to the current parent, if there is one.

    Returns:
        ``node``, attached or not.
    """
    parent = _current_parent.get()
    if parent is not None:
        parent.append_child(node)
    return node


@contextmanager
def parent_context(node: N) -> Iterator[N]:
    """Make ``node`` the current parent for the duration of the block.

    The previous parent is restored on exit, whether the block returns
    or raises.

    Example:
        >>> with parent_context(ul):
        ...     elements.li('one')
    """
    previous = _current_parent.get()
    _current_parent.set(node)
    try:
        yield node
    finally:
        _current_parent.set(previous)


def with_current(node: Node, fn: Callable[[], object]) -> None:
    """Call ``fn()`` with ``node`` as the current parent."""
    with parent_context(node):
        fn()
