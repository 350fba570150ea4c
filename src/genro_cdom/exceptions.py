# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Cdom exceptions."""

from __future__ import annotations


class CdomError(Exception):
    """Base exception for Cdom errors."""

    pass


class InvalidAttributeError(CdomError):
    """Raised when an attribute map pairs a name with the wrong kind of value.

    Event names (``on*``) require a callable; every other name rejects one.
    """

    pass


class InvalidCallError(CdomError):
    """Raised when a tag builder is called with an unexpected argument shape."""

    pass


class HierarchyError(CdomError):
    """Raised when a node is appended where it would create a cycle."""

    pass
