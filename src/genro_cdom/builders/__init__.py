# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag builders - base class and per-namespace implementations."""

from .base import (
    ElementsBase,
    create,
    is_attribute_map,
    merge_attributes,
    split_arguments,
    tag_builder,
)
from .html import HtmlElements
from .svg import SvgElements

__all__ = [
    'ElementsBase',
    'HtmlElements',
    'SvgElements',
    'create',
    'is_attribute_map',
    'merge_attributes',
    'split_arguments',
    'tag_builder',
]
