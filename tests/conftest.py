# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures."""

import pytest

from genro_cdom import Cdom, Document


@pytest.fixture
def cd():
    """A Cdom bound to a fresh Document."""
    return Cdom()


@pytest.fixture
def el(cd):
    """HTML tag builders of the ``cd`` fixture."""
    return cd.elements


@pytest.fixture
def doc():
    return Document()
