"""Shared test fixtures."""

import pytest

from slotarena import FreeList, FreeListSettings


@pytest.fixture
def free_list() -> FreeList[str]:
    """Fresh, untyped FreeList."""
    return FreeList()


@pytest.fixture
def settings() -> FreeListSettings:
    return FreeListSettings()
