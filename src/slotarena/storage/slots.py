"""Slot states for FreeList storage.

Every position in the slot table is either Full (holds a live item) or Free
(threaded into the free chain via `next_free`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from slotarena.core.identity import Idx

T = TypeVar("T")


@dataclass(slots=True)
class Full(Generic[T]):
    """Occupied slot."""

    item: T


@dataclass(slots=True)
class Free(Generic[T]):
    """Vacant slot. `next_free` is None at the tail of the free chain."""

    next_free: Idx[T] | None = None


Slot: TypeAlias = Full[T] | Free[T]
