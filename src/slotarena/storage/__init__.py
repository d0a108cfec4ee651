"""Arena storage: slot table with a threaded free chain."""

from slotarena.storage.errors import (
    DoubleFreeError,
    FreeListCorruptionError,
    FreeListError,
    IndexOutOfRangeError,
    VacantSlotError,
)
from slotarena.storage.free_list import FreeList

__all__ = [
    "FreeList",
    "FreeListError",
    "DoubleFreeError",
    "FreeListCorruptionError",
    "VacantSlotError",
    "IndexOutOfRangeError",
]
