"""slotarena: slot-recycling arena with typed integer handles.

Usage:
    from slotarena import FreeList, Idx

    names: FreeList[str] = FreeList()
    hello = names.alloc("hello")
    world = names.alloc("world")
    assert names[hello] == "hello"

    names.dealloc(hello)
    goodbye = names.alloc("goodbye")
    assert goodbye == hello  # most recently freed slot is reused first
"""

__version__ = "0.1.0"

# Core primitives
from slotarena.core import Idx

# Configuration
from slotarena.config import FreeListSettings

# Storage
from slotarena.storage import (
    DoubleFreeError,
    FreeList,
    FreeListCorruptionError,
    FreeListError,
    IndexOutOfRangeError,
    VacantSlotError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Idx",
    # Config
    "FreeListSettings",
    # Storage
    "FreeList",
    "FreeListError",
    "DoubleFreeError",
    "FreeListCorruptionError",
    "VacantSlotError",
    "IndexOutOfRangeError",
]
