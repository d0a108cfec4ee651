"""Slot-recycling arena.

FreeList stores values in a growable slot table and hands out typed integer
handles. Deallocated slots are pushed onto a free chain threaded through the
slots themselves, so the next alloc reuses the most recently freed position.

Usage:
    names: FreeList[str] = FreeList()
    hello = names.alloc("hello")
    names[hello]            # "hello"
    names[hello] = "hi"
    names.dealloc(hello)    # "hi"; slot is recycled by the next alloc

Gotcha: handles carry no generation. A handle kept after dealloc silently
refers to whatever value reuses its slot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from slotarena.config import FreeListSettings
from slotarena.core.identity import Idx
from slotarena.storage.errors import (
    DoubleFreeError,
    FreeListCorruptionError,
    IndexOutOfRangeError,
    VacantSlotError,
    describe_state,
)
from slotarena.storage.slots import Free, Full, Slot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FreeList(Generic[T]):
    """Arena of values addressed by `Idx[T]` handles.

    Not synchronized: wrap the whole arena in a lock if several threads share it.

    Args:
        item_type: Optional runtime element type. When set, alloc and item
            assignment reject values that are not instances of it.
        settings: Diagnostics/logging configuration (default: FreeListSettings()).
    """

    def __init__(
        self,
        item_type: type[T] | None = None,
        settings: FreeListSettings | None = None,
    ):
        """Create an empty arena: no slots, empty free chain."""
        self._item_type = item_type
        self._settings = settings if settings is not None else FreeListSettings()
        self._first_free: Idx[T] | None = None
        self._slots: list[Slot[T]] = []
        self._live = 0

    @property
    def first_free(self) -> Idx[T] | None:
        """Head of the free chain, None if the next alloc grows storage."""
        return self._first_free

    @property
    def capacity(self) -> int:
        """Number of slots ever created, live or free."""
        return len(self._slots)

    def alloc(self, item: T) -> Idx[T]:
        """Store item and return its handle.

        Reuses the head of the free chain when there is one, otherwise appends
        a new slot.

        Args:
            item: Value to store. The arena owns it until dealloc.

        Returns:
            Handle to the slot now holding item.

        Raises:
            TypeError: If item_type is set and item is not an instance of it.
            FreeListCorruptionError: If the free chain head is already full.
        """
        self._check_type(item)
        idx = self._first_free
        if idx is None:
            idx = Idx.from_raw(len(self._slots))
            self._slots.append(Full(item))
            self._live += 1
            if self._settings.log_growth:
                logger.debug("FreeList grew to %d slots", len(self._slots))
            return idx

        slot = self._slot(idx)
        if isinstance(slot, Full):
            msg = f"Free chain head {idx!r} is already full ({self._describe(idx)})"
            logger.error(msg)
            raise FreeListCorruptionError(msg)

        self._first_free = slot.next_free
        self._slots[idx.to_raw()] = Full(item)
        self._live += 1
        return idx

    def dealloc(self, idx: Idx[T]) -> T:
        """Remove the value at idx and push its slot onto the free chain.

        Args:
            idx: Handle returned by alloc on this arena and not yet deallocated.

        Returns:
            The value that was stored at idx.

        Raises:
            DoubleFreeError: If the slot is already free.
            IndexOutOfRangeError: If idx is past the end of the slot table.
        """
        slot = self._slot(idx)
        if isinstance(slot, Free):
            msg = f"Index {idx!r} was already free ({self._describe(idx)})"
            logger.error(msg)
            raise DoubleFreeError(msg)

        self._slots[idx.to_raw()] = Free(next_free=self._first_free)
        self._first_free = idx
        self._live -= 1
        return slot.item

    def __getitem__(self, idx: Idx[T]) -> T:
        return self._full_slot(idx).item

    def __setitem__(self, idx: Idx[T], item: T) -> None:
        """Replace the value in a live slot. The free chain is unaffected."""
        self._check_type(item)
        self._full_slot(idx).item = item

    def __contains__(self, idx: object) -> bool:
        if not isinstance(idx, Idx) or idx.to_raw() >= len(self._slots):
            return False
        return isinstance(self._slots[idx.to_raw()], Full)

    def __len__(self) -> int:
        return self._live

    def __iter__(self) -> Iterator[Idx[T]]:
        for idx, _ in self.items():
            yield idx

    def items(self) -> Iterator[tuple[Idx[T], T]]:
        """Iterate live (handle, value) pairs in slot order."""
        for raw, slot in enumerate(self._slots):
            if isinstance(slot, Full):
                yield Idx.from_raw(raw), slot.item

    def free_indices(self) -> Iterator[Idx[T]]:
        """Iterate the free chain from its head, i.e. in the order alloc reuses it."""
        idx = self._first_free
        while idx is not None:
            yield idx
            slot = self._slot(idx)
            if isinstance(slot, Full):
                raise FreeListCorruptionError(
                    f"Free chain reaches full slot {idx!r} ({self._describe(idx)})"
                )
            idx = slot.next_free

    def check_invariants(self) -> None:
        """Verify the free chain matches the slot table exactly.

        Raises:
            FreeListCorruptionError: If the chain leaves the table, loops, hits
                a full slot, or misses a free slot; or the live count is off.
        """
        seen: set[int] = set()
        idx = self._first_free
        while idx is not None:
            raw = idx.to_raw()
            if raw >= len(self._slots):
                raise FreeListCorruptionError(
                    f"Free chain leaves the slot table at {idx!r} ({self._describe(idx)})"
                )
            if raw in seen:
                raise FreeListCorruptionError(
                    f"Free chain loops back to {idx!r} ({self._describe(idx)})"
                )
            slot = self._slots[raw]
            if isinstance(slot, Full):
                raise FreeListCorruptionError(
                    f"Free chain reaches full slot {idx!r} ({self._describe(idx)})"
                )
            seen.add(raw)
            idx = slot.next_free

        free = {raw for raw, slot in enumerate(self._slots) if isinstance(slot, Free)}
        if free != seen:
            missing = sorted(free - seen)
            raise FreeListCorruptionError(
                f"Free slots {missing} are not on the free chain ({self._describe(None)})"
            )
        if self._live != len(self._slots) - len(free):
            raise FreeListCorruptionError(
                f"Live count {self._live} does not match slot table ({self._describe(None)})"
            )

    def __repr__(self) -> str:
        return f"FreeList(first_free={self._first_free!r}, slots={self._slots!r})"

    def _slot(self, idx: Idx[T]) -> Slot[T]:
        raw = idx.to_raw()
        if raw >= len(self._slots):
            raise IndexOutOfRangeError(
                f"Index {idx!r} out of range for arena with {len(self._slots)} slots"
            )
        return self._slots[raw]

    def _full_slot(self, idx: Idx[T]) -> Full[T]:
        slot = self._slot(idx)
        if isinstance(slot, Free):
            raise VacantSlotError(f"Index {idx!r} refers to a free slot")
        return slot

    def _check_type(self, item: Any) -> None:
        if self._item_type is not None and not isinstance(item, self._item_type):
            raise TypeError(
                f"Expected {self._item_type.__name__} item, got {type(item).__name__}"
            )

    def _describe(self, idx: Idx[T] | None) -> str:
        return describe_state(
            idx, self._first_free, self._slots, self._settings.diagnostic_slot_limit
        )
