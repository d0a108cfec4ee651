"""FreeList errors.

All of these signal a broken caller contract, not a transient condition.
The arena is left untouched when one is raised.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from slotarena.core.identity import Idx


class FreeListError(Exception):
    """Base class for arena contract violations."""

    pass


class DoubleFreeError(FreeListError):
    """Raised when dealloc targets a slot that is already free."""

    pass


class FreeListCorruptionError(FreeListError):
    """Raised when the free chain disagrees with the slot table."""

    pass


class VacantSlotError(FreeListError, KeyError):
    """Raised when looking up an index whose slot is free."""

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ""


class IndexOutOfRangeError(FreeListError, IndexError):
    """Raised when an index points past the end of the slot table."""

    pass


def describe_state(
    idx: Idx[Any] | None,
    first_free: Idx[Any] | None,
    slots: Sequence[Any],
    limit: int | None = None,
) -> str:
    """Render arena state for an error message.

    Args:
        idx: Offending index.
        first_free: Current head of the free chain.
        slots: Slot table.
        limit: Maximum number of slots to render (None renders all).

    Returns:
        One-line diagnostic string.
    """
    shown = list(slots if limit is None else slots[:limit])
    table = ", ".join(f"{pos}: {slot!r}" for pos, slot in enumerate(shown))
    if limit is not None and len(slots) > limit:
        table += f", ... ({len(slots) - limit} more)"
    return f"index={idx!r}, first_free={first_free!r}, slots=[{table}]"
