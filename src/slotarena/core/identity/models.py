"""Typed index handles.

Usage:
    idx: Idx[str] = Idx.from_raw(3)
    idx.to_raw()  # 3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Idx(Generic[T]):
    """Opaque handle to a slot in a FreeList.

    The type parameter only exists for static checkers: an `Idx[str]` cannot be
    passed where an `Idx[int]` is expected, but at runtime both are a bare int.
    No versioning - once the slot is recycled, the handle refers to the new value.
    """

    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise TypeError(f"Index position must be an int, got {type(self.raw).__name__}")
        if self.raw < 0:
            raise ValueError(f"Index position must be non-negative, got {self.raw}")

    def __hash__(self) -> int:
        return hash(self.raw)

    def __int__(self) -> int:
        return self.raw

    def __index__(self) -> int:
        return self.raw

    def __repr__(self) -> str:
        return f"Idx({self.raw})"

    @classmethod
    def from_raw(cls, raw: int) -> Idx[T]:
        """Wrap a raw storage position.

        Args:
            raw: Non-negative position in the arena's slot table.

        Returns:
            Handle for that position.
        """
        return cls(raw)

    def to_raw(self) -> int:
        return self.raw
