"""Core primitives shared by storage backends."""

from slotarena.core.identity import Idx

__all__ = [
    "Idx",
]
