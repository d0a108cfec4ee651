"""Index identity: typed handles into an arena."""

from slotarena.core.identity.models import Idx

__all__ = [
    "Idx",
]
