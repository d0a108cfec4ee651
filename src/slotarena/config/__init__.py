"""Configuration module using Pydantic Settings.

Usage:
    from slotarena.config import FreeListSettings

    settings = FreeListSettings(diagnostic_slot_limit=16)
"""

from slotarena.config.settings import FreeListSettings

__all__ = [
    "FreeListSettings",
]
