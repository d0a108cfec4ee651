"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for arenas.

Usage:
    from slotarena.config import FreeListSettings

    # Load from environment variables (SLOTARENA_*)
    settings = FreeListSettings()

    # Or override with explicit values
    settings = FreeListSettings(diagnostic_slot_limit=32)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FreeListSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for FreeList arenas.

    Attributes:
        diagnostic_slot_limit: Maximum slots rendered in error messages
            (None renders the full slot table).
        log_growth: Emit a DEBUG record whenever the slot table grows.

    Environment Variables:
        SLOTARENA_DIAGNOSTIC_SLOT_LIMIT
        SLOTARENA_LOG_GROWTH
    """

    model_config = SettingsConfigDict(
        env_prefix="SLOTARENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    diagnostic_slot_limit: int | None = Field(default=None, ge=1)
    log_growth: bool = False
