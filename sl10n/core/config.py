"""Library configuration via Pydantic Settings.

Reads ``SL10N_*`` environment variables (and an optional .env file).
Use ``get_settings()`` to obtain a cached singleton.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validated sl10n settings sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SL10N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    # Log soft misses (unknown key/language) at WARNING instead of DEBUG.
    LOG_MISSES: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    return Settings()
