"""
DiSC Profile — Application Configuration

Loads runtime configuration from environment variables (and an optional .env
file) using Pydantic Settings.  A cached ``get_settings()`` helper is provided
so every call-site receives the same validated instance without re-parsing
the environment.

The logistic calibration constants are deliberately *not* configurable; they
live in ``disc_profile.services.scoring_service``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the scoring engine and its tooling."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # ------------------------------------------------------------------ #
    # Assessment behaviour
    # ------------------------------------------------------------------ #
    REQUIRE_COMPLETE_RESPONSES: bool = False  # reject sets with NONE slots

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def log_level_number(self) -> int:
        """Return LOG_LEVEL as a stdlib ``logging`` level number."""
        return logging.getLevelName(self.LOG_LEVEL)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from disc_profile.config import get_settings
        settings = get_settings()
    """
    return Settings()
