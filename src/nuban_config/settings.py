"""Library settings loaded from environment variables.

Configuration sources (in priority order):
1. OS environment variables with the NUBAN_ prefix
2. NUBAN_ENV_FILE environment variable (path to a .env file)
3. Default values

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path from NUBAN_ENV_FILE, if it exists."""
    env_file_path = os.environ.get("NUBAN_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path).expanduser()
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NUBAN_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging (NUBAN_LOG_ prefix)
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Return cached library settings."""
    return Settings(_env_file=_resolve_env_file_path())  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
