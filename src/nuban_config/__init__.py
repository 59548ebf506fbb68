"""Shared library configuration package."""

from .settings import (
    DEFAULT_LOG_FORMAT,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
