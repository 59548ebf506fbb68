"""Root pytest configuration.

Test Structure:
    tests/
    ├── nuban/                 # Library tests
    │   └── unit/              # Fast, isolated tests
    └── nuban_config/          # Settings tests

Every test starts with a clean settings cache and without NUBAN_* variables
leaking in from the developer's shell.
"""

import logging

import pytest

from nuban import NubanAccount
from nuban_config import clear_settings_cache

_NUBAN_ENV_VARS = ("NUBAN_ENV_FILE", "NUBAN_LOG_LEVEL", "NUBAN_LOG_FORMAT")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Clear settings cache and NUBAN_* env vars around each test."""
    for name in _NUBAN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def nuban_logger():
    """Provide the library logger and restore its state afterwards."""
    logger = logging.getLogger("nuban")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def valid_account() -> NubanAccount:
    """A GTBank account whose check digit is correct."""
    return NubanAccount("058", "0152792740")


@pytest.fixture
def invalid_account() -> NubanAccount:
    """A GTBank account whose check digit is wrong (expected 4, stored 5)."""
    return NubanAccount("058", "0982736625")
