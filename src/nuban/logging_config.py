"""Logging setup for applications embedding the nuban library."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from nuban_config.settings import Settings, get_settings

LOGGER_NAME = "nuban"

_HANDLER_NAME = "nuban-console"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    settings: Settings | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure console logging for the nuban logger.

    Sets up:
    - One stream handler with timestamps and module names
    - Configurable log level (from settings, WARNING when unknown)

    Calling it again replaces the previously installed handler, so the
    last call wins. The root logger is never touched.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.log_format, datefmt=_DATE_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger
