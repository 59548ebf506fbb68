"""Shared domain components.

This module exports the exception hierarchy used across the library.
"""

from nuban.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    NotFoundError,
    ParseError,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "ParseError",
    "NotFoundError",
]
