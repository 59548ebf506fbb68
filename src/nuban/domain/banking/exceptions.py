"""Banking domain exceptions.

This module defines the concrete errors raised while constructing and
validating NUBAN accounts. Each one specialises a shared exception category,
so callers may catch either the category or the specific error.
"""

from nuban.domain.shared.exceptions import (
    ErrorCode,
    NotFoundError,
    ParseError,
    ValidationError,
)

# =============================================================================
# Validation Exceptions
# =============================================================================


class InvalidNubanLengthError(ValidationError):
    """Raised when a bank code or account number has the wrong length."""

    def __init__(
        self,
        field: str,
        expected: int,
        actual: int,
        message: str = "Invalid bank code or account number length",
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_NUBAN_LENGTH,
            details={"field": field, "expected": expected, "actual": actual},
        )


# =============================================================================
# Parse Exceptions
# =============================================================================


class NonDigitCharacterError(ParseError):
    """Raised when a character expected to be a decimal digit is not."""

    def __init__(
        self,
        character: str,
        position: int,
        message: str = "Non-digit character in NUBAN input",
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_DIGIT,
            details={"character": character, "position": position},
        )


# =============================================================================
# Lookup Exceptions
# =============================================================================


class BankNotFoundError(NotFoundError):
    """Raised when a bank code has no entry in the bank directory."""

    def __init__(self, bank_code: str, message: str = "Bank not found") -> None:
        super().__init__(
            message=message,
            code=ErrorCode.BANK_NOT_FOUND,
            details={"bank_code": bank_code},
        )
