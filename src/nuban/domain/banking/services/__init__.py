"""Domain services for the banking domain."""

from nuban.domain.banking.services.check_digit_service import (
    ACCOUNT_NUMBER_LENGTH,
    BANK_CODE_LENGTH,
    NUBAN_WEIGHTS,
    SERIAL_NUMBER_LENGTH,
    CheckDigitService,
)

__all__ = [
    "ACCOUNT_NUMBER_LENGTH",
    "BANK_CODE_LENGTH",
    "CheckDigitService",
    "NUBAN_WEIGHTS",
    "SERIAL_NUMBER_LENGTH",
]
