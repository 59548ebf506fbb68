"""NUBAN check digit calculation service.

The approved NUBAN format is ``[ABC][DEFGHIJKL][M]`` where

- ``ABC`` is the 3-digit bank code
- ``DEFGHIJKL`` is the 9-digit account serial number
- ``M`` is the check digit

The check digit is derived from the 12 digits ``ABCDEFGHIJKL`` using the
weighted-sum algorithm published by the Central Bank of Nigeria.
"""

from __future__ import annotations

from nuban.domain.banking.exceptions import (
    InvalidNubanLengthError,
    NonDigitCharacterError,
)

NUBAN_WEIGHTS: tuple[int, ...] = (3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)

BANK_CODE_LENGTH = 3
SERIAL_NUMBER_LENGTH = 9
ACCOUNT_NUMBER_LENGTH = SERIAL_NUMBER_LENGTH + 1

# str.isdigit() also accepts non-ASCII digits, which are not valid here
_ASCII_DIGITS = frozenset("0123456789")


class CheckDigitService:
    """Service for computing and parsing NUBAN check digits."""

    @staticmethod
    def parse_digit(character: str, position: int = 0) -> int:
        """Parse a single ASCII decimal digit.

        Raises
        ------
        NonDigitCharacterError
            If ``character`` is not one of ``0``-``9``.
        """
        if character not in _ASCII_DIGITS:
            raise NonDigitCharacterError(character=character, position=position)
        return int(character)

    @staticmethod
    def calculate(bank_code: str, serial_number: str) -> int:
        """Calculate the check digit for a bank code and 9-digit serial.

        Returns
        -------
        The check digit, always in the range 0-9.

        Raises
        ------
        InvalidNubanLengthError
            If the combined input is not exactly 12 characters long.
        NonDigitCharacterError
            If any of the 12 characters is not a decimal digit.
        """
        nuban_chars = bank_code + serial_number
        if len(nuban_chars) != len(NUBAN_WEIGHTS):
            raise InvalidNubanLengthError(
                field="bank_code+serial_number",
                expected=len(NUBAN_WEIGHTS),
                actual=len(nuban_chars),
            )

        check_sum = sum(
            weight * CheckDigitService.parse_digit(char, position)
            for position, (weight, char) in enumerate(zip(NUBAN_WEIGHTS, nuban_chars))
        )

        check_digit = 10 - (check_sum % 10)
        return 0 if check_digit == 10 else check_digit
