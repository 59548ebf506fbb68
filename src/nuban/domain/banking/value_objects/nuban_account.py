"""NUBAN account value object."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nuban.domain.banking.bank_directory import get_bank_directory
from nuban.domain.banking.exceptions import InvalidNubanLengthError
from nuban.domain.banking.services.check_digit_service import (
    ACCOUNT_NUMBER_LENGTH,
    BANK_CODE_LENGTH,
    SERIAL_NUMBER_LENGTH,
    CheckDigitService,
)

logger = logging.getLogger(__name__)


class NubanAccount(BaseModel):
    """
    Value object representing a Nigerian Uniform Bank Account Number.

    Only the lengths of ``bank_code`` and ``account_number`` are checked on
    construction. Their characters are parsed as digits when the check digit
    is computed, so a non-digit surfaces as a ParseError from
    ``calculate_check_digit()`` or ``is_valid()``.
    """

    bank_code: str = Field(..., description="3-digit CBN bank code")
    account_number: str = Field(
        ...,
        description="10-digit account number, the last digit being the check digit",
    )

    model_config = ConfigDict(
        frozen=True,  # Immutable
        str_strip_whitespace=False,  # Hold exact copies of the input
    )

    # overriding pydantic init to allow positional arguments NubanAccount("058", "...")
    def __init__(
        self,
        bank_code: str | None = None,
        account_number: str | None = None,
        **data: Any,
    ):
        if "bank_code" not in data:
            data["bank_code"] = bank_code
        if "account_number" not in data:
            data["account_number"] = account_number
        super().__init__(**data)

    @field_validator("bank_code")
    @classmethod
    def validate_bank_code_length(cls, v: str) -> str:
        if len(v) != BANK_CODE_LENGTH:
            raise InvalidNubanLengthError(
                field="bank_code",
                expected=BANK_CODE_LENGTH,
                actual=len(v),
            )
        return v

    @field_validator("account_number")
    @classmethod
    def validate_account_number_length(cls, v: str) -> str:
        if len(v) != ACCOUNT_NUMBER_LENGTH:
            raise InvalidNubanLengthError(
                field="account_number",
                expected=ACCOUNT_NUMBER_LENGTH,
                actual=len(v),
            )
        return v

    @classmethod
    def create(cls, bank_code: str, account_number: str) -> "NubanAccount":
        return cls(bank_code=bank_code, account_number=account_number)

    @classmethod
    def from_serial(cls, bank_code: str, serial_number: str) -> "NubanAccount":
        """Create an account by appending the check digit to a 9-digit serial."""
        if len(bank_code) != BANK_CODE_LENGTH:
            raise InvalidNubanLengthError(
                field="bank_code",
                expected=BANK_CODE_LENGTH,
                actual=len(bank_code),
            )
        if len(serial_number) != SERIAL_NUMBER_LENGTH:
            raise InvalidNubanLengthError(
                field="serial_number",
                expected=SERIAL_NUMBER_LENGTH,
                actual=len(serial_number),
            )

        check_digit = CheckDigitService.calculate(bank_code, serial_number)
        return cls(bank_code=bank_code, account_number=f"{serial_number}{check_digit}")

    @classmethod
    def banks(cls) -> dict[str, str]:
        """Return the code to name table of all known banks."""
        return get_bank_directory().list_banks()

    @property
    def serial_number(self) -> str:
        return self.account_number[:SERIAL_NUMBER_LENGTH]

    @property
    def masked_account_number(self) -> str:
        return "*" * (len(self.account_number) - 4) + self.account_number[-4:]

    def calculate_check_digit(self) -> int:
        return CheckDigitService.calculate(self.bank_code, self.serial_number)

    def is_valid(self) -> bool:
        """Check whether the stored check digit matches the computed one.

        Raises
        ------
        NonDigitCharacterError
            If the bank code or account number contains a non-digit.
        """
        stored = CheckDigitService.parse_digit(
            self.account_number[-1],
            position=BANK_CODE_LENGTH + SERIAL_NUMBER_LENGTH,
        )
        expected = self.calculate_check_digit()

        if stored != expected:
            logger.debug(
                "Check digit mismatch for %s/%s: stored=%d expected=%d",
                self.bank_code,
                self.masked_account_number,
                stored,
                expected,
            )
            return False
        return True

    def get_bank_name(self) -> str:
        """Return the name of the bank this account belongs to.

        Raises
        ------
        BankNotFoundError
            If the bank code is not in the directory.
        """
        return get_bank_directory().get_bank_name(self.bank_code)

    def __repr__(self) -> str:
        return (
            f"NubanAccount(bank_code={self.bank_code!r}, "
            f"account_number={self.masked_account_number!r})"
        )

    def __str__(self) -> str:
        return f"{self.bank_code}-{self.account_number}"
