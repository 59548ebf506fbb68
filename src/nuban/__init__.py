"""Validation of Nigerian Uniform Bank Account Numbers (NUBAN).

Example
-------
>>> from nuban import NubanAccount
>>> account = NubanAccount("058", "0152792740")
>>> account.is_valid()
True
>>> account.get_bank_name()
'Guaranty Trust Bank'
"""

import logging

from nuban.domain.banking.bank_directory import (
    NIGERIAN_BANKS,
    BankDirectory,
    NigerianBankInfo,
    get_bank_directory,
)
from nuban.domain.banking.exceptions import (
    BankNotFoundError,
    InvalidNubanLengthError,
    NonDigitCharacterError,
)
from nuban.domain.banking.services import NUBAN_WEIGHTS, CheckDigitService
from nuban.domain.banking.value_objects import NubanAccount
from nuban.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    NotFoundError,
    ParseError,
    ValidationError,
)
from nuban.logging_config import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Value objects
    "NubanAccount",
    # Directory
    "BankDirectory",
    "NIGERIAN_BANKS",
    "NigerianBankInfo",
    "get_bank_directory",
    # Check digit
    "CheckDigitService",
    "NUBAN_WEIGHTS",
    # Exceptions
    "ErrorCode",
    "DomainException",
    "ValidationError",
    "ParseError",
    "NotFoundError",
    "InvalidNubanLengthError",
    "NonDigitCharacterError",
    "BankNotFoundError",
    # Logging
    "configure_logging",
]
