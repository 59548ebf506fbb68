"""Nigerian bank directory - lookup bank names by CBN bank code."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from nuban.domain.banking.exceptions import BankNotFoundError

# CBN bank codes as published with the NUBAN scheme. Names are kept as
# historically listed, including their original spelling.
NIGERIAN_BANKS: Mapping[str, str] = MappingProxyType(
    {
        "044": "Access Bank",
        "014": "Afribank",
        "023": "Citibank",
        "063": "Diamond Bank",
        "050": "Ecobank",
        "040": "Equitorial Trust Bank",
        "011": "First Bank",
        "214": "FCMB",
        "070": "Fidelity",
        "085": "FinBank",
        "058": "Guaranty Trust Bank",
        "069": "Intercontinentl Bank",
        "056": "Oceanic Bank",
        "082": "BankPhb",
        "076": "Skye Bank",
        "084": "SpringBank",
        "221": "StanbicIBTC",
        "068": "Standard Chartered Bank",
        "232": "Sterling Bank",
        "033": "United Bank For Africa",
        "032": "Union Bank",
        "035": "Wema Bank",
        "057": "Zenith Bank",
        "215": "Unity Bank",
    },
)


@dataclass(frozen=True)
class NigerianBankInfo:
    """A bank registered in the NUBAN scheme."""

    code: str
    name: str

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


class BankDirectory:
    """
    Read-only directory of Nigerian banks keyed by 3-digit bank code.

    The directory wraps a static table and never changes after construction,
    so a single instance can be shared freely between threads.
    """

    def __init__(self, banks: Mapping[str, str] = NIGERIAN_BANKS):
        self._banks = banks

    def __len__(self) -> int:
        return len(self._banks)

    def __contains__(self, bank_code: object) -> bool:
        return bank_code in self._banks

    def __iter__(self) -> Iterator[NigerianBankInfo]:
        for code, name in self._banks.items():
            yield NigerianBankInfo(code=code, name=name)

    def find_by_code(self, bank_code: str) -> Optional[NigerianBankInfo]:
        name = self._banks.get(bank_code)
        if name is None:
            return None
        return NigerianBankInfo(code=bank_code, name=name)

    def get_bank_name(self, bank_code: str) -> str:
        """Return the bank name for ``bank_code``.

        Raises
        ------
        BankNotFoundError
            If the code is not registered.
        """
        info = self.find_by_code(bank_code)
        if info is None:
            raise BankNotFoundError(bank_code=bank_code)
        return info.name

    def list_banks(self) -> dict[str, str]:
        """Return a copy of the code to name table."""
        return dict(self._banks)


# ═══════════════════════════════════════════════════════════════
#           Module-Level Accessor
# ═══════════════════════════════════════════════════════════════

_DEFAULT_DIRECTORY = BankDirectory()


def get_bank_directory() -> BankDirectory:
    """Get the process-wide bank directory."""
    return _DEFAULT_DIRECTORY
