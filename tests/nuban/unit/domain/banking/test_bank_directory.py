"""Unit tests for BankDirectory."""

import pytest

from nuban.domain.banking.bank_directory import (
    NIGERIAN_BANKS,
    BankDirectory,
    NigerianBankInfo,
    get_bank_directory,
)
from nuban.domain.banking.exceptions import BankNotFoundError
from nuban.domain.shared.exceptions import NotFoundError

EXPECTED_BANKS = {
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
}


class TestNigerianBankInfo:
    """Tests for the NigerianBankInfo dataclass."""

    def test_bank_info_is_immutable(self):
        info = NigerianBankInfo(code="058", name="Guaranty Trust Bank")

        with pytest.raises(AttributeError):
            info.code = "044"  # type: ignore

    def test_str_representation(self):
        info = NigerianBankInfo(code="058", name="Guaranty Trust Bank")

        assert str(info) == "Guaranty Trust Bank (058)"


class TestBankDirectory:
    """Tests for lookups against the static bank table."""

    @pytest.fixture
    def directory(self) -> BankDirectory:
        return BankDirectory()

    def test_contains_exactly_the_registered_banks(self, directory):
        assert directory.list_banks() == EXPECTED_BANKS
        assert len(directory) == 24

    @pytest.mark.parametrize(("code", "name"), sorted(EXPECTED_BANKS.items()))
    def test_get_bank_name_for_every_code(self, directory, code, name):
        assert directory.get_bank_name(code) == name

    @pytest.mark.parametrize("code", ["999", "000", "58", "0580", ""])
    def test_unknown_code_raises_not_found(self, directory, code):
        with pytest.raises(NotFoundError, match="Bank not found"):
            directory.get_bank_name(code)

    def test_find_by_code(self, directory):
        info = directory.find_by_code("033")

        assert info == NigerianBankInfo(code="033", name="United Bank For Africa")

    def test_find_by_code_returns_none_for_unknown(self, directory):
        assert directory.find_by_code("999") is None

    def test_contains_and_iteration(self, directory):
        assert "058" in directory
        assert "999" not in directory
        assert {info.code for info in directory} == set(EXPECTED_BANKS)

    def test_list_banks_returns_a_copy(self, directory):
        banks = directory.list_banks()
        banks["999"] = "Made Up Bank"
        del banks["058"]

        assert "999" not in directory
        assert directory.get_bank_name("058") == "Guaranty Trust Bank"

    def test_static_table_is_read_only(self):
        with pytest.raises(TypeError):
            NIGERIAN_BANKS["999"] = "Made Up Bank"  # type: ignore[index]

    def test_custom_table(self):
        directory = BankDirectory({"999": "Test Bank"})

        assert directory.get_bank_name("999") == "Test Bank"
        with pytest.raises(BankNotFoundError):
            directory.get_bank_name("058")


class TestModuleAccessor:
    def test_get_bank_directory_is_shared(self):
        assert get_bank_directory() is get_bank_directory()
        assert len(get_bank_directory()) == 24
