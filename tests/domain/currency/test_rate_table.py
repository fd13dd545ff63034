"""
🧪 test_rate_table.py — незмінна таблиця курсів і сувора перевірка повноти.
"""

from decimal import Decimal

import pytest

from pricing_engine.domain.currency.interfaces import RateTable
from pricing_engine.shared.errors import IncompleteRateTableError


def test_from_mapping_normalizes_to_decimal_and_skips_bad_keys():
    table = RateTable.from_mapping({"EUR/USD": 1.1, "CUP/USD": "120", "garbage": 3, 5: 1})
    assert len(table) == 2
    assert table.get("EUR", "USD") == Decimal("1.1")
    assert table.get("CUP", "USD") == Decimal("120")
    assert "garbage" not in table


@pytest.mark.parametrize("raw", [0, -1, "abc", None, float("nan")])
def test_non_positive_or_invalid_rates_are_absent(raw):
    table = RateTable.from_mapping({"EUR/USD": raw})
    assert table.get("EUR", "USD") is None


def test_keys_are_case_sensitive_and_not_symmetric():
    table = RateTable.from_mapping({"EUR/USD": 1.1})
    assert table.get("eur", "usd") is None
    assert table.get("USD", "EUR") is None


def test_table_is_immutable_snapshot():
    source = {"EUR/USD": 1.1}
    table = RateTable.from_mapping(source)
    source["EUR/USD"] = 9
    assert table.get("EUR", "USD") == Decimal("1.1")
    with pytest.raises(TypeError):
        table.rates["EUR/USD"] = Decimal("2")  # type: ignore[index]


def test_from_mapping_returns_same_table():
    table = RateTable.from_mapping({"EUR/USD": 1})
    assert RateTable.from_mapping(table) is table
    assert len(RateTable.from_mapping(None)) == 0


def test_from_rows_skips_inactive_and_prefers_latest():
    rows = [
        {"from_code": "EUR", "to_code": "USD", "rate": 1.05, "effective_date": "2025-01-01"},
        {"from_code": "EUR", "to_code": "USD", "rate": 1.10, "effective_date": "2025-06-01"},
        {"from_code": "CUP", "to_code": "USD", "rate": 999, "is_active": False},
        {"from_currency": {"code": "MLC"}, "to_currency": {"code": "USD"}, "rate": 1},
        {"to_code": "USD", "rate": 5},
    ]
    table = RateTable.from_rows(rows)
    assert table.get("EUR", "USD") == Decimal("1.1")
    assert table.get("CUP", "USD") is None
    assert table.get("MLC", "USD") == Decimal("1")
    assert len(table) == 2


def test_from_rows_keeps_rows_with_null_active_flag():
    table = RateTable.from_rows([{"from_code": "EUR", "to_code": "USD", "rate": 1.1, "is_active": None}])
    assert table.get("EUR", "USD") == Decimal("1.1")


def test_currencies_and_missing_pairs():
    table = RateTable.from_mapping({"EUR/USD": 1.1, "CUP/USD": 0})
    assert table.currencies() == frozenset({"EUR", "USD", "CUP"})
    assert table.missing_pairs(["USD", "EUR", "CUP", "MXN", "CUP"], "USD") == ["CUP", "MXN"]


def test_require_complete_raises_with_missing_codes():
    table = RateTable.from_mapping({"EUR/USD": 1.1})
    table.require_complete(["USD", "EUR"])
    with pytest.raises(IncompleteRateTableError) as exc:
        table.require_complete(["EUR", "GBP"], "USD")
    assert exc.value.missing == ("GBP",)


def test_completeness_defaults_to_every_currency_in_table():
    table = RateTable.from_mapping({"EUR/USD": 1.1, "CUP/EUR": 130})
    assert table.missing_pairs() == ["CUP"]
    with pytest.raises(IncompleteRateTableError) as exc:
        table.require_complete()
    assert exc.value.missing == ("CUP",)
    RateTable.from_mapping({"EUR/USD": 1.1, "CUP/USD": 120}).require_complete()


def test_to_dict_renders_floats():
    assert RateTable.from_mapping({"EUR/USD": "1.10"}).to_dict() == {"EUR/USD": 1.1}
