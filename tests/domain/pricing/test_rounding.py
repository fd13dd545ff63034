"""
🧪 test_rounding.py — Decimal-утиліти конвеєра.
"""

from decimal import Decimal

import pytest

from pricing_engine.domain.pricing.rounding import clamp_percent, percent, q2, round_half_up, to_decimal, to_quantity


@pytest.mark.parametrize("raw", [None, True, False, "", "abc", float("nan"), float("inf"), "-Infinity", object()])
def test_to_decimal_invalid_becomes_zero(raw):
    assert to_decimal(raw) == Decimal("0")


def test_to_decimal_avoids_float_artifacts():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(" 12.50 ") == Decimal("12.50")
    assert to_decimal(Decimal("3")) == Decimal("3")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.005", "1.01"),
        ("2.675", "2.68"),
        ("-1.005", "-1.01"),
        ("10", "10.00"),
        (None, "0.00"),
    ],
)
def test_q2_rounds_half_away_from_zero(raw, expected):
    assert q2(raw) == Decimal(expected)
    assert q2(raw).as_tuple().exponent == -2


def test_q2_handles_amounts_beyond_default_precision():
    huge = q2(Decimal("1e30"))
    assert huge == Decimal("1e30")
    assert huge.as_tuple().exponent == -2
    assert q2("123456789012345678901234567890.125") == Decimal("123456789012345678901234567890.13")


def test_round_half_up_with_custom_places():
    assert round_half_up("2.5", 0) == Decimal("3")
    assert round_half_up("1.0005", 3) == Decimal("1.001")
    assert round_half_up("abc", 2) == Decimal("0.00")


@pytest.mark.parametrize(
    "raw, expected",
    [(-5, "0"), (0, "0"), (15, "15"), ("99.5", "99.5"), (150, "100"), ("abc", "0"), (None, "0")],
)
def test_clamp_percent(raw, expected):
    assert clamp_percent(raw) == Decimal(expected)


def test_percent_is_unrounded_share():
    assert percent("10.01", 50) == Decimal("5.005")


@pytest.mark.parametrize("raw, expected", [(None, 1), (0, 1), (-2, 1), ("3", 3), (2.9, 2), ("x", 1)])
def test_to_quantity(raw, expected):
    assert to_quantity(raw) == expected
