"""
🧪 test_discounts.py — відсоткові та категорійні знижки.
"""

from decimal import Decimal

import pytest

from pricing_engine.domain.pricing.discounts import (
    apply_discount,
    category_discount_percent,
    derive_percent_from_amount,
    discount_amount,
)
from pricing_engine.domain.pricing.interfaces import UserCategory


def test_discount_amount_basic():
    assert discount_amount(100, 10) == Decimal("10.00")
    assert discount_amount("19.99", 15) == Decimal("3.00")


@pytest.mark.parametrize("price, pct", [(0, 10), (-5, 10), (100, 0), (100, -3), (None, 10), (100, "abc")])
def test_discount_amount_zero_for_non_positive(price, pct):
    assert discount_amount(price, pct) == Decimal("0")


def test_discount_percent_capped_at_hundred():
    assert discount_amount(80, 250) == Decimal("80.00")
    assert apply_discount(80, 250) == Decimal("0.00")


@pytest.mark.parametrize("price", ["0.01", "9.99", "100", "1234.56", "0.05"])
@pytest.mark.parametrize("pct", [0, 1, 33.3, 50, 99.99, 100])
def test_discount_bound(price, pct):
    amount = discount_amount(price, pct)
    assert Decimal("0") <= amount <= Decimal(price)


@pytest.mark.parametrize("price", ["0", "10", "19.99", "0.015"])
def test_zero_discount_idempotence(price):
    assert apply_discount(price, 0) == Decimal(price).quantize(Decimal("0.01"), rounding="ROUND_HALF_UP")


def test_derive_percent_from_amount():
    assert derive_percent_from_amount(200, 50) == Decimal("25")
    assert derive_percent_from_amount(0, 50) == Decimal("0")
    assert derive_percent_from_amount(100, 0) == Decimal("0")


@pytest.mark.parametrize("category", ["regular", "pro", "vip", UserCategory.VIP, "unknown", None])
def test_category_discount_percent_is_clamped(category):
    assert category_discount_percent(category, 12) == Decimal("12")
    assert category_discount_percent(category, 120) == Decimal("100")
    assert category_discount_percent(category, None) == Decimal("0")
