"""
🧪 test_offers.py — застосування промо-пропозицій та перевірка придатності.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pricing_engine.domain.pricing.interfaces import Offer
from pricing_engine.domain.pricing.offers import (
    REASON_EXPIRED,
    REASON_GLOBAL_LIMIT,
    REASON_NO_OFFER,
    REASON_NOT_FOUND,
    apply_offer,
    validate_offer,
)


def _offer(**overrides):
    data = {"id": "off-1", "discount_type": "percentage", "discount_value": 10, "code": "SUMMER"}
    data.update(overrides)
    return data


# ================================
# 🎁 apply_offer
# ================================
@pytest.mark.parametrize("offer", [None, {}, {"discount_type": "percentage", "discount_value": 10}])
def test_no_offer_or_missing_id(offer):
    result = apply_offer(80, offer)
    assert result.offer_applied is False
    assert result.discount_amount == Decimal("0")
    assert result.final_subtotal == Decimal("80")
    assert result.reason == REASON_NO_OFFER


def test_min_purchase_gate():
    result = apply_offer(50, _offer(min_purchase_amount=100))
    assert result.offer_applied is False
    assert result.discount_amount == Decimal("0")
    assert result.final_subtotal == Decimal("50")
    assert result.reason == "Minimum purchase amount not met (100 required)"


def test_min_purchase_met_exactly():
    result = apply_offer(100, _offer(min_purchase_amount=100))
    assert result.offer_applied is True
    assert result.discount_amount == Decimal("10.00")


def test_percentage_offer():
    result = apply_offer("59.99", _offer(discount_value=15))
    assert result.offer_applied is True
    assert result.discount_amount == Decimal("9.00")
    assert result.final_subtotal == Decimal("50.99")
    assert result.offer_id == "off-1"
    assert result.offer_type == "percentage"
    assert result.offer_value == Decimal("15")


def test_fixed_amount_never_exceeds_subtotal():
    result = apply_offer(30, _offer(discount_type="fixed_amount", discount_value=50))
    assert result.discount_amount == Decimal("30.00")
    assert result.final_subtotal == Decimal("0.00")


@pytest.mark.parametrize(
    "offer, subtotal, cap",
    [
        (_offer(discount_value=50, max_discount_amount=20), 100, Decimal("20")),
        (_offer(discount_type="fixed_amount", discount_value=40, max_discount_amount="25.5"), 100, Decimal("25.5")),
        (_offer(discount_value=5, max_discount_amount=20), 100, Decimal("20")),
    ],
)
def test_offer_cap_invariant(offer, subtotal, cap):
    result = apply_offer(subtotal, offer)
    assert result.discount_amount <= cap
    assert result.final_subtotal == Decimal(subtotal) - result.discount_amount


def test_cap_without_limit_is_bounded_by_subtotal():
    result = apply_offer(12, _offer(discount_type="fixed_amount", discount_value=100))
    assert result.discount_amount <= Decimal("12")


def test_zero_cap_means_no_cap():
    result = apply_offer(100, _offer(discount_value=30, max_discount_amount=0))
    assert result.discount_amount == Decimal("30.00")


def test_unknown_type_applies_zero_discount():
    result = apply_offer(100, _offer(discount_type="bogo"))
    assert result.offer_applied is True
    assert result.discount_amount == Decimal("0.00")
    assert result.final_subtotal == Decimal("100.00")


def test_accepts_offer_dto():
    offer = Offer(id="o", discount_type="fixed_amount", discount_value=Decimal("5"))
    assert apply_offer(20, offer).final_subtotal == Decimal("15.00")


def test_to_dict_shape():
    payload = apply_offer(100, _offer()).to_dict()
    assert payload == {
        "discountAmount": 10.0,
        "finalSubtotal": 90.0,
        "offerApplied": True,
        "offerId": "off-1",
        "offerType": "percentage",
        "offerValue": 10.0,
    }
    assert apply_offer(100, None).to_dict()["reason"] == REASON_NO_OFFER


# ================================
# ✅ validate_offer
# ================================
NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def test_validate_missing_or_inactive():
    assert validate_offer(None, 100, now=NOW).reason == REASON_NOT_FOUND
    assert validate_offer(_offer(is_active=False), 100, now=NOW).valid is False



def test_null_is_active_counts_as_active():
    assert Offer.from_mapping(_offer(is_active=None)).is_active is True
    assert Offer.from_mapping(_offer()).is_active is True
    assert validate_offer(_offer(is_active=None), 100, now=NOW).valid is True


def test_validate_expired():
    expired = _offer(valid_until=(NOW - timedelta(days=1)).isoformat())
    result = validate_offer(expired, 100, now=NOW)
    assert result.valid is False
    assert result.reason == REASON_EXPIRED


def test_validate_accepts_z_suffix_and_future_dates():
    offer = _offer(valid_until="2026-02-01T00:00:00Z")
    assert validate_offer(offer, 100, now=NOW).valid is True


def test_validate_min_purchase():
    result = validate_offer(_offer(min_purchase_amount="49.5"), 20, now=NOW)
    assert result.valid is False
    assert result.reason == "Minimum purchase amount required: $49.5"


def test_validate_usage_limits():
    offer = _offer(max_usage_global=100, max_usage_per_user=2)
    assert validate_offer(offer, 10, now=NOW, global_usage_count=100).reason == REASON_GLOBAL_LIMIT
    per_user = validate_offer(offer, 10, now=NOW, global_usage_count=3, user_usage_count=2)
    assert per_user.reason == "You have already used this offer 2 times (limit: 2)"
    assert validate_offer(offer, 10, now=NOW).valid is True


def test_validate_returns_normalized_offer():
    result = validate_offer(_offer(), 10, now=NOW)
    assert result.valid is True
    assert isinstance(result.offer, Offer)
    assert result.offer.code == "SUMMER"
