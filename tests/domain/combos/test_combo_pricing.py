"""
🧪 test_combo_pricing.py — «жива» сума складників, запасний знімок і націнка набору.
"""

from decimal import Decimal

from pricing_engine.domain.combos import ComboPricingEngine, PriceSource, compute_combo_pricing
from pricing_engine.infrastructure.currency.currency_converter import CurrencyConverter


def test_live_total_with_combo_margin(catalog):
    combo = {"id": "c1", "products": ["p1", "p2"], "profitMargin": 10}
    pricing = compute_combo_pricing(combo, catalog)
    assert pricing.source is PriceSource.LIVE
    assert pricing.base_price == Decimal("30.00")
    assert pricing.final_price == Decimal("33.00")
    assert pricing.profit_margin == Decimal("10")
    assert pricing.estimated is False


def test_quantities_multiply_unit_prices(catalog):
    combo = {"products": ["p1", "p2"], "product_quantities": {"p1": 2}, "profit_margin": 0}
    pricing = compute_combo_pricing(combo, catalog)
    assert pricing.base_price == Decimal("40.00")
    assert pricing.final_price == Decimal("40.00")


def test_missing_margin_uses_default(catalog):
    combo = {"products": ["p1", "p2"]}
    assert compute_combo_pricing(combo, catalog).final_price == Decimal("42.00")
    assert compute_combo_pricing(combo, catalog, default_profit_margin=35).final_price == Decimal("40.50")


def test_snapshot_used_when_live_total_is_zero(catalog):
    combo = {"id": "old", "products": ["gone"], "baseTotalPrice": "50", "profitMargin": 20}
    pricing = compute_combo_pricing(combo, catalog)
    assert pricing.source is PriceSource.SNAPSHOT
    assert pricing.base_price == Decimal("50.00")
    assert pricing.final_price == Decimal("60.00")


def test_no_products_and_no_snapshot_prices_at_zero():
    pricing = compute_combo_pricing({"products": []}, [])
    assert pricing.source is PriceSource.SNAPSHOT
    assert pricing.final_price == Decimal("0.00")


def test_missing_combo_prices_at_zero(catalog):
    pricing = compute_combo_pricing(None, catalog)
    assert pricing.source is PriceSource.SNAPSHOT
    assert pricing.base_price == Decimal("0.00")
    assert pricing.final_price == Decimal("0.00")
    assert pricing.estimated is False


def test_constituents_converted_to_base_then_to_display_currency(usd_anchored_rates):
    products = [
        {"id": "a", "base_price": 9, "base_currency_id": "EUR"},
        {"id": "b", "base_price": 20, "base_currency_id": "USD"},
    ]
    combo = {"products": ["a", "b"], "profitMargin": 10}
    converter = CurrencyConverter(usd_anchored_rates)
    pricing = compute_combo_pricing(combo, products, converter, selected_currency_id="CUP")
    assert pricing.base_price == Decimal("3600.00")
    assert pricing.final_price == Decimal("3960.00")
    assert pricing.estimated is False


def test_missing_rate_marks_combo_estimated(usd_anchored_rates):
    products = [{"id": "a", "base_price": 100, "base_currency_id": "MXN"}]
    converter = CurrencyConverter(usd_anchored_rates)
    pricing = compute_combo_pricing({"products": ["a"], "profitMargin": 0}, products, converter)
    assert pricing.estimated is True
    assert pricing.final_price == Decimal("100.00")


def test_plain_callable_converter_is_accepted(catalog):
    def double(amount, from_currency, to_currency):
        return Decimal(amount) * 2

    pricing = compute_combo_pricing(
        {"products": ["p1"], "profitMargin": 0}, catalog, double, selected_currency_id="EUR"
    )
    assert pricing.base_price == Decimal("20.00")
    assert pricing.estimated is False


def test_engine_binds_converter_and_defaults(catalog, usd_anchored_rates):
    engine = ComboPricingEngine(CurrencyConverter(usd_anchored_rates), default_profit_margin=35)
    pricing = engine.price({"products": ["p1", "p2"]}, catalog, "EUR")
    assert engine.base_currency_id == "USD"
    assert pricing.base_price == Decimal("27.00")
    assert pricing.final_price == Decimal("36.45")
    assert pricing.to_dict()["source"] == "live"
