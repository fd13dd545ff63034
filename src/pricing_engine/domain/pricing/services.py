# 📦 pricing_engine/domain/pricing/services.py
"""
📦 Фасад ціноутворення для шару застосунку.

🔹 Звʼязує конвертер, націнку, знижки, комбо та підсумок замовлення з налаштуваннями магазину.
🔹 Не має побічних ефектів: курси, каталог і пропозиції передає виклик.
🔹 Утримує конфігураційні параметри у відокремленому контейнері `PricingConfig`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків розрахунку
from dataclasses import dataclass                             # 🧱 Immutable-конфіг сервісу
from decimal import Decimal                                   # 💵 Точні гроші (без float)
from typing import Any, Dict, List, Optional                  # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .breakdown import build_discount_breakdown
from .interfaces import DiscountBreakdown, OfferLike, PriceBreakdown
from .margin import DEFAULT_MARGIN_PERCENT, MarginEngine
from .order_total import OrderTotalCalculator
from pricing_engine.domain.combos.adapters import CatalogLike, ComboLike
from pricing_engine.domain.combos.interfaces import ComboPricing, StockIssue
from pricing_engine.domain.combos.services import ComboPricingEngine
from pricing_engine.domain.currency.interfaces import DEFAULT_BASE_CURRENCY, RateTable
from pricing_engine.infrastructure.currency.currency_converter import CurrencyConverter, RatesLike
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")


# ================================
# ⚙️ НАЛАШТУВАННЯ
# ================================
@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Конфігураційні параметри магазину для конвеєра."""

    base_currency: str = DEFAULT_BASE_CURRENCY                 # ⚓ Якірна валюта курсів і наборів
    default_margin_percent: Decimal = DEFAULT_MARGIN_PERCENT   # 📈 Націнка товарів за замовчуванням
    combo_profit_percent: Decimal = Decimal("35")              # 🎁 Націнка наборів без власної
    tax_percent: Decimal = Decimal("0")                        # 🧾 Плаский податок


@dataclass(frozen=True, slots=True)
class DisplayPrice:
    """🏷️ Ціна для показу покупцю: до та після його знижок."""

    currency: str
    breakdown: DiscountBreakdown
    estimated: bool = False
    combo: Optional[ComboPricing] = None

    @property
    def original(self) -> Decimal:
        return self.breakdown.base_amount

    @property
    def final(self) -> Decimal:
        return self.breakdown.final_amount

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "currency": self.currency,
            "original": float(self.original),
            "final": float(self.final),
            "estimated": self.estimated,
            "discounts": self.breakdown.to_dict(),
        }
        if self.combo is not None:
            payload["combo"] = self.combo.to_dict()
        return payload


# ================================
# 🏛️ ФАСАД
# ================================
class PricingService:
    """💸 Доменний сервіс, що виконує **чистий** конвеєр розрахунку ціни."""

    def __init__(self, cfg: PricingConfig | None = None, rates: RatesLike = None) -> None:
        """
        ⚙️ Привʼязує сервіс до налаштувань і знімка курсів.

        Args:
            cfg: Налаштування магазину, опційні.
            rates: Таблиця курсів на час розрахунків (`RateTable` або мапа).
        """
        self._cfg = cfg or PricingConfig()                                      # 🧾 Активний конфіг
        self._converter = CurrencyConverter(rates, base_currency=self._cfg.base_currency)
        self._margin = MarginEngine(self._cfg.default_margin_percent)
        self._combos = ComboPricingEngine(
            self._converter,
            base_currency_id=self._cfg.base_currency,
            default_profit_margin=self._cfg.combo_profit_percent,
        )
        self._orders = OrderTotalCalculator(self._cfg.tax_percent)

    # ---------- 🔧 Доступ ----------
    @property
    def config(self) -> PricingConfig:
        return self._cfg

    @property
    def converter(self) -> CurrencyConverter:
        return self._converter

    @property
    def rates(self) -> RateTable:
        return self._converter.rates

    def with_rates(self, rates: RatesLike) -> "PricingService":
        """🔁 Той самий конфіг, новий знімок курсів."""
        return PricingService(self._cfg, rates)

    # ================================
    # 🔢 ПУБЛІЧНИЙ API
    # ================================
    def price_with_margin(self, base_price: Any, margin_percent: Any = None) -> Decimal:
        """📈 Ціна товару з націнкою (None → націнка магазину)."""
        return self._margin.apply(base_price, margin_percent)

    def product_price(
        self,
        price: Any,
        from_currency: str,
        to_currency: Optional[str] = None,
        category_percent: Any = 0,
        offer: OfferLike = None,
    ) -> DisplayPrice:
        """
        🏷️ Ціна товару, що ВЖЕ містить націнку: конверсія → знижки покупця.

        Націнка тут повторно не застосовується.
        """
        target = to_currency or self._cfg.base_currency
        conversion = self._converter.convert_detailed(price, from_currency, target)
        breakdown = build_discount_breakdown(conversion.amount, category_percent, offer)
        logger.info(
            "🏷️ Product price | %s %s → %s %s path=%s final=%s",
            price,
            from_currency,
            conversion.amount,
            target,
            conversion.path.value,
            breakdown.final_amount,
        )
        return DisplayPrice(target, breakdown, conversion.estimated)

    def combo_price(
        self,
        combo: ComboLike,
        products: CatalogLike,
        selected_currency: Optional[str] = None,
        category_percent: Any = 0,
    ) -> DisplayPrice:
        """🎁 Ціна набору у валюті показу з категорійною знижкою покупця."""
        target = selected_currency or self._cfg.base_currency
        pricing = self._combos.price(combo, products, target)
        breakdown = build_discount_breakdown(pricing.final_price, category_percent)
        return DisplayPrice(target, breakdown, pricing.estimated, pricing)

    def order_total(
        self,
        subtotal: Any,
        category_percent: Any = 0,
        offer: OfferLike = None,
        shipping_cost: Any = 0,
        tax_percent: Any = None,
        currency: Optional[str] = None,
    ) -> PriceBreakdown:
        """🧾 Підсумок замовлення (податок за замовчуванням — з конфігу)."""
        return self._orders.calculate(
            subtotal,
            category_percent,
            offer,
            shipping_cost,
            tax_percent,
            currency=currency or self._cfg.base_currency,
        )

    def combo_stock_issues(self, combo: ComboLike, products: CatalogLike, language: str = "es") -> List[StockIssue]:
        return self._combos.stock_issues(combo, products, language)


__all__ = ["PricingConfig", "DisplayPrice", "PricingService"]
