# 🧾 pricing_engine/domain/pricing/order_total.py
"""
🧾 Підсумок замовлення: категорійна знижка → пропозиція → доставка → податок.

🔹 Порядок кроків фіксований і не налаштовується викликом.
🔹 Кожна проміжна сума округлюється окремо й потрапляє в результат для аудиту.
🔹 `total_discount` — сума двох знижок, а не різниця підсумків.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків підсумку
from decimal import Decimal                                   # 💵 Точні гроші
from typing import Any, Callable, Iterable, Mapping, Optional # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .discounts import discount_amount
from .interfaces import CompletePrice, OfferLike, PriceBreakdown
from .margin import apply_margin, resolve_margin
from .offers import apply_offer
from .rounding import ZERO, clamp_percent, q2, to_decimal, to_quantity
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.order_total")

PriceFn = Callable[[Mapping[str, Any]], Any]


# ================================
# 🧾 ПІДСУМОК ЗАМОВЛЕННЯ
# ================================
def calculate_order_total(
    subtotal: Any = 0,
    category_discount: Any = 0,
    offer: OfferLike = None,
    shipping_cost: Any = 0,
    tax_percent: Any = 0,
    *,
    currency: Optional[str] = None,
) -> PriceBreakdown:
    """
    🧾 Повна розбивка замовлення.

    Args:
        subtotal: Сума кошика до знижок; відʼємна чи невалідна → 0.
        category_discount: Відсоток категорійної знижки покупця.
        offer: Промо-пропозиція або None.
        shipping_cost: Вартість доставки (знижки на неї не діють); відʼємна чи невалідна → 0.
        tax_percent: Плаский податок у відсотках від (суми після знижок + доставка).
        currency: Код валюти, у якій передано суми (лише для позначки в результаті).
    """
    sub = max(to_decimal(subtotal), ZERO)
    shipping = max(to_decimal(shipping_cost), ZERO)

    # --- 🏷️ Крок 1: категорійна знижка від сирої суми ---
    category_amount = discount_amount(sub, category_discount)
    after_category = q2(sub - category_amount)

    # --- 🎁 Крок 2: пропозиція на суму після категорії ---
    offer_result = apply_offer(after_category, offer)
    after_all = q2(offer_result.final_subtotal)

    # --- 🚚 Крок 3: доставка ---
    with_shipping = q2(after_all + shipping)

    # --- 🧾 Крок 4: податок ---
    tax_amount = discount_amount(with_shipping, tax_percent)

    # --- 💰 Крок 5: разом ---
    total = q2(with_shipping + tax_amount)

    breakdown = PriceBreakdown(
        subtotal=q2(sub),
        category_discount_amount=category_amount,
        category_discount_percent=clamp_percent(category_discount),
        after_category_discount=after_category,
        offer_discount_amount=offer_result.discount_amount,
        offer_applied=offer_result.offer_applied,
        offer_reason=offer_result.reason,
        offer_id=offer_result.offer_id,
        after_all_discounts=after_all,
        shipping_cost=q2(shipping),
        subtotal_with_shipping=with_shipping,
        tax_amount=tax_amount,
        tax_percent=clamp_percent(tax_percent),
        total_discount=q2(category_amount + offer_result.discount_amount),
        total=total,
        currency=currency,
    )
    logger.info(
        "🧾 Order total | subtotal=%s category=-%s offer=-%s shipping=+%s tax=+%s → total=%s %s",
        breakdown.subtotal,
        breakdown.category_discount_amount,
        breakdown.offer_discount_amount,
        breakdown.shipping_cost,
        breakdown.tax_amount,
        breakdown.total,
        currency or "",
    )
    return breakdown


# ================================
# 🛒 КОШИК
# ================================
def calculate_cart_subtotal(items: Optional[Iterable[Mapping[str, Any]]], price_for: Optional[PriceFn] = None) -> Decimal:
    """🛒 Σ ціна × кількість; кількість за замовчуванням 1, ціну можна визначити через `price_for`."""
    subtotal = ZERO
    for item in items or ():
        price = price_for(item) if price_for is not None else item.get("price")
        subtotal += to_decimal(price) * to_quantity(item.get("quantity"))
    return q2(subtotal)


# ================================
# 💵 ЦІНА ОДНІЄЇ ПОЗИЦІЇ
# ================================
def calculate_complete_price(
    base_price: Any,
    profit_margin: Any = None,
    discount: Any = 0,
    exchange_rate: Any = 1,
) -> Optional[CompletePrice]:
    """
    💵 Курс → націнка → знижка для однієї позиції.

    Повертає None для відсутньої чи недодатної базової ціни. Невалідний курс трактується як 1.
    """
    base = to_decimal(base_price)
    if base <= ZERO:
        return None

    rate = to_decimal(exchange_rate)
    if rate <= ZERO:
        logger.warning("⚠️ Invalid exchange rate %r → using 1", exchange_rate)
        rate = Decimal("1")

    after_exchange = q2(base * rate)
    margin = resolve_margin(profit_margin)
    before_discount = apply_margin(after_exchange, margin)
    discount_value = discount_amount(before_discount, discount)

    return CompletePrice(
        base_price=q2(base),
        after_exchange=after_exchange,
        before_discount=before_discount,
        discount_amount=discount_value,
        discount_percent=clamp_percent(discount),
        final_price=q2(before_discount - discount_value),
        profit_margin=margin,
        exchange_rate=rate,
    )


# ================================
# 🏛️ НАЛАШТОВАНИЙ КАЛЬКУЛЯТОР
# ================================
class OrderTotalCalculator:
    """🧾 Обгортка з налаштованим податком і валютою за замовчуванням."""

    def __init__(self, default_tax_percent: Any = 0, currency: Optional[str] = None) -> None:
        self._tax_percent = clamp_percent(default_tax_percent)
        self._currency = currency

    @property
    def tax_percent(self) -> Decimal:
        return self._tax_percent

    def calculate(
        self,
        subtotal: Any,
        category_discount: Any = 0,
        offer: OfferLike = None,
        shipping_cost: Any = 0,
        tax_percent: Any = None,
        *,
        currency: Optional[str] = None,
    ) -> PriceBreakdown:
        return calculate_order_total(
            subtotal,
            category_discount,
            offer,
            shipping_cost,
            self._tax_percent if tax_percent is None else tax_percent,
            currency=currency or self._currency,
        )


__all__ = [
    "calculate_order_total",
    "calculate_cart_subtotal",
    "calculate_complete_price",
    "OrderTotalCalculator",
]
