# 📉 pricing_engine/domain/pricing/discounts.py
"""
📉 Відсоткові знижки та категорійні знижки покупців.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import Decimal
from typing import Any, Union

# 🧩 Внутрішні модулі проєкту
from .interfaces import UserCategory
from .rounding import HUNDRED, ZERO, clamp_percent, q2, to_decimal
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.discounts")


def discount_amount(price: Any, percent: Any) -> Decimal:
    """📉 `q2(price * clamp(percent) / 100)`; 0 для невалідної чи недодатної ціни або відсотка."""
    base = to_decimal(price)
    if base <= ZERO or to_decimal(percent) <= ZERO:
        return ZERO
    return q2(base * clamp_percent(percent) / HUNDRED)


def apply_discount(price: Any, percent: Any) -> Decimal:
    """📉 Ціна після відсоткової знижки, округлена до 2 знаків."""
    return q2(to_decimal(price) - discount_amount(price, percent))


def derive_percent_from_amount(amount: Any, discount: Any) -> Decimal:
    """Ефективний відсоток знижки відносно суми (лише для показу, без округлення)."""
    base = to_decimal(amount)
    value = to_decimal(discount)
    if base <= ZERO or value <= ZERO:
        return ZERO
    return value / base * HUNDRED


def category_discount_percent(category: Union[UserCategory, str, None], value: Any) -> Decimal:
    """
    🏷️ Відсоток категорійної знижки покупця.

    Невідома категорія трактується як `regular`; сам відсоток задає виклик і обрізається до [0, 100].
    """
    try:
        resolved = UserCategory(category) if category is not None else UserCategory.REGULAR
    except ValueError:
        logger.debug("🏷️ Unknown user category %r → regular", category)
        resolved = UserCategory.REGULAR
    pct = clamp_percent(value)
    logger.debug("🏷️ Category discount | category=%s percent=%s", resolved.value, pct)
    return pct


__all__ = [
    "discount_amount",
    "apply_discount",
    "derive_percent_from_amount",
    "category_discount_percent",
]
