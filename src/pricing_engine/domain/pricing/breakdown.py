# 📉 pricing_engine/domain/pricing/breakdown.py
"""
📉 Розбивка знижок для показу: категорійна знижка, потім пропозиція на залишок.

🔹 Знижки накладаються послідовно, а не додаються до початкової суми.
🔹 Відсотки в результаті — лише для відображення; повторно в розрахунках не використовуються.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Діагностика розбивки
from typing import Any                                        # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .discounts import derive_percent_from_amount, discount_amount
from .interfaces import DiscountBreakdown, DiscountType, Offer, OfferLike
from .offers import apply_offer
from .rounding import ZERO, clamp_percent, q2, to_decimal
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.breakdown")


def build_discount_breakdown(amount: Any = 0, category_percent: Any = 0, offer: OfferLike = None) -> DiscountBreakdown:
    """
    📉 Будує розбивку знижок для суми.

    Args:
        amount: Початкова сума (до знижок).
        category_percent: Відсоток категорійної знижки покупця.
        offer: Пропозиція (DTO чи сирий запис) або None.

    Returns:
        DiscountBreakdown: Суми кожної знижки, підсумок і ефективний відсоток.
    """
    base = max(to_decimal(amount), ZERO)

    # --- 🏷️ Крок 1: категорійна знижка ---
    category_amount = discount_amount(base, category_percent)
    after_category = q2(base - category_amount)

    # --- 🎁 Крок 2: пропозиція на суму після категорії ---
    normalized = Offer.from_mapping(offer)
    offer_result = apply_offer(after_category, normalized)
    offer_amount = offer_result.discount_amount

    offer_percent = ZERO
    if offer_result.offer_applied and normalized is not None:
        if normalized.discount_type == DiscountType.PERCENTAGE.value:
            offer_percent = q2(clamp_percent(normalized.discount_value))
        else:
            offer_percent = q2(derive_percent_from_amount(after_category, offer_amount))

    # --- 🧮 Крок 3: підсумок ---
    total_amount = q2(category_amount + offer_amount)
    breakdown = DiscountBreakdown(
        base_amount=q2(base),
        final_amount=q2(offer_result.final_subtotal),
        category_percent=clamp_percent(category_percent),
        category_amount=category_amount,
        offer_percent=offer_percent,
        offer_amount=offer_amount,
        offer_type=normalized.discount_type if offer_result.offer_applied and normalized else None,
        offer_code=normalized.code if offer_result.offer_applied and normalized else None,
        total_amount=total_amount,
        total_percent=q2(derive_percent_from_amount(base, total_amount)),
    )
    logger.debug(
        "📉 Discount breakdown | base=%s category=%s offer=%s → final=%s total=%s (%s%%)",
        breakdown.base_amount,
        breakdown.category_amount,
        breakdown.offer_amount,
        breakdown.final_amount,
        breakdown.total_amount,
        breakdown.total_percent,
    )
    return breakdown


__all__ = ["build_discount_breakdown"]
