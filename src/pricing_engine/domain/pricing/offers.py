# 🎁 pricing_engine/domain/pricing/offers.py
"""
🎁 Промо-пропозиції: застосування до суми та перевірка придатності.

🔹 `apply_offer` — чистий розрахунок знижки (мінімальна сума → тип знижки → стеля).
🔹 `validate_offer` — перевірка термінів і лімітів використання за даними, які приніс виклик.
🔹 Невиконані умови ніколи не кидають винятків: результат містить `reason`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування рішень щодо пропозицій
from datetime import datetime, timezone                       # ⏰ Перевірка терміну дії
from decimal import Decimal                                   # 💵 Точні гроші
from typing import Any, Optional                              # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .interfaces import DiscountType, Offer, OfferLike, OfferResult, OfferValidation
from .discounts import discount_amount
from .rounding import ZERO, q2, to_decimal
from pricing_engine.shared.metrics import OFFERS_NOT_APPLIED
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.offers")

# ================================
# 🗒️ ПРИЧИНИ ВІДМОВИ
# ================================
REASON_NO_OFFER = "No offer provided"
REASON_NOT_FOUND = "Offer code not found or inactive"
REASON_EXPIRED = "Offer has expired"
REASON_GLOBAL_LIMIT = "Offer has reached its usage limit"


def _fmt(value: Decimal) -> str:
    """`100.0` → `100`, `49.50` → `49.5`."""
    return f"{value.normalize():f}"


# ================================
# 🎁 ЗАСТОСУВАННЯ ПРОПОЗИЦІЇ
# ================================
def apply_offer(subtotal: Any, offer: OfferLike = None) -> OfferResult:
    """
    🎁 Застосовує пропозицію до суми.

    Порядок: наявність → мінімальна сума → знижка за типом → стеля `max_discount_amount`.
    Відсоткова знижка рахується від суми, фіксована не перевищує суму.
    Невідомий тип дає нульову знижку, але пропозиція вважається застосованою.
    """
    amount = max(to_decimal(subtotal), ZERO)
    normalized: Optional[Offer] = Offer.from_mapping(offer)

    if normalized is None or not normalized.id:
        OFFERS_NOT_APPLIED.labels(reason="no_offer").inc()
        return OfferResult(ZERO, amount, False, REASON_NO_OFFER)

    minimum = normalized.min_purchase_amount
    if minimum is not None and amount < minimum:
        OFFERS_NOT_APPLIED.labels(reason="min_purchase").inc()
        logger.info(
            "🎁 Offer skipped | id=%s subtotal=%s min_purchase=%s",
            normalized.id,
            amount,
            minimum,
        )
        return OfferResult(
            ZERO,
            amount,
            False,
            f"Minimum purchase amount not met ({_fmt(minimum)} required)",
        )

    if normalized.discount_type == DiscountType.PERCENTAGE.value:
        discount = discount_amount(amount, normalized.discount_value)
    elif normalized.discount_type == DiscountType.FIXED_AMOUNT.value:
        discount = min(max(normalized.discount_value, ZERO), amount)
    else:
        logger.warning("⚠️ Unknown offer type | id=%s type=%r", normalized.id, normalized.discount_type)
        discount = ZERO

    cap = normalized.max_discount_amount
    if cap is not None:
        discount = min(discount, cap)

    discount = q2(discount)
    result = OfferResult(
        discount_amount=discount,
        final_subtotal=q2(amount - discount),
        offer_applied=True,
        offer_id=normalized.id,
        offer_type=normalized.discount_type,
        offer_value=normalized.discount_value,
    )
    logger.debug(
        "🎁 Offer applied | id=%s type=%s value=%s subtotal=%s → discount=%s final=%s",
        normalized.id,
        normalized.discount_type,
        normalized.discount_value,
        amount,
        result.discount_amount,
        result.final_subtotal,
    )
    return result


# ================================
# ✅ ПЕРЕВІРКА ПРИДАТНОСТІ
# ================================
def validate_offer(
    offer: OfferLike,
    subtotal: Any = 0,
    *,
    now: Optional[datetime] = None,
    global_usage_count: Optional[int] = None,
    user_usage_count: Optional[int] = None,
) -> OfferValidation:
    """
    ✅ Чи можна використати пропозицію для цього замовлення.

    Лічильники використань рахує виклик (сховище зовнішнє); `None` пропускає відповідну перевірку.
    """
    normalized = Offer.from_mapping(offer)
    if normalized is None or not normalized.is_active:
        return OfferValidation(False, REASON_NOT_FOUND)

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if normalized.valid_until is not None and normalized.valid_until < moment:
        return OfferValidation(False, REASON_EXPIRED, normalized)

    amount = to_decimal(subtotal)
    minimum = normalized.min_purchase_amount
    if minimum is not None and amount < minimum:
        return OfferValidation(False, f"Minimum purchase amount required: ${_fmt(minimum)}", normalized)

    limit = normalized.max_usage_global
    if limit is not None and global_usage_count is not None and global_usage_count >= limit:
        return OfferValidation(False, REASON_GLOBAL_LIMIT, normalized)

    per_user = normalized.max_usage_per_user
    if per_user is not None and user_usage_count is not None and user_usage_count >= per_user:
        return OfferValidation(
            False,
            f"You have already used this offer {user_usage_count} times (limit: {per_user})",
            normalized,
        )

    return OfferValidation(True, None, normalized)


__all__ = [
    "REASON_NO_OFFER",
    "REASON_NOT_FOUND",
    "REASON_EXPIRED",
    "REASON_GLOBAL_LIMIT",
    "apply_offer",
    "validate_offer",
]
