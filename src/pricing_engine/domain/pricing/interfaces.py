# 🧩 pricing_engine/domain/pricing/interfaces.py
"""
🧩 DTO доменного прайсингу: пропозиції, результати знижок та повні розбивки замовлення.

🔹 Усі DTO незмінні й тримають суми як Decimal.
🔹 `to_dict()` віддає JSON-сумісну форму (camelCase, float з 2 знаками) для чеків і знімків замовлень.
🔹 `Offer.from_mapping` — єдиний адаптер «сирих» записів пропозицій (snake_case з БД).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                              # 🧱 Immutable DTO
from datetime import datetime, timezone                        # ⏰ Термін дії пропозиції
from decimal import Decimal                                    # 💵 Точні гроші
from enum import Enum                                          # 🏷️ Типи знижок/категорій
from typing import Any, Dict, Mapping, Optional, Union         # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .rounding import ZERO, to_decimal


# ================================
# 🏷️ ПЕРЕЛІКИ
# ================================
class DiscountType(str, Enum):
    """Тип знижки пропозиції."""

    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"


class UserCategory(str, Enum):
    """Категорія покупця, від якої залежить категорійна знижка."""

    REGULAR = "regular"
    PRO = "pro"
    VIP = "vip"


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _money(value: Decimal) -> float:
    return float(value)


def _positive_or_none(value: Any) -> Optional[Decimal]:
    """Порожні, нульові чи відʼємні обмеження вважаються відсутніми."""
    dec = to_decimal(value)
    return dec if dec > ZERO else None


def _optional_int(value: Any) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Розбирає ISO-8601 (включно із суфіксом `Z`) у timezone-aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ================================
# 🎁 ПРОПОЗИЦІЯ
# ================================
@dataclass(frozen=True, slots=True)
class Offer:
    """🎁 Промо-правило; створюється адміністратором, для рушія — лише читання."""

    id: Optional[str]
    discount_type: str
    discount_value: Decimal
    min_purchase_amount: Optional[Decimal] = None
    max_discount_amount: Optional[Decimal] = None
    code: Optional[str] = None
    is_active: bool = True
    valid_until: Optional[datetime] = None
    max_usage_global: Optional[int] = None
    max_usage_per_user: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Union["Offer", Mapping[str, Any], None]) -> Optional["Offer"]:
        """Нормалізує запис пропозиції; `None` лишається `None`."""
        if data is None or isinstance(data, Offer):
            return data
        raw_id = data.get("id")
        return cls(
            id=str(raw_id) if raw_id not in (None, "") else None,
            discount_type=str(data.get("discount_type") or ""),
            discount_value=to_decimal(data.get("discount_value")),
            min_purchase_amount=_positive_or_none(data.get("min_purchase_amount")),
            max_discount_amount=_positive_or_none(data.get("max_discount_amount")),
            code=data.get("code") or None,
            is_active=data.get("is_active") is not False,
            valid_until=parse_timestamp(data.get("valid_until")),
            max_usage_global=_optional_int(data.get("max_usage_global")),
            max_usage_per_user=_optional_int(data.get("max_usage_per_user")),
        )


OfferLike = Union[Offer, Mapping[str, Any], None]


@dataclass(frozen=True, slots=True)
class OfferResult:
    """📦 Результат застосування пропозиції до суми."""

    discount_amount: Decimal
    final_subtotal: Decimal
    offer_applied: bool
    reason: Optional[str] = None
    offer_id: Optional[str] = None
    offer_type: Optional[str] = None
    offer_value: Optional[Decimal] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "discountAmount": _money(self.discount_amount),
            "finalSubtotal": _money(self.final_subtotal),
            "offerApplied": self.offer_applied,
        }
        if self.reason is not None:
            payload["reason"] = self.reason
        if self.offer_applied:
            payload["offerId"] = self.offer_id
            payload["offerType"] = self.offer_type
            payload["offerValue"] = _money(self.offer_value) if self.offer_value is not None else None
        return payload


@dataclass(frozen=True, slots=True)
class OfferValidation:
    """✅ Чи можна використати пропозицію (термін, ліміти, мінімальна сума)."""

    valid: bool
    reason: Optional[str] = None
    offer: Optional[Offer] = None


# ================================
# 📉 РОЗБИВКА ЗНИЖОК
# ================================
@dataclass(frozen=True, slots=True)
class DiscountBreakdown:
    """
    📉 Послідовне накладання знижок: категорійна → пропозиція.

    Відсотки тут лише для показу; далі в розрахунках вони не використовуються.
    """

    base_amount: Decimal
    final_amount: Decimal
    category_percent: Decimal
    category_amount: Decimal
    offer_percent: Decimal
    offer_amount: Decimal
    offer_type: Optional[str]
    offer_code: Optional[str]
    total_amount: Decimal
    total_percent: Decimal

    @property
    def has_discount(self) -> bool:
        return self.total_amount > ZERO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baseAmount": _money(self.base_amount),
            "finalAmount": _money(self.final_amount),
            "category": {
                "percent": _money(self.category_percent),
                "amount": _money(self.category_amount),
            },
            "offer": {
                "percent": _money(self.offer_percent),
                "amount": _money(self.offer_amount),
                "type": self.offer_type,
                "code": self.offer_code,
            },
            "total": {
                "amount": _money(self.total_amount),
                "percent": _money(self.total_percent),
            },
        }


# ================================
# 🧾 ПОВНА РОЗБИВКА ЗАМОВЛЕННЯ
# ================================
@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    """🧾 Повністю деталізований підсумок замовлення (для чека та аудиту)."""

    subtotal: Decimal
    category_discount_amount: Decimal
    category_discount_percent: Decimal
    after_category_discount: Decimal
    offer_discount_amount: Decimal
    offer_applied: bool
    after_all_discounts: Decimal
    shipping_cost: Decimal
    subtotal_with_shipping: Decimal
    tax_amount: Decimal
    tax_percent: Decimal
    total_discount: Decimal
    total: Decimal
    offer_reason: Optional[str] = None
    offer_id: Optional[str] = None
    currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subtotal": _money(self.subtotal),
            "categoryDiscountAmount": _money(self.category_discount_amount),
            "categoryDiscountPercent": _money(self.category_discount_percent),
            "afterCategoryDiscount": _money(self.after_category_discount),
            "offerDiscountAmount": _money(self.offer_discount_amount),
            "offerApplied": self.offer_applied,
            "offerReason": self.offer_reason,
            "offerId": self.offer_id,
            "afterAllDiscounts": _money(self.after_all_discounts),
            "shippingCost": _money(self.shipping_cost),
            "subtotalWithShipping": _money(self.subtotal_with_shipping),
            "taxAmount": _money(self.tax_amount),
            "taxPercent": _money(self.tax_percent),
            "totalDiscount": _money(self.total_discount),
            "total": _money(self.total),
            "currency": self.currency,
        }


@dataclass(frozen=True, slots=True)
class CompletePrice:
    """💵 Ціна однієї позиції: курс → націнка → знижка."""

    base_price: Decimal
    after_exchange: Decimal
    before_discount: Decimal
    discount_amount: Decimal
    discount_percent: Decimal
    final_price: Decimal
    profit_margin: Decimal
    exchange_rate: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "basePrice": _money(self.base_price),
            "afterExchange": _money(self.after_exchange),
            "beforeDiscount": _money(self.before_discount),
            "discountAmount": _money(self.discount_amount),
            "discountPercent": _money(self.discount_percent),
            "finalPrice": _money(self.final_price),
            "profitMargin": _money(self.profit_margin),
            "exchangeRate": _money(self.exchange_rate),
        }


__all__ = [
    "DiscountType",
    "UserCategory",
    "Offer",
    "OfferLike",
    "OfferResult",
    "OfferValidation",
    "DiscountBreakdown",
    "PriceBreakdown",
    "CompletePrice",
    "parse_timestamp",
]
