# 💸 pricing_engine/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує DTO, утиліти та чисті двигуни ціноутворення.

🔹 `interfaces.py` — Offer, OfferResult, DiscountBreakdown, PriceBreakdown, CompletePrice.
🔹 `rounding.py` — `q2`, `to_decimal`, `clamp_percent` для роботи з Decimal.
🔹 `margin.py`, `discounts.py`, `offers.py`, `breakdown.py`, `order_total.py` — кроки конвеєра.
🔹 `services.py` — фасад `PricingService`; імпортується напряму, бо залежить від валютного шару.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (                                   # 🧱 DTO та переліки
    CompletePrice,
    DiscountBreakdown,
    DiscountType,
    Offer,
    OfferResult,
    OfferValidation,
    PriceBreakdown,
    UserCategory,
)
from .rounding import clamp_percent, percent, q2, to_decimal  # ➗ Утиліти округлення та відсотків
from .margin import DEFAULT_MARGIN_PERCENT, MarginEngine, apply_margin
from .discounts import apply_discount, category_discount_percent, derive_percent_from_amount, discount_amount
from .offers import apply_offer, validate_offer
from .breakdown import build_discount_breakdown
from .order_total import (
    OrderTotalCalculator,
    calculate_cart_subtotal,
    calculate_complete_price,
    calculate_order_total,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # DTO / типи
    "CompletePrice",
    "DiscountBreakdown",
    "DiscountType",
    "Offer",
    "OfferResult",
    "OfferValidation",
    "PriceBreakdown",
    "UserCategory",
    # Двигуни
    "DEFAULT_MARGIN_PERCENT",
    "MarginEngine",
    "apply_margin",
    "apply_discount",
    "discount_amount",
    "derive_percent_from_amount",
    "category_discount_percent",
    "apply_offer",
    "validate_offer",
    "build_discount_breakdown",
    "OrderTotalCalculator",
    "calculate_order_total",
    "calculate_cart_subtotal",
    "calculate_complete_price",
    # Утиліти
    "q2",
    "percent",
    "to_decimal",
    "clamp_percent",
]
