# ➗ pricing_engine/domain/pricing/rounding.py
"""
➗ Утиліти Decimal-арифметики для всього конвеєра ціноутворення.

🔹 `to_decimal` — єдина точка приведення «брудних» чисел (None, NaN, рядки) до Decimal.
🔹 `q2` — округлення до 2 знаків half-away-from-zero (контрольні точки конвеєра).
🔹 `clamp_percent` / `percent` — робота з відсотками в межах [0, 100].
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext  # 💵 Точна арифметика

# ================================
# 📏 КОНСТАНТИ
# ================================
ZERO = Decimal("0")
HUNDRED = Decimal("100")


# ================================
# 🧮 ПРИВЕДЕННЯ ТА ОКРУГЛЕННЯ
# ================================
def to_decimal(value: object) -> Decimal:
    """🧮 Приводить значення до Decimal; все невалідне (None, NaN, ∞, текст) стає 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        dec = value
    else:
        try:
            dec = Decimal(str(value).strip())                # 🧼 Через str, без артефактів float
        except (InvalidOperation, ValueError, TypeError):
            return ZERO
    if not dec.is_finite():
        return ZERO
    return dec


def round_half_up(value: object, places: int = 2) -> Decimal:
    """📐 Округлює до `places` знаків після коми (ROUND_HALF_UP) для сум будь-якого порядку."""
    dec = to_decimal(value)
    quant = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Результат quantize має вміститися в точність контексту
        ctx.prec = max(ctx.prec, dec.adjusted() + places + 2)
        return dec.quantize(quant, rounding=ROUND_HALF_UP)


def q2(value: object) -> Decimal:
    """📐 Округлює до 2 знаків після коми (ROUND_HALF_UP, тобто від нуля)."""
    return round_half_up(value, 2)


def clamp_percent(value: object) -> Decimal:
    """🎚️ Нечислові відсотки → 0, решта обрізається до [0, 100]."""
    return min(max(to_decimal(value), ZERO), HUNDRED)


def percent(amount: object, pct: object) -> Decimal:
    """Частка `pct`% від `amount` без округлення."""
    return to_decimal(amount) * clamp_percent(pct) / HUNDRED


def to_quantity(value: object, default: int = 1) -> int:
    """🔢 Кількість позицій: відсутня, нечислова чи недодатна → `default`; дробова обрізається."""
    qty = int(to_decimal(value))
    return qty if qty > 0 else default


__all__ = ["ZERO", "HUNDRED", "to_decimal", "round_half_up", "q2", "clamp_percent", "percent", "to_quantity"]
