# 📈 pricing_engine/domain/pricing/margin.py
"""
📈 Націнка продавця поверх базової ціни.

🔹 `None` означає «націнку не передано» — тоді діє значення за замовчуванням (40%).
🔹 Явний `0` завжди поважається й ніколи не підміняється дефолтом.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків націнки
from decimal import Decimal                                   # 💵 Точні гроші
from typing import Any, Optional                              # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .rounding import HUNDRED, clamp_percent, q2, to_decimal
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.margin")

DEFAULT_MARGIN_PERCENT = Decimal("40")                        # 🎯 Глобальна націнка за замовчуванням


def resolve_margin(margin_percent: Any = None, default_margin: Any = DEFAULT_MARGIN_PERCENT) -> Decimal:
    """🎚️ Визначає фактичний відсоток націнки (omitted → default, далі clamp до [0, 100])."""
    if margin_percent is None:
        return clamp_percent(default_margin)
    return clamp_percent(margin_percent)


def apply_margin(
    base_price: Any,
    margin_percent: Any = None,
    *,
    default_margin: Any = DEFAULT_MARGIN_PERCENT,
) -> Decimal:
    """
    📈 Повертає `q2(base * (1 + margin/100))`.

    Args:
        base_price: Собівартість; невалідне значення дає 0.
        margin_percent: Відсоток націнки або `None`, якщо його не передали.
        default_margin: Відсоток, що діє для `None`.
    """
    base = to_decimal(base_price)
    margin = resolve_margin(margin_percent, default_margin)
    final_price = q2(base * (1 + margin / HUNDRED))
    logger.debug("📈 Margin applied | base=%s margin=%s%% → final=%s", base, margin, final_price)
    return final_price


class MarginEngine:
    """📈 Націнка з налаштованим відсотком за замовчуванням."""

    def __init__(self, default_margin: Any = DEFAULT_MARGIN_PERCENT) -> None:
        self._default_margin = clamp_percent(default_margin)

    @property
    def default_margin(self) -> Decimal:
        return self._default_margin

    def apply(self, base_price: Any, margin_percent: Optional[Any] = None) -> Decimal:
        return apply_margin(base_price, margin_percent, default_margin=self._default_margin)

    def margin_amount(self, base_price: Any, margin_percent: Optional[Any] = None) -> Decimal:
        """Скільки саме додала націнка (у грошах)."""
        return q2(self.apply(base_price, margin_percent) - q2(base_price))


__all__ = ["DEFAULT_MARGIN_PERCENT", "resolve_margin", "apply_margin", "MarginEngine"]
