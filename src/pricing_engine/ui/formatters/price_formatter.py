# 🧾 pricing_engine/ui/formatters/price_formatter.py
"""
🧾 Форматує суми та розбивки замовлень у рядки для чеків і інтерфейсу.

🔹 `format_price` / `format_price_with_code` — `$123.45` та `123.45 USD`
🔹 `PriceFormatter.display` — `$123.45 USD` із символом з таблиці валют
🔹 `PriceFormatter.breakdown_lines` — построкова розбивка `PriceBreakdown` для чека
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal                                          # 🔢 Операції з десятковими сумами
from typing import Any, Dict, Final, List, Mapping, Optional         # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from pricing_engine.domain.pricing.interfaces import PriceBreakdown  # 🧾 Розбивка замовлення
from pricing_engine.domain.pricing.rounding import round_half_up  # 🧮 Толерантне округлення сум


def _fixed(price: Any, decimals: int) -> str:
    """Сума з `decimals` знаками (half-up); невалідне значення → 0."""
    places = max(int(decimals), 0)
    return f"{round_half_up(price, places):.{places}f}"


def format_price(price: Any, symbol: str = "$", decimals: int = 2) -> str:
    """`$123.45`"""
    return f"{symbol}{_fixed(price, decimals)}"


def format_price_with_code(price: Any, code: str = "USD", decimals: int = 2) -> str:
    """`123.45 USD`"""
    return f"{_fixed(price, decimals)} {code}"


# ================================
# 💬 КЛАС ФОРМАТЕРА ЦІН
# ================================
class PriceFormatter:
    """
    💬 Формує рядки з сумами у валюті покупця.
    """

    _BULLET: Final[str] = "•"                                         # 🔹 Маркер для списків
    _CURRENCY_SYMBOLS: Final[Dict[str, str]] = {                      # 💱 Символи валют магазину
        "USD": "$",
        "EUR": "€",
        "CUP": "₱",
        "MLC": "$",
        "GBP": "£",
        "CAD": "$",
        "MXN": "$",
    }
    _DEFAULT_SYMBOL: Final[str] = "$"

    def __init__(self, symbols: Optional[Mapping[str, str]] = None) -> None:
        self._symbols: Dict[str, str] = dict(self._CURRENCY_SYMBOLS)
        if symbols:
            self._symbols.update({str(code): str(sign) for code, sign in symbols.items()})

    def symbol(self, code: Optional[str]) -> str:
        return self._symbols.get(code or "", self._DEFAULT_SYMBOL)

    def display(self, value: Any, code: str = "USD", decimals: int = 2) -> str:
        """
        Форматує суму у вигляді `$123.45 USD`.
        """
        return f"{format_price(value, self.symbol(code), decimals)} {code}"

    # ================================
    # 🧾 ЧЕК
    # ================================
    def breakdown_lines(self, breakdown: PriceBreakdown, code: Optional[str] = None) -> List[str]:
        """
        Повертає рядки чека: підсумок, знижки (лише ненульові), доставка, податок, разом.
        """
        currency = code or breakdown.currency or "USD"

        def money(value: Decimal) -> str:
            return self.display(value, currency)

        lines = [f"{self._BULLET} Subtotal: {money(breakdown.subtotal)}"]

        if breakdown.category_discount_amount > 0:
            lines.append(
                f"{self._BULLET} Category discount ({breakdown.category_discount_percent.normalize():f}%): "
                f"-{money(breakdown.category_discount_amount)}"
            )
        if breakdown.offer_applied and breakdown.offer_discount_amount > 0:
            lines.append(f"{self._BULLET} Offer discount: -{money(breakdown.offer_discount_amount)}")
        if breakdown.shipping_cost > 0:
            lines.append(f"{self._BULLET} Shipping: {money(breakdown.shipping_cost)}")
        if breakdown.tax_amount > 0:
            lines.append(
                f"{self._BULLET} Tax ({breakdown.tax_percent.normalize():f}%): {money(breakdown.tax_amount)}"
            )
        lines.append(f"{self._BULLET} Total: {money(breakdown.total)}")
        return lines


__all__ = ["format_price", "format_price_with_code", "PriceFormatter"]
