# 🚨 pricing_engine/shared/errors.py
"""
🚨 Ієрархія винятків рушія ціноутворення.

🔹 Самі розрахунки ніколи не кидають винятків на «брудних» даних — вони деградують до безпечних значень.
🔹 Винятки потрібні лише для суворих перевірок на боці виклику (повнота таблиці курсів, конфіг).
🔹 Кожен виняток уміє віддати `to_log_extra()` для структурованих логів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional, Sequence, Tuple						# 📐 Типізація


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Базова помилка пакета з опційними деталями."""

    error_code = "app_error"

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message											# 🗒️ Людський опис
        self.details = details											# 🔎 Технічні подробиці

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для logger.extra."""
        extra: Dict[str, object] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra


class PricingError(AppError):
    """💸 Помилка доменного шару прайсингу."""

    error_code = "pricing_error"


# ================================
# 💱 ВАЛЮТНІ ПОМИЛКИ
# ================================
class IncompleteRateTableError(PricingError):
    """💱 Таблиця курсів не покриває потрібні валюти (сувора перевірка перед розрахунком)."""

    error_code = "incomplete_rate_table"

    def __init__(self, missing: Sequence[str], base_currency: str) -> None:
        self.missing: Tuple[str, ...] = tuple(missing)					# 🚫 Валюти без якірного курсу
        self.base_currency = base_currency								# ⚓ Базова валюта перевірки
        super().__init__(
            f"No anchor rate to {base_currency} for: {', '.join(self.missing)}",
            details=f"missing={list(self.missing)}",
        )

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["missing"] = list(self.missing)
        extra["base_currency"] = self.base_currency
        return extra


# ================================
# ⚙️ КОНФІГУРАЦІЯ
# ================================
class ConfigurationError(AppError):
    """⚙️ Невалідне значення в розділі конфігурації."""

    error_code = "configuration_error"

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid config value for '{key}': {value!r}")

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["key"] = self.key
        return extra


__all__ = [
    "AppError",
    "PricingError",
    "IncompleteRateTableError",
    "ConfigurationError",
]
