# 💱 pricing_engine/domain/currency/__init__.py
"""
💱 Пакет `domain.currency` публікує контракти та DTO для валютних операцій.

🔹 `interfaces.py` містить `CurrencyCode`, `RateTable`, `ConversionPath`, `ConversionResult`
    та протокол `IMoneyConverter`.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (
    CurrencyCode,                # 🔤 Код валюти
    DEFAULT_BASE_CURRENCY,       # ⚓ Базова валюта за замовчуванням
    ConvertFn,                   # 🔁 Сигнатура довільного конвертера
    ConversionPath,              # 🧭 Шлях розвʼязку курсу
    ConversionResult,            # 📦 Результат із прапором estimated
    ESTIMATED_PATHS,             # ⚠️ Шляхи з припущенням 1:1
    IMoneyConverter,             # 🔗 Протокол конвертера
    RateTable,                   # 📈 Незмінна таблиця курсів
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "CurrencyCode",
    "DEFAULT_BASE_CURRENCY",
    "ConvertFn",
    "ConversionPath",
    "ConversionResult",
    "ESTIMATED_PATHS",
    "IMoneyConverter",
    "RateTable",
]
