# 💱 pricing_engine/infrastructure/currency/__init__.py
"""
💱 Інфраструктурні сервіси для роботи з валютами.

🔹 `convert` / `convert_detailed` — єдина точка якірної конверсії.
🔹 `CurrencyConverter` — конвертер, привʼязаний до знімка курсів.
"""

from __future__ import annotations

# 🔁 Конвертація валют
from .currency_converter import CurrencyConverter, convert, convert_detailed

__all__ = ["CurrencyConverter", "convert", "convert_detailed"]
