# 🖨️ pricing_engine/ui/formatters/__init__.py
"""
🖨️ Форматери сум і розбивок для інтерфейсу та чеків.
"""

from .price_formatter import PriceFormatter, format_price, format_price_with_code

__all__ = ["PriceFormatter", "format_price", "format_price_with_code"]
