# 🏗️ pricing_engine/config/setup/__init__.py
"""
🏗️ Збирання рушія: логування, метрики, фасад ціноутворення і форматер.
"""

from .container import Container

__all__ = ["Container"]
