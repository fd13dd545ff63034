# 🎁 pricing_engine/domain/combos/__init__.py
"""
🎁 Пакет `domain.combos`: ціноутворення наборів і перевірка наявності складників.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import Combo, ComboPricing, PriceSource, Product, StockIssue, StockIssueKind
from .adapters import index_products, to_combo, to_product
from .services import ComboPricingEngine, compute_combo_pricing
from .stock import check_combo_stock_issues

__all__ = [
    "Combo",
    "ComboPricing",
    "PriceSource",
    "Product",
    "StockIssue",
    "StockIssueKind",
    "index_products",
    "to_combo",
    "to_product",
    "ComboPricingEngine",
    "compute_combo_pricing",
    "check_combo_stock_issues",
]
