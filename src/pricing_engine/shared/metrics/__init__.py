# 📊 pricing_engine/shared/metrics/__init__.py
"""
📊 Пакет метрик Prometheus для рушія ціноутворення.
"""

from __future__ import annotations

from .pricing import (
    COMBO_SNAPSHOT_FALLBACKS,
    COMBO_STOCK_ISSUES,
    CONVERSIONS_TOTAL,
    ESTIMATED_CONVERSIONS,
    OFFERS_NOT_APPLIED,
)

# 🚀 Експортер Prometheus
from .exporters import maybe_start_prometheus

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "CONVERSIONS_TOTAL",
    "ESTIMATED_CONVERSIONS",
    "OFFERS_NOT_APPLIED",
    "COMBO_SNAPSHOT_FALLBACKS",
    "COMBO_STOCK_ISSUES",
    "maybe_start_prometheus",
]
