# 📈 pricing_engine/shared/metrics/pricing.py
"""
📈 Prometheus-метрики рушія ціноутворення.

🔹 `CONVERSIONS_TOTAL` — конверсії за шляхом розвʼязку курсу.
🔹 `ESTIMATED_CONVERSIONS` — конверсії, де хоча б одна нога прийнята як 1:1 (дефект даних).
🔹 `OFFERS_NOT_APPLIED`, `COMBO_SNAPSHOT_FALLBACKS`, `COMBO_STOCK_ISSUES` — сигнали якості даних.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter                                 # 📊 Prometheus-метрики

# ================================
# 💱 КОНВЕРСІЯ ВАЛЮТ
# ================================
CONVERSIONS_TOTAL = Counter(
    "pricing_conversions_total",                                     # 🏷️ Імʼя метрики
    "Currency conversions by resolution path",                       # 📝 Опис у Prometheus
    ["path"],
)

ESTIMATED_CONVERSIONS = Counter(
    "pricing_estimated_conversions_total",
    "Conversions that assumed a 1:1 rate for at least one leg",
    ["from_currency", "to_currency"],
)

# ================================
# 🎁 ПРОПОЗИЦІЇ ТА КОМБО
# ================================
OFFERS_NOT_APPLIED = Counter(
    "pricing_offers_not_applied_total",
    "Promotional offers evaluated but not applied",
    ["reason"],
)

COMBO_SNAPSHOT_FALLBACKS = Counter(
    "pricing_combo_snapshot_fallbacks_total",
    "Combo prices taken from the stored snapshot instead of live products",
)

COMBO_STOCK_ISSUES = Counter(
    "pricing_combo_stock_issues_total",
    "Combo constituents that cannot be fulfilled",
    ["issue"],
)


__all__ = [
    "CONVERSIONS_TOTAL",
    "ESTIMATED_CONVERSIONS",
    "OFFERS_NOT_APPLIED",
    "COMBO_SNAPSHOT_FALLBACKS",
    "COMBO_STOCK_ISSUES",
]
