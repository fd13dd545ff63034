# 📦 pricing_engine/domain/combos/stock.py
"""
📦 Перевірка наявності складників набору (лише читання, без побічних ефектів).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from .adapters import CatalogLike, ComboLike, index_products, to_combo
from .interfaces import StockIssue, StockIssueKind
from pricing_engine.shared.metrics import COMBO_STOCK_ISSUES
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.combos.stock")


def check_combo_stock_issues(
    combo: Optional[ComboLike],
    products: CatalogLike,
    language: str = "es",
) -> List[StockIssue]:
    """
    📦 Проблеми з наявністю у порядку складників набору.

    Відсутній товар або нульовий залишок → `out_of_stock`; залишок менший за потрібну кількість → `insufficient`.
    Порожній список означає, що набір можна купити; блокувати оформлення вирішує виклик.
    """
    if combo is None:
        return []
    normalized = to_combo(combo)
    catalog = index_products(products)

    issues: List[StockIssue] = []
    for product_id in normalized.products:
        product = catalog.get(product_id)
        required = normalized.quantity(product_id)
        available = product.stock if product is not None else 0
        name = product.display_name(language) if product is not None else "Unknown"

        if available == 0:
            kind = StockIssueKind.OUT_OF_STOCK
        elif available < required:
            kind = StockIssueKind.INSUFFICIENT
        else:
            continue

        issues.append(StockIssue(product_id, name, kind, required, available))
        COMBO_STOCK_ISSUES.labels(issue=kind.value).inc()

    if issues:
        logger.info(
            "📦 Combo stock issues | combo=%s issues=%s",
            normalized.id,
            [(issue.product_id, issue.issue.value, issue.required, issue.available) for issue in issues],
        )
    return issues


__all__ = ["check_combo_stock_issues"]
