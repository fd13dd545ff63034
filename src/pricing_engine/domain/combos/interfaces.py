# 🎁 pricing_engine/domain/combos/interfaces.py
"""
🎁 Канонічні DTO комбо-наборів.

🔹 `Product` / `Combo` — єдина типізована форма після адаптера `adapters.py`.
🔹 `ComboPricing` — базова та фінальна ціна набору з джерелом (live | snapshot).
🔹 `StockIssue` — одна проблема з наявністю складника набору.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, field                    # 🧱 Immutable DTO
from decimal import Decimal                                 # 💵 Точні гроші
from enum import Enum                                       # 🏷️ Джерела цін і типи проблем
from typing import Any, Dict, Mapping, Optional, Tuple      # 📐 Типізація


class PriceSource(str, Enum):
    """Звідки взято базову суму набору."""

    LIVE = "live"                                           # 🔄 Перераховано з поточних товарів
    SNAPSHOT = "snapshot"                                   # 🗄️ Збережений `base_total_price`


class StockIssueKind(str, Enum):
    OUT_OF_STOCK = "out_of_stock"
    INSUFFICIENT = "insufficient"


@dataclass(frozen=True, slots=True)
class Product:
    """🛍️ Мінімальна форма товару каталогу, потрібна рушію."""

    id: str
    base_price: Decimal
    base_currency_id: Optional[str] = None
    stock: int = 0
    names: Mapping[str, str] = field(default_factory=dict)   # 🌐 `{"es": ..., "en": ..., "": name}`

    def display_name(self, language: str = "es") -> str:
        """Назва мовою `language`, потім загальна `name`, інакше `Unknown`."""
        return self.names.get(language) or self.names.get("") or "Unknown"


@dataclass(frozen=True, slots=True)
class Combo:
    """🎁 Набір товарів із власною націнкою."""

    products: Tuple[str, ...]
    product_quantities: Mapping[str, int] = field(default_factory=dict)
    profit_margin: Optional[Decimal] = None
    base_total_price: Optional[Decimal] = None
    id: Optional[str] = None

    def quantity(self, product_id: str) -> int:
        """Кількість складника; не вказана → 1."""
        return self.product_quantities.get(product_id, 1)


@dataclass(frozen=True, slots=True)
class ComboPricing:
    """💵 Ціни набору: база (після конверсії у валюту показу) та фінальна з націнкою набору."""

    base_price: Decimal
    final_price: Decimal
    source: PriceSource
    profit_margin: Decimal
    estimated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "basePrice": float(self.base_price),
            "finalPrice": float(self.final_price),
            "source": self.source.value,
            "profitMargin": float(self.profit_margin),
            "estimated": self.estimated,
        }


@dataclass(frozen=True, slots=True)
class StockIssue:
    """📦 Складник набору, який не можна видати в потрібній кількості."""

    product_id: str
    product_name: str
    issue: StockIssueKind
    required: int
    available: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "issue": self.issue.value,
            "required": self.required,
            "available": self.available,
        }


__all__ = [
    "PriceSource",
    "StockIssueKind",
    "Product",
    "Combo",
    "ComboPricing",
    "StockIssue",
]
