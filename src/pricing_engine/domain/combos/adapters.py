# 🔌 pricing_engine/domain/combos/adapters.py
"""
🔌 Єдиний адаптер «сирих» записів товарів і наборів у канонічні DTO.

🔹 Приймає обидва варіанти назв полів (`base_total_price` / `baseTotalPrice` тощо).
🔹 Після адаптера бізнес-логіка працює лише з `Product` і `Combo`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from .interfaces import Combo, Product
from pricing_engine.domain.pricing.rounding import ZERO, to_decimal, to_quantity
from pricing_engine.shared.utils.immutables import freeze_mapping
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.combos.adapters")

ProductLike = Union[Product, Mapping[str, Any]]
ComboLike = Union[Combo, Mapping[str, Any], None]
CatalogLike = Union[Iterable[ProductLike], Mapping[str, ProductLike], None]


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Перше значення серед ключів, що не є None."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _optional_decimal(value: Any) -> Optional[Decimal]:
    """None/порожнє/нечислове → None; інакше Decimal (0 лишається явним нулем)."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        logger.debug("🔌 Unparseable number %r → treated as missing", value)
        return None
    return dec if dec.is_finite() else None


def _product_id(entry: Any) -> Optional[str]:
    if isinstance(entry, Mapping):
        entry = _pick(entry, "id", "product_id", "productId")
    if entry is None or entry == "":
        return None
    return str(entry)


# ================================
# 🛍️ ТОВАР
# ================================
def to_product(raw: ProductLike) -> Optional[Product]:
    """🛍️ Запис товару → `Product`; без `id` повертає None."""
    if isinstance(raw, Product):
        return raw
    product_id = _product_id(raw.get("id"))
    if product_id is None:
        logger.debug("🔌 Product without id skipped | raw=%r", raw)
        return None

    names: Dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(key, str) and key.startswith("name_") and value:
            names[key[len("name_"):]] = str(value)
    if raw.get("name"):
        names[""] = str(raw["name"])

    currency = _pick(raw, "base_currency_id", "baseCurrencyId", "currency_id")
    return Product(
        id=product_id,
        base_price=to_decimal(_pick(raw, "base_price", "basePrice", "price")),
        base_currency_id=str(currency) if currency not in (None, "") else None,
        stock=max(int(to_decimal(raw.get("stock"))), 0),
        names=freeze_mapping(names),
    )


def index_products(products: CatalogLike) -> Dict[str, Product]:
    """📇 Каталог (список чи мапа id → запис) → `{id: Product}`."""
    if products is None:
        return {}
    items = products.values() if isinstance(products, Mapping) else products
    catalog: Dict[str, Product] = {}
    for raw in items:
        product = to_product(raw)
        if product is not None:
            catalog.setdefault(product.id, product)
    return catalog


# ================================
# 🎁 НАБІР
# ================================
def to_combo(raw: ComboLike) -> Combo:
    """🎁 Запис набору → `Combo` (обидві схеми назв полів); відсутній набір → порожній `Combo`."""
    if isinstance(raw, Combo):
        return raw
    if raw is None:
        return Combo(products=())

    product_ids = tuple(
        pid for pid in (_product_id(entry) for entry in raw.get("products") or ()) if pid is not None
    )
    raw_quantities = _pick(raw, "productQuantities", "product_quantities") or {}
    quantities = {str(pid): to_quantity(qty) for pid, qty in dict(raw_quantities).items()}

    snapshot = _optional_decimal(_pick(raw, "baseTotalPrice", "base_total_price"))
    combo_id = raw.get("id")
    return Combo(
        products=product_ids,
        product_quantities=freeze_mapping(quantities),
        profit_margin=_optional_decimal(_pick(raw, "profitMargin", "profit_margin")),
        base_total_price=snapshot if snapshot is not None and snapshot > ZERO else None,
        id=str(combo_id) if combo_id not in (None, "") else None,
    )


__all__ = ["ProductLike", "ComboLike", "CatalogLike", "to_product", "index_products", "to_combo"]
