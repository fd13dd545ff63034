# 🎁 pricing_engine/domain/combos/services.py
"""
🎁 Ціноутворення наборів (комбо).

🔹 База набору перераховується з поточних цін складників × кількість.
🔹 Якщо «жива» сума нульова (товари видалені чи перейменовані) — береться збережений знімок.
🔹 Націнка набору застосовується один раз до суми, а не до цін окремих товарів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків розрахунку
from decimal import Decimal                                   # 💵 Точні гроші
from typing import Any, List, Optional                        # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .adapters import CatalogLike, ComboLike, index_products, to_combo
from .interfaces import ComboPricing, PriceSource, StockIssue
from .stock import check_combo_stock_issues
from pricing_engine.domain.currency.interfaces import DEFAULT_BASE_CURRENCY, ConvertFn, IMoneyConverter
from pricing_engine.domain.pricing.margin import DEFAULT_MARGIN_PERCENT, apply_margin, resolve_margin
from pricing_engine.domain.pricing.rounding import ZERO, q2, to_decimal
from pricing_engine.shared.metrics import COMBO_SNAPSHOT_FALLBACKS
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.combos")


def _convert(convert: ConvertFn, amount: Decimal, from_currency: str, to_currency: str, estimated: List[bool]) -> Decimal:
    """🔁 Конвертує через будь-який callable; для `IMoneyConverter` збирає прапор `estimated`."""
    if isinstance(convert, IMoneyConverter):
        result = convert.convert_detailed(amount, from_currency, to_currency)
        estimated.append(result.estimated)
        return result.amount
    return to_decimal(convert(amount, from_currency, to_currency))


# ================================
# 🎁 РОЗРАХУНОК НАБОРУ
# ================================
def compute_combo_pricing(
    combo: ComboLike,
    products: CatalogLike,
    convert: Optional[ConvertFn] = None,
    selected_currency_id: Optional[str] = None,
    base_currency_id: Optional[str] = DEFAULT_BASE_CURRENCY,
    default_profit_margin: Any = None,
) -> ComboPricing:
    """
    🎁 Базова та фінальна ціна набору у валюті показу.

    Args:
        combo: Набір (DTO або сирий запис у будь-якій схемі назв).
        products: Каталог товарів (список або мапа id → запис).
        convert: `convert(amount, from, to)`; без нього конверсії пропускаються.
        selected_currency_id: Валюта показу; None — базова валюта.
        base_currency_id: Валюта, у якій рахується сума набору.
        default_profit_margin: Націнка для наборів без власної (None → глобальні 40%).

    Returns:
        ComboPricing: Ціни, округлені до 2 знаків, джерело бази та прапор `estimated`.
    """
    normalized = to_combo(combo)
    catalog = index_products(products)
    base_currency = base_currency_id or DEFAULT_BASE_CURRENCY
    selected_currency = selected_currency_id or base_currency
    estimated: List[bool] = []

    # --- 🔄 Крок 1: «жива» сума складників ---
    live_total = ZERO
    for product_id in normalized.products:
        product = catalog.get(product_id)
        if product is None:
            logger.debug("🎁 Combo product missing | combo=%s product=%s", normalized.id, product_id)
            continue
        price = product.base_price
        if convert is not None and product.base_currency_id and product.base_currency_id != base_currency:
            price = _convert(convert, price, product.base_currency_id, base_currency, estimated)
        live_total += price * normalized.quantity(product_id)
    live_total = q2(live_total)

    # --- 🗄️ Крок 2: знімок, якщо жива сума нульова ---
    if live_total > ZERO:
        source, base_total = PriceSource.LIVE, live_total
    else:
        source, base_total = PriceSource.SNAPSHOT, q2(normalized.base_total_price or ZERO)
        COMBO_SNAPSHOT_FALLBACKS.inc()
        logger.warning(
            "⚠️ Combo snapshot fallback | combo=%s snapshot=%s %s",
            normalized.id,
            base_total,
            base_currency,
        )

    # --- 💱 Крок 3: валюта показу ---
    if convert is not None and selected_currency != base_currency:
        base_price = q2(_convert(convert, base_total, base_currency, selected_currency, estimated))
    else:
        base_price = base_total

    # --- 📈 Крок 4: власна націнка набору ---
    fallback_margin = DEFAULT_MARGIN_PERCENT if default_profit_margin is None else default_profit_margin
    margin = resolve_margin(normalized.profit_margin, default_margin=fallback_margin)
    final_price = apply_margin(base_price, margin)

    pricing = ComboPricing(
        base_price=base_price,
        final_price=final_price,
        source=source,
        profit_margin=margin,
        estimated=any(estimated),
    )
    logger.info(
        "🎁 Combo priced | combo=%s source=%s base=%s %s margin=%s%% → final=%s %s estimated=%s",
        normalized.id,
        source.value,
        base_price,
        selected_currency,
        margin,
        final_price,
        selected_currency,
        pricing.estimated,
    )
    return pricing


# ================================
# 🏛️ НАЛАШТОВАНИЙ ДВИГУН
# ================================
class ComboPricingEngine:
    """🎁 Прив'язує конвертер, базову валюту та націнку наборів за замовчуванням."""

    def __init__(
        self,
        converter: Optional[ConvertFn] = None,
        *,
        base_currency_id: Optional[str] = DEFAULT_BASE_CURRENCY,
        default_profit_margin: Any = None,
    ) -> None:
        self._converter = converter
        self._base_currency_id = base_currency_id or DEFAULT_BASE_CURRENCY
        self._default_profit_margin = default_profit_margin

    @property
    def base_currency_id(self) -> str:
        return self._base_currency_id

    def price(
        self,
        combo: ComboLike,
        products: CatalogLike,
        selected_currency_id: Optional[str] = None,
    ) -> ComboPricing:
        return compute_combo_pricing(
            combo,
            products,
            convert=self._converter,
            selected_currency_id=selected_currency_id,
            base_currency_id=self._base_currency_id,
            default_profit_margin=self._default_profit_margin,
        )

    def stock_issues(self, combo: ComboLike, products: CatalogLike, language: str = "es") -> List[StockIssue]:
        return check_combo_stock_issues(combo, products, language)


__all__ = ["compute_combo_pricing", "ComboPricingEngine"]
