# 💱 pricing_engine/infrastructure/currency/currency_converter.py
"""
💱 Stateless-конвертер, що працює зі «знімком» курсів (`RateTable`) у Decimal.

🔹 Основний шлях — «якірний»: обидві валюти розвʼязуються через одну базову валюту.
🔹 Якщо бракує якоїсь якірної ноги — пряма пара, потім обернена, потім best-effort значення.
🔹 Округлення рівно один раз, на межі функції; ділення на курс — не більше одного разу.
🔹 Відсутній курс ніколи не кидає виняток: сума проходить 1:1, а результат позначається `estimated`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування всіх операцій
from typing import Any, Mapping, Optional, Union						# 📐 Підтримка гнучких типів курсів

# 🧩 Внутрішні модулі проєкту
from pricing_engine.domain.currency.interfaces import (				# 🔗 Контракти домену
    DEFAULT_BASE_CURRENCY,
    ConversionPath,
    ConversionResult,
    IMoneyConverter,
    RateTable,
)
from pricing_engine.domain.pricing.rounding import ZERO, q2, to_decimal	# ➗ Decimal-утиліти
from pricing_engine.shared.metrics import CONVERSIONS_TOTAL, ESTIMATED_CONVERSIONS	# 📈 Метрики
from pricing_engine.shared.utils.logger import LOG_NAME				# 🏷️ Єдине імʼя логера


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.infrastructure.currency")		# 🧾 Модульний логер

RatesLike = Union[RateTable, Mapping[str, Any], None]


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _as_rate_table(rates: RatesLike) -> RateTable:
    """🧰 Приймає RateTable або сиру мапу; все інше — порожня таблиця."""
    if isinstance(rates, RateTable):
        return rates
    if rates is None or isinstance(rates, Mapping):
        return RateTable.from_mapping(rates)
    logger.warning("⚠️ Unsupported rates container %s, using an empty table", type(rates).__name__)
    return RateTable()


def _record(result: ConversionResult) -> ConversionResult:
    """📈 Фіксує метрики та попередження для «оціночних» конверсій."""
    CONVERSIONS_TOTAL.labels(path=result.path.value).inc()
    if result.estimated:
        ESTIMATED_CONVERSIONS.labels(
            from_currency=result.from_currency,
            to_currency=result.to_currency,
        ).inc()
        logger.warning(
            "⚠️ Estimated conversion | %s → %s path=%s amount=%s (missing rate treated as 1:1)",
            result.from_currency,
            result.to_currency,
            result.path.value,
            result.amount,
        )
    return result


# ================================
# 💱 ЄДИНА ТОЧКА КОНВЕРСІЇ
# ================================
def convert_detailed(
    amount: Any,
    from_currency: str,
    to_currency: str,
    rates: RatesLike,
    base_currency: Optional[str] = DEFAULT_BASE_CURRENCY,
) -> ConversionResult:
    """
    🧮 Конвертує суму між валютами та повідомляє, яким шляхом знайдено курс.

    Args:
        amount: Сума (Decimal/int/float/str); невалідне значення трактується як 0.
        from_currency: Код валюти-джерела.
        to_currency: Код цільової валюти.
        rates: `RateTable` або мапа `"FROM/TO" → rate`.
        base_currency: Якірна валюта (лише визначає, які ключі шукати першими).

    Returns:
        ConversionResult: Сума, округлена до 2 знаків (крім identity), та шлях.
    """
    value = to_decimal(amount)
    if value == ZERO or from_currency == to_currency:
        return _record(ConversionResult(value, from_currency, to_currency, ConversionPath.IDENTITY))

    table = _as_rate_table(rates)
    base = base_currency or DEFAULT_BASE_CURRENCY

    # --- ⚓ Якірний шлях ---
    rate_to_base = table.get(from_currency, base)
    rate_from_base = table.get(to_currency, base)
    amount_in_base = value / rate_to_base if rate_to_base else value
    converted = amount_in_base * rate_from_base if rate_from_base else amount_in_base
    logger.debug(
        "⚓ Anchored legs | %s %s → %s base=%s rate_to_base=%s rate_from_base=%s",
        value,
        from_currency,
        to_currency,
        base,
        rate_to_base,
        rate_from_base,
    )

    if rate_to_base is not None and rate_from_base is not None:
        return _record(ConversionResult(q2(converted), from_currency, to_currency, ConversionPath.ANCHORED))

    # --- ➡️ Пряма пара ---
    direct = table.get(from_currency, to_currency)
    if direct is not None:
        return _record(ConversionResult(q2(value * direct), from_currency, to_currency, ConversionPath.DIRECT))

    # --- ⬅️ Обернена пара ---
    inverse = table.get(to_currency, from_currency)
    if inverse is not None:
        return _record(ConversionResult(q2(value / inverse), from_currency, to_currency, ConversionPath.INVERSE))

    # --- ⚠️ Best-effort: частковий якір або 1:1 ---
    path = (
        ConversionPath.PASSTHROUGH
        if rate_to_base is None and rate_from_base is None
        else ConversionPath.PARTIAL_ANCHOR
    )
    return _record(ConversionResult(q2(converted), from_currency, to_currency, path))


def convert(
    amount: Any,
    from_currency: str,
    to_currency: str,
    rates: RatesLike,
    base_currency: Optional[str] = DEFAULT_BASE_CURRENCY,
) -> Any:
    """💱 Конвертує суму; повертає лише значення (див. `convert_detailed`)."""
    return convert_detailed(amount, from_currency, to_currency, rates, base_currency).amount


# ================================
# 💱 ПРИВʼЯЗАНИЙ КОНВЕРТЕР
# ================================
class CurrencyConverter(IMoneyConverter):
    """
    💱 Конвертер, привʼязаний до одного знімка курсів і базової валюти.

    Екземпляр викликається як функція `converter(amount, from, to)`, тож його можна
    передавати всюди, де очікується довільний `convert`-callable (наприклад, у комбо).
    """

    def __init__(self, rates: RatesLike, *, base_currency: Optional[str] = DEFAULT_BASE_CURRENCY) -> None:
        self._rates = _as_rate_table(rates)							# 📈 Незмінний знімок курсів
        self._base_currency = base_currency or DEFAULT_BASE_CURRENCY	# ⚓ Якірна валюта
        logger.debug("💱 CurrencyConverter ready | pairs=%d base=%s", len(self._rates), self._base_currency)

    @property
    def rates(self) -> RateTable:
        return self._rates

    @property
    def base_currency(self) -> str:
        return self._base_currency

    def convert_detailed(self, amount: Any, from_currency: str, to_currency: str) -> ConversionResult:
        return convert_detailed(amount, from_currency, to_currency, self._rates, self._base_currency)

    def convert(self, amount: Any, from_currency: str, to_currency: str) -> Any:
        return self.convert_detailed(amount, from_currency, to_currency).amount

    def __call__(self, amount: Any, from_currency: str, to_currency: str) -> Any:
        return self.convert(amount, from_currency, to_currency)


__all__ = ["convert", "convert_detailed", "CurrencyConverter"]
