# 💱 pricing_engine/domain/currency/interfaces.py
"""
💱 Контракти та DTO валютного домену.

🔹 `RateTable` — незмінний знімок курсів `"FROM/TO" → rate`, який передає виклик.
🔹 `ConversionResult` — сума після конверсії разом зі шляхом розвʼязку курсу та прапором `estimated`.
🔹 `IMoneyConverter` — протокол конвертера, якого очікують комбо- та фасадні сервіси.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                   # 🧾 Діагностика відкинутих рядків курсів
from dataclasses import dataclass, field                         # 🧱 Immutable DTO
from decimal import Decimal                                      # 💵 Точні курси
from enum import Enum                                            # 🏷️ Шляхи конверсії
from typing import (                                             # 📐 Типізація
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    NewType,
    Optional,
    Protocol,
    runtime_checkable,
)

# 🧩 Внутрішні модулі проєкту
from pricing_engine.domain.pricing.rounding import ZERO, to_decimal
from pricing_engine.shared.errors import IncompleteRateTableError
from pricing_engine.shared.utils.immutables import freeze_mapping
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.currency")

# ================================
# 🔤 ТИПИ
# ================================
CurrencyCode = NewType("CurrencyCode", str)                      # 🔤 Код валюти (порівняння як точний збіг рядків)
DEFAULT_BASE_CURRENCY = CurrencyCode("USD")                      # ⚓ Якір за замовчуванням

ConvertFn = Callable[[Any, str, str], Any]                       # 🔁 convert(amount, from_id, to_id)


class ConversionPath(str, Enum):
    """Яким шляхом було знайдено курс."""

    IDENTITY = "identity"                                        # 🔁 Та сама валюта або нульова сума
    ANCHORED = "anchored"                                        # ⚓ Обидві ноги через базову валюту
    DIRECT = "direct"                                            # ➡️ Пряма пара FROM/TO
    INVERSE = "inverse"                                          # ⬅️ Обернена пара TO/FROM
    PARTIAL_ANCHOR = "partial_anchor"                            # ⚠️ Лише одна якірна нога, друга 1:1
    PASSTHROUGH = "passthrough"                                  # ⚠️ Жодного курсу, сума 1:1


ESTIMATED_PATHS: FrozenSet[ConversionPath] = frozenset(
    {ConversionPath.PARTIAL_ANCHOR, ConversionPath.PASSTHROUGH}
)


# ================================
# 📈 ТАБЛИЦЯ КУРСІВ
# ================================
@dataclass(frozen=True)
class RateTable:
    """
    📈 Незмінний знімок курсів валют на час одного розрахунку.

    Ключ `"FROM/TO"` означає «1 одиниця FROM = rate одиниць TO». Обернені ключі не
    синтезуються, а нульові, відʼємні чи нечислові курси вважаються відсутніми.
    """

    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized: Dict[str, Decimal] = {}
        for key, value in dict(self.rates or {}).items():
            if not isinstance(key, str) or "/" not in key:
                logger.debug("🚫 RateTable skip | key=%r (expected 'FROM/TO')", key)
                continue
            normalized[key] = to_decimal(value)
        object.__setattr__(self, "rates", freeze_mapping(normalized))   # 🧊 Знімок більше не мутується

    # ---------- 🏗️ Конструктори ----------
    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "RateTable":
        """Будує таблицю з довільної мапи `{"EUR/USD": 1.1, ...}`."""
        if isinstance(mapping, RateTable):
            return mapping
        return cls(dict(mapping or {}))

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> "RateTable":
        """
        Будує таблицю з рядків зовнішньої таблиці курсів.

        Рядок: `from_code`/`to_code` (або вкладені `from_currency.code`/`to_currency.code`),
        `rate`, опційні `is_active` та `effective_date`. Неактивні рядки пропускаються,
        для однієї пари перемагає новіший `effective_date`.
        """
        def _code(row: Mapping[str, Any], side: str) -> Optional[str]:
            flat = row.get(f"{side}_code")
            if flat:
                return str(flat)
            nested = row.get(f"{side}_currency")
            if isinstance(nested, Mapping) and nested.get("code"):
                return str(nested["code"])
            return None

        active = [row for row in rows or () if row.get("is_active") is not False]
        active.sort(key=lambda row: str(row.get("effective_date") or ""))
        collected: Dict[str, Any] = {}
        for row in active:
            from_code, to_code = _code(row, "from"), _code(row, "to")
            if not from_code or not to_code:
                logger.debug("🚫 RateTable row skipped | row=%r", row)
                continue
            collected[cls.key(from_code, to_code)] = row.get("rate")
        return cls(collected)

    # ---------- 🔎 Доступ ----------
    @staticmethod
    def key(from_currency: str, to_currency: str) -> str:
        return f"{from_currency}/{to_currency}"

    def get(self, from_currency: str, to_currency: str) -> Optional[Decimal]:
        """Повертає додатний курс пари або None (відсутній / 0 / відʼємний)."""
        rate = self.rates.get(self.key(from_currency, to_currency))
        if rate is None or rate <= ZERO:
            return None
        return rate

    def currencies(self) -> FrozenSet[str]:
        """Усі коди валют, що згадуються в ключах."""
        codes = set()
        for key in self.rates:
            codes.update(part for part in key.split("/", 1) if part)
        return frozenset(codes)

    # ---------- 🛡️ Сувора перевірка (для виклику) ----------
    def missing_pairs(
        self, currencies: Optional[Iterable[str]] = None, base_currency: str = DEFAULT_BASE_CURRENCY
    ) -> List[str]:
        """Валюти, для яких немає валідного якірного курсу `"{code}/{base}"`; None → усі валюти таблиці."""
        missing: List[str] = []
        for code in sorted(self.currencies()) if currencies is None else currencies:
            if code == base_currency or code in missing:
                continue
            if self.get(code, base_currency) is None:
                missing.append(code)
        return missing

    def require_complete(
        self, currencies: Optional[Iterable[str]] = None, base_currency: str = DEFAULT_BASE_CURRENCY
    ) -> None:
        """Кидає `IncompleteRateTableError`, якщо якоїсь якірної пари бракує."""
        missing = self.missing_pairs(currencies, base_currency)
        if missing:
            error = IncompleteRateTableError(missing, base_currency)
            logger.error("❌ Rate table incomplete | base=%s missing=%s", base_currency, missing, extra=error.to_log_extra())
            raise error

    def to_dict(self) -> Dict[str, float]:
        return {key: float(value) for key, value in self.rates.items()}

    def __len__(self) -> int:
        return len(self.rates)

    def __contains__(self, key: object) -> bool:
        return key in self.rates


# ================================
# 📦 РЕЗУЛЬТАТ КОНВЕРСІЇ
# ================================
@dataclass(frozen=True, slots=True)
class ConversionResult:
    """📦 Сума після конверсії та шлях, яким знайдено курс."""

    amount: Decimal
    from_currency: str
    to_currency: str
    path: ConversionPath

    @property
    def estimated(self) -> bool:
        """True, якщо хоча б одна нога конверсії прийнята як 1:1."""
        return self.path in ESTIMATED_PATHS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": float(self.amount),
            "fromCurrency": self.from_currency,
            "toCurrency": self.to_currency,
            "path": self.path.value,
            "estimated": self.estimated,
        }


# ================================
# 🔗 КОНТРАКТ КОНВЕРТЕРА
# ================================
@runtime_checkable
class IMoneyConverter(Protocol):
    """🔗 Конвертер, привʼязаний до таблиці курсів і базової валюти."""

    def convert(self, amount: Any, from_currency: str, to_currency: str) -> Decimal:
        ...

    def convert_detailed(self, amount: Any, from_currency: str, to_currency: str) -> ConversionResult:
        ...


__all__ = [
    "CurrencyCode",
    "DEFAULT_BASE_CURRENCY",
    "ConvertFn",
    "ConversionPath",
    "ESTIMATED_PATHS",
    "RateTable",
    "ConversionResult",
    "IMoneyConverter",
]
