# 📦 pricing_engine/config/setup/container.py
"""
📦 Контейнер залежностей рушія ціноутворення.

🔹 Створює сервіси в правильному порядку DI
🔹 Толерантно перетворює числові налаштування на Decimal (попередження + запасне значення)
🔹 Дає єдину точку доступу до фасаду прайсингу та форматера цін
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from decimal import Decimal, InvalidOperation                            # 🪙 Конвертація конфігурацій грошей
from typing import TYPE_CHECKING, Any, Dict, Optional                    # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from pricing_engine.domain.currency.interfaces import DEFAULT_BASE_CURRENCY  # ⚓ Базова валюта
from pricing_engine.domain.pricing.services import PricingConfig, PricingService  # 💵 Доменне ціноутворення
from pricing_engine.infrastructure.currency.currency_converter import RatesLike  # 📈 Знімок курсів
from pricing_engine.shared.errors import ConfigurationError              # 🚨 Сувора перевірка конфігу
from pricing_engine.shared.metrics.exporters import maybe_start_prometheus  # 📈 Bootstrap метрик
from pricing_engine.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування
from pricing_engine.ui.formatters.price_formatter import PriceFormatter  # 🖨️ Форматування цін

if TYPE_CHECKING:
    from pricing_engine.config.config_service import ConfigService       # 🗂️ Тип під час перевірки

logger = logging.getLogger(LOG_NAME)                                     # 🧾 Модульний логер контейнера

_DEFAULTS = PricingConfig()                                              # 🎯 Запасні значення


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """
    Повертає ціле число або запасне значення, якщо каст неможливий.
    """
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію логування, метрик та доменних сервісів.
    """

    def __init__(self, config: ConfigService, *, rates: RatesLike = None, init_logging: bool = True):
        self.config = config                                              # ⚙️ Джерело конфігурацій DI
        self.strict = bool(self.config.get("pricing.strict_config", False))  # 🛡️ Режим суворої перевірки
        if init_logging:
            init_logging_from_config(self.config.get("logging", {}) or {})  # 🧾 Стартуємо логер за конфігом
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()                              # 📈 Можливий запуск експорту метрик
        self._setup_domain_services(rates)                                # 🏭 Створюємо доменні сервіси
        self._setup_presentation()                                        # 🖨️ Форматер цін
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 📈 МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        """
        Стартує Prometheus-експортер, якщо це дозволено конфігурацією.
        """
        if not bool(self.config.get("metrics.enabled", False)):
            logger.debug("📉 Prometheus вимкнено конфігом")
            return
        exporter_name = (self.config.get("metrics.exporter", "prometheus") or "prometheus").lower()
        if exporter_name != "prometheus":
            logger.debug("📉 Експортер %s не підтримується", exporter_name)
            return
        port = _int_or_default(self.config.get("metrics.prometheus.port", 9108, cast=int), 9108)
        try:
            maybe_start_prometheus(port)
        except OSError:
            logger.exception("⚠️ Не вдалося стартувати експортер метрик | port=%s", port)

    # ================================
    # 🏭 ДОМЕННІ СЕРВІСИ
    # ================================
    def _decimal_setting(self, key: str, fallback: Decimal) -> Decimal:
        """🪙 Відсоткове налаштування як Decimal у [0, 100]; невалідне → попередження і fallback."""
        raw = self.config.get(key)
        if raw is None:
            return fallback
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, TypeError, ValueError):
            value = None
        if value is None or not value.is_finite() or not Decimal("0") <= value <= Decimal("100"):
            if self.strict:
                error = ConfigurationError(key, raw)
                logger.error("❌ %s", error.message, extra=error.to_log_extra())
                raise error
            logger.warning("⚠️ Invalid config value | key=%s value=%r fallback=%s", key, raw, fallback)
            return fallback
        return value

    def _setup_domain_services(self, rates: RatesLike) -> None:
        """
        Формує конфіг і фасад ціноутворення.
        """
        base_currency = str(self.config.get("pricing.base_currency", DEFAULT_BASE_CURRENCY) or "").strip()
        self.pricing_config = PricingConfig(
            base_currency=base_currency or DEFAULT_BASE_CURRENCY,
            default_margin_percent=self._decimal_setting("pricing.default_margin_percent", _DEFAULTS.default_margin_percent),
            combo_profit_percent=self._decimal_setting("pricing.combo_profit_percent", _DEFAULTS.combo_profit_percent),
            tax_percent=self._decimal_setting("pricing.tax_percent", _DEFAULTS.tax_percent),
        )
        self.pricing_service = PricingService(self.pricing_config, rates)
        logger.debug("🏭 Доменні сервіси готові | cfg=%s", self.pricing_config)

    def _setup_presentation(self) -> None:
        symbols: Optional[Dict[str, str]] = self.config.get("currency.symbols")
        self.price_formatter = PriceFormatter(symbols if isinstance(symbols, dict) else None)

    # ================================
    # 🔁 ЗНІМКИ КУРСІВ
    # ================================
    def pricing_service_for(self, rates: RatesLike) -> PricingService:
        """💱 Фасад із тим самим конфігом, але новим знімком курсів."""
        return self.pricing_service.with_rates(rates)


__all__ = ["Container"]
