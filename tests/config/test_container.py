"""
🧪 test_container.py — збірка фасаду з конфігу та перевірка відсоткових налаштувань.
"""

import logging
from decimal import Decimal

import pytest

from pricing_engine.config import ConfigService, Container
from pricing_engine.domain.pricing.services import PricingService
from pricing_engine.shared.errors import ConfigurationError
from pricing_engine.ui.formatters.price_formatter import PriceFormatter


def _write_yaml(config_dir, text):
    (config_dir / "config.yaml").write_text(text, encoding="utf-8")


def test_container_builds_services_from_config(config_dir, usd_anchored_rates):
    _write_yaml(
        config_dir,
        "pricing:\n  base_currency: USD\n  default_margin_percent: 25\n  tax_percent: 8\n"
        "currency:\n  symbols:\n    CUP: 'CUP$'\n",
    )
    container = Container(ConfigService(), rates=usd_anchored_rates, init_logging=False)

    assert isinstance(container.pricing_service, PricingService)
    assert isinstance(container.price_formatter, PriceFormatter)
    assert container.pricing_config.default_margin_percent == Decimal("25")
    assert container.pricing_config.tax_percent == Decimal("8")
    assert container.pricing_config.combo_profit_percent == Decimal("35")
    assert container.price_formatter.symbol("CUP") == "CUP$"
    assert container.pricing_service.converter.convert(1, "USD", "CUP") == Decimal("120.00")


def test_env_values_are_parsed_as_decimals(config_dir, monkeypatch):
    monkeypatch.setenv("PRICING_COMBO_PROFIT", "12.5")
    container = Container(ConfigService(), init_logging=False)
    assert container.pricing_config.combo_profit_percent == Decimal("12.5")


def test_invalid_value_falls_back_with_warning(config_dir, monkeypatch, caplog):
    monkeypatch.setenv("PRICING_DEFAULT_MARGIN", "abc")
    _write_yaml(config_dir, "pricing:\n  tax_percent: 150\n")
    with caplog.at_level(logging.WARNING, logger="pricing_engine"):
        container = Container(ConfigService(), init_logging=False)
    assert container.pricing_config.default_margin_percent == Decimal("40")
    assert container.pricing_config.tax_percent == Decimal("0")
    assert sum("Invalid config value" in rec.getMessage() for rec in caplog.records) == 2


def test_strict_mode_raises(config_dir):
    _write_yaml(config_dir, "pricing:\n  strict_config: true\n  tax_percent: -1\n")
    with pytest.raises(ConfigurationError) as exc:
        Container(ConfigService(), init_logging=False)
    assert exc.value.key == "pricing.tax_percent"


def test_blank_base_currency_uses_default(config_dir):
    _write_yaml(config_dir, "pricing:\n  base_currency: ''\n")
    assert Container(ConfigService(), init_logging=False).pricing_config.base_currency == "USD"


def test_pricing_service_for_new_rates(config_dir):
    container = Container(ConfigService(), init_logging=False)
    service = container.pricing_service_for({"EUR/USD": 1.1})
    assert service.config is container.pricing_config
    assert service.converter.convert(100, "EUR", "USD") == Decimal("110.00")


def test_metrics_exporter_started_when_enabled(config_dir, monkeypatch):
    from pricing_engine.config.setup import container as container_module

    started = []
    monkeypatch.setattr(container_module, "maybe_start_prometheus", started.append)
    _write_yaml(config_dir, "metrics:\n  enabled: true\n  prometheus:\n    port: 9555\n")
    Container(ConfigService(), init_logging=False)
    assert started == [9555]


def test_metrics_exporter_skipped_by_default(config_dir, monkeypatch):
    from pricing_engine.config.setup import container as container_module

    started = []
    monkeypatch.setattr(container_module, "maybe_start_prometheus", started.append)
    Container(ConfigService(), init_logging=False)
    assert started == []


def test_logging_section_is_applied_on_startup(config_dir, monkeypatch):
    from pricing_engine.config.setup import container as container_module

    applied = []
    monkeypatch.setattr(container_module, "init_logging_from_config", applied.append)
    _write_yaml(config_dir, "logging:\n  level: DEBUG\n  console: false\n")
    Container(ConfigService())
    assert applied == [{"level": "DEBUG", "console": False}]

    applied.clear()
    Container(ConfigService(), init_logging=False)
    assert applied == []
