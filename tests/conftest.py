# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "pricing_engine.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def usd_anchored_rates():
    """Курси «одиниць валюти за 1 USD» разом із якорем USD/USD."""
    return {
        "USD/USD": 1,
        "EUR/USD": 0.9,
        "CUP/USD": 120,
    }


@pytest.fixture
def catalog():
    return [
        {"id": "p1", "name": "Arroz", "name_es": "Arroz 1kg", "name_en": "Rice 1kg", "base_price": 10, "stock": 5},
        {"id": "p2", "name": "Aceite", "base_price": 20, "stock": 1},
        {"id": "p3", "name": "Frijoles", "base_price": "2.50", "stock": 0},
    ]
