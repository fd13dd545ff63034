# ⚙️ pricing_engine/config/config_service.py
"""
⚙️ Налаштування рушія ціноутворення з трьох шарів.

🔹 `config.json` → `config.yaml` → змінні середовища (у т.ч. з `.env`); наступний шар перекриває попередній.
🔹 Доступ через крапкові ключі: `ConfigService().get("pricing.tax_percent", 0)`.
🔹 Один екземпляр на процес; `ConfigService.reset()` змушує перечитати джерела.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                 # 📘 Розбір config.yaml
from dotenv import load_dotenv              # 🔐 Змінні з .env у os.environ

# 🔠 Системні імпорти
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

CONFIG_DIR_ENV = "PRICING_CONFIG_DIR"       # 📂 Інша тека з config.json / config.yaml

# 🔐 Змінна середовища → крапковий ключ
ENV_KEYS: Dict[str, str] = {
    "PRICING_BASE_CURRENCY": "pricing.base_currency",
    "PRICING_DEFAULT_MARGIN": "pricing.default_margin_percent",
    "PRICING_COMBO_PROFIT": "pricing.combo_profit_percent",
    "PRICING_TAX_PERCENT": "pricing.tax_percent",
    "LOG_LEVEL": "logging.level",
}


# ================================
# 🔧 ЗЛИТТЯ ШАРІВ
# ================================
def _nest(dotted: Mapping[str, Any]) -> Dict[str, Any]:
    """{'pricing.tax_percent': 8} → {'pricing': {'tax_percent': 8}}"""
    tree: Dict[str, Any] = {}
    for dotted_key, value in dotted.items():
        *parents, leaf = dotted_key.split(".")
        node = tree
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return tree


def _merge_into(target: Dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Вкладені словники зливаються, решта значень перезаписується."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        else:
            target[key] = dict(value) if isinstance(value, Mapping) else value


def _read_layer(path: Path, parse: Callable[[Any], Any], errors: tuple) -> Dict[str, Any]:
    """Читає один файл-шар; відсутній файл дає порожній шар, зламаний пишеться у warning."""
    if not path.exists():
        logger.debug("📄 %s відсутній, пропускаємо", path.name)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = parse(handle)
    except errors as exc:
        logger.warning("⚠️ Не вдалося прочитати %s: %s", path.name, exc)
        return {}
    if not isinstance(data, Mapping):
        logger.warning("⚠️ %s має містити словник верхнього рівня", path.name)
        return {}
    return dict(data)


def _env_layer() -> Dict[str, Any]:
    load_dotenv()
    present = {key: os.getenv(name) for name, key in ENV_KEYS.items()}
    return _nest({key: value for key, value in present.items() if value not in (None, "")})


# ================================
# ⚙️ СЕРВІС
# ================================
class ConfigService:
    """
    ⚙️ Обʼєднана конфігурація рушія (Singleton).
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = instance._load()
            cls._instance = instance
            logger.debug("🔄 ConfigService створено")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Наступний `ConfigService()` перечитає всі джерела."""
        cls._instance = None

    @staticmethod
    def config_dir() -> Path:
        override = os.getenv(CONFIG_DIR_ENV)
        return Path(override) if override else Path(__file__).parent

    def _load(self) -> Dict[str, Any]:
        base_dir = self.config_dir()
        merged: Dict[str, Any] = {}
        for layer in (
            _read_layer(base_dir / "config.json", json.load, (json.JSONDecodeError, OSError)),
            _read_layer(base_dir / "config.yaml", yaml.safe_load, (yaml.YAMLError, OSError)),
            _env_layer(),
        ):
            _merge_into(merged, layer)
        logger.info("✅ Конфігурацію завантажено | dir=%s sections=%s", base_dir, sorted(merged))
        return merged

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Значення за крапковим ключем.

        Args:
            key: Наприклад `"metrics.prometheus.port"`.
            default: Повертається, якщо ключа немає або `cast` не вдався.
            cast: Опційне приведення типу (`int`, `float`, ...).
        """
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                logger.debug("❓ Ключ '%s' не знайдено", key)
                return default
            value = value[part]

        if cast is None or value is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning("⚠️ Ключ '%s'=%r не приводиться до %s", key, value, getattr(cast, "__name__", cast))
            return default

    def as_dict(self) -> Dict[str, Any]:
        """📦 Глибока копія конфігурації (для діагностики)."""
        return json.loads(json.dumps(self._config, default=str))
