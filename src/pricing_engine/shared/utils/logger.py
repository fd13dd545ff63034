# 📜 pricing_engine/shared/utils/logger.py
"""
📜 Єдина схема логування для рушія ціноутворення.

🔹 Налаштовує логер `pricing_engine`: консоль і, за потреби, файл із ротацією.
🔹 Файл можна писати в JSON (разом з `extra`-полями: шлях конверсії, коди валют, ключ конфігу).
🔹 Дочірні логери модулів мають вигляд `pricing_engine.<область>`.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 JSON-рядки логів
import logging									# 🪵 Стандартне логування
import sys									# 🖥️ stdout для консолі
import threading								# 🔒 Захист повторної ініціалізації
from dataclasses import dataclass, field, fields, replace		# 🧱 Конфіг логування
from logging.handlers import TimedRotatingFileHandler			# 📁 Ротація файлів
from pathlib import Path							# 📂 Тека для лог-файлу
from typing import Any, Dict, Mapping, Optional, Union

# ================================
# 🧾 КОНСТАНТИ
# ================================
LOG_NAME: str = "pricing_engine"
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"

# Атрибути будь-якого LogRecord; усе інше в записі прийшло через `extra=`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}
_OWN_HANDLER_FLAG = "_pricing_engine_handler"

_lock = threading.Lock()


# ================================
# ⚙️ КОНФІГ
# ================================
@dataclass
class LoggingConfig:
    """Налаштування логування; поля збігаються з ключами розділу `logging` у config.yaml."""
    level: str = "INFO"
    console: bool = True
    json: bool = False							# 📦 JSON лише для файлу
    file: Optional[str] = None						# 📁 None → без файлу
    when: str = "midnight"
    interval: int = 1
    backup_count: int = 7
    encoding: str = "utf-8"
    suppress: Dict[str, str] = field(default_factory=dict)		# 🙊 {"prometheus_client": "WARNING"}
    console_level: Optional[str] = None					# None → як `level`
    file_level: Optional[str] = None
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        """Будує конфіг із розділу `logging`; невідомі ключі та None пропускаються."""
        known = {item.name for item in fields(cls)}
        values = {key: value for key, value in (node or {}).items() if key in known and value is not None}
        return cls(**values)


# ================================
# 🧰 ФОРМАТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Один запис → один JSON-рядок; `extra`-поля додаються на верхній рівень."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload.setdefault(key, value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)	# 🔄 Decimal та інше → str


# ================================
# 🛠️ ХЕНДЛЕРИ
# ================================
def _to_level(value: Union[str, int, None], default: int) -> int:
    """Рядок або число → числовий рівень логування."""
    if isinstance(value, int):
        return value
    resolved = logging.getLevelName(str(value or "").upper())
    return resolved if isinstance(resolved, int) else default


def _mark(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    setattr(handler, _OWN_HANDLER_FLAG, True)
    return handler


def _build_handlers(cfg: LoggingConfig, base_level: int) -> list:
    handlers = []
    if cfg.console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter(cfg.console_format))
        handlers.append(_mark(console, _to_level(cfg.console_level, base_level)))
    if cfg.file:
        path = Path(str(cfg.file))
        path.parent.mkdir(parents=True, exist_ok=True)
        rotating = TimedRotatingFileHandler(
            filename=str(path),
            when=cfg.when,
            interval=cfg.interval,
            backupCount=cfg.backup_count,
            encoding=cfg.encoding,
        )
        rotating.setFormatter(JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format))
        handlers.append(_mark(rotating, _to_level(cfg.file_level, base_level)))
    return handlers


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(config: Optional[LoggingConfig] = None, **overrides: Any) -> logging.Logger:
    """
    Налаштовує логер `pricing_engine`; повторний виклик замінює лише власні хендлери.

    Args:
        config: Готовий `LoggingConfig` (None → значення за замовчуванням).
        **overrides: Окремі поля конфігу, наприклад `level="DEBUG"` або `file="logs/pricing.log"`.
    """
    cfg = replace(config or LoggingConfig(), **overrides)
    with _lock:
        root_logger = logging.getLogger(LOG_NAME)
        base_level = _to_level(cfg.level, logging.INFO)
        handlers = _build_handlers(cfg, base_level)

        for handler in list(root_logger.handlers):
            if getattr(handler, _OWN_HANDLER_FLAG, False):
                root_logger.removeHandler(handler)
                handler.close()
        for handler in handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(min([base_level, *(h.level for h in handlers)]))

        for name, level in (cfg.suppress or {}).items():
            logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))

    root_logger.info(
        "✅ Logging initialized | level=%s console=%s json=%s file=%s",
        logging.getLevelName(base_level),
        "ON" if cfg.console else "OFF",
        "ON" if cfg.json else "OFF",
        cfg.file or "-",
    )
    return root_logger


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """Ініціалізує логування з розділу `logging` конфігурації."""
    return init_logging(LoggingConfig.from_mapping(config))


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """`get_logger("domain.pricing")` → логер `pricing_engine.domain.pricing`."""
    return logging.getLogger(f"{LOG_NAME}.{suffix}" if suffix else LOG_NAME)


__all__ = [
    "LOG_NAME",
    "LoggingConfig",
    "JsonFormatter",
    "init_logging",
    "init_logging_from_config",
    "get_logger",
]
