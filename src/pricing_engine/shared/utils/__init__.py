# 🧰 pricing_engine/shared/utils/__init__.py
"""
🧰 Спільні утиліти: логування та незмінні знімки мап.
"""

from .immutables import freeze_mapping
from .logger import LOG_NAME, get_logger, init_logging, init_logging_from_config

__all__ = [
    "freeze_mapping",
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
