# ⚙️ pricing_engine/config/__init__.py
"""
⚙️ Конфігурація рушія та збирання сервісів.

🔹 `ConfigService` — обʼєднані налаштування (json → yaml → env).
🔹 `Container` — фасад ціноутворення, зібраний з цих налаштувань (імпортується ліниво).
"""

from typing import TYPE_CHECKING

from .config_service import ConfigService

if TYPE_CHECKING:
    from .setup.container import Container

__all__ = ["ConfigService", "Container"]


def __getattr__(name: str):
    # 🧭 ConfigService імпортується без доменного шару
    if name == "Container":
        from .setup.container import Container

        return Container
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
