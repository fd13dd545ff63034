# 🚀 pricing_engine/shared/metrics/exporters.py
"""
🚀 Легкий bootstrap HTTP-експортера `/metrics` для Prometheus.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import threading

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server                     # 🌐 HTTP-експортер

# 🧩 Внутрішні модулі проєкту
from pricing_engine.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_started_ports: set[int] = set()                                    # 🧷 Порти, на яких експортер уже працює
_lock = threading.Lock()


def maybe_start_prometheus(port: int) -> bool:
    """Запускає експортер на `port` один раз; повертає True, якщо запущено саме зараз."""
    with _lock:
        if port in _started_ports:
            logger.debug("📈 Prometheus exporter already running | port=%s", port)
            return False
        start_http_server(port)
        _started_ports.add(port)
        logger.info("📈 Prometheus exporter started | port=%s", port)
        return True


__all__ = ["maybe_start_prometheus"]
