# 📈 catalog_search/shared/metrics/exporters.py
"""
📈 Запуск HTTP-експортера Prometheus (один раз на процес).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server                       # 📡 /metrics endpoint

# 🔠 Системні імпорти
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_started_port: Optional[int] = None                                   # 🔒 Порт уже запущеного експортера


def maybe_start_prometheus(port: int) -> bool:
    """
    Підіймає експортер на `port`, якщо він ще не працює.

    Returns:
        bool: True, якщо експортер запущено цим викликом.
    """
    global _started_port
    if _started_port is not None:
        logger.debug("📈 Prometheus exporter already running on %s", _started_port)
        return False
    start_http_server(port)
    _started_port = port
    logger.info("📈 Prometheus exporter started on port %s", port)
    return True
