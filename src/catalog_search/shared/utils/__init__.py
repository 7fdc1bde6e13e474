# 🧰 catalog_search/shared/utils/__init__.py
"""
🧰 Пакет `shared.utils`: логування та іммʼютабельні обгортки.
"""

from .immutables import FrozenMapping, freeze_mapping, is_frozen_mapping
from .logger import LOG_NAME, get_logger, init_logging, init_logging_from_config

__all__ = [
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "FrozenMapping",
    "freeze_mapping",
    "is_frozen_mapping",
]
