# ⚙️ catalog_search/config/__init__.py
"""⚙️ Конфігурація пакета: ConfigService, SearchOptions, DI-контейнер."""

from .config_service import ConfigService
from .search_options import SearchOptions

__all__ = ["ConfigService", "SearchOptions"]
