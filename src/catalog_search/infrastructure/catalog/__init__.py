# 🗄️ catalog_search/infrastructure/catalog/__init__.py
from .in_memory import (
    SAMPLE_CATALOG_PATH,
    InMemoryCatalogStore,
    InMemoryProductSearchIndex,
    load_catalog_document,
)

__all__ = [
    "SAMPLE_CATALOG_PATH",
    "InMemoryCatalogStore",
    "InMemoryProductSearchIndex",
    "load_catalog_document",
]
