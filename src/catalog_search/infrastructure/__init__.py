# 🏗️ catalog_search/infrastructure/__init__.py
"""
🏗️ Інфраструктурні реалізації доменних контрактів.

🔹 `context`: `ExecutionContext` з `currency_scope`.
🔹 `formatting`: `LocalePriceFormatter`.
🔹 `catalog`: in-memory сховище та індекс поверх YAML.
"""

from .catalog import InMemoryCatalogStore, InMemoryProductSearchIndex, load_catalog_document
from .context import ExecutionContext
from .formatting import LocalePriceFormatter

__all__ = [
    "ExecutionContext",
    "LocalePriceFormatter",
    "InMemoryCatalogStore",
    "InMemoryProductSearchIndex",
    "load_catalog_document",
]
