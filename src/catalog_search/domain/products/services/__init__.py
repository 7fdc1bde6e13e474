# ⚙️ catalog_search/domain/products/services/__init__.py
"""⚙️ Доменні сервіси агрегації знайдених товарів."""

from .combination_aggregator import DEFAULT_LABEL_SEPARATOR, CombinationAggregator
from .customization_aggregator import CustomizationAggregator
from .search_aggregator import SearchProductsHandler

__all__ = [
    "DEFAULT_LABEL_SEPARATOR",
    "CombinationAggregator",
    "CustomizationAggregator",
    "SearchProductsHandler",
]
