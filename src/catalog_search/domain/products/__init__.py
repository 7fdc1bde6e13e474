# 🧩 catalog_search/domain/products/__init__.py
"""
🧩 Пакет `domain.products` публікує сутності, рядки сховища, контракти та сервіси пошуку.

🔹 `entities.py`: `SearchQuery`, `FoundProduct`, `ProductCombination`, `ProductCustomizationField`.
🔹 `rows.py`: типізовані рядки сховища та сентинел `NO_ROWS`.
🔹 `interfaces.py`: `ICatalogStore`, `IProductSearchIndex`, `IExecutionContext`, `ContextState`.
🔹 `services`: `CombinationAggregator`, `CustomizationAggregator`, `SearchProductsHandler`.
"""

# 🧩 Внутрішні модулі проєкту
from .entities import (                                        # 🧱 Сутності
    FoundProduct,
    ProductCombination,
    ProductCustomizationField,
    SearchQuery,
)
from .interfaces import (                                      # 📋 Контракти колабораторів
    ContextState,
    ICatalogStore,
    IExecutionContext,
    IProductSearchIndex,
)
from .rows import (                                            # 🧾 Рядки сховища
    NO_ROWS,
    CombinationRow,
    CustomizationFieldRow,
    ProductRecord,
    SearchHit,
)
from .services import (                                        # ⚙️ Сервіси агрегації
    CombinationAggregator,
    CustomizationAggregator,
    SearchProductsHandler,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # Сутності
    "SearchQuery",
    "FoundProduct",
    "ProductCombination",
    "ProductCustomizationField",
    # Рядки
    "NO_ROWS",
    "ProductRecord",
    "CombinationRow",
    "CustomizationFieldRow",
    "SearchHit",
    # Контракти
    "ContextState",
    "ICatalogStore",
    "IExecutionContext",
    "IProductSearchIndex",
    # Сервіси
    "CombinationAggregator",
    "CustomizationAggregator",
    "SearchProductsHandler",
]
