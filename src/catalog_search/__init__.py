# 🔎 catalog_search/__init__.py
"""
🔎 catalog_search: збирання результатів пошуку товарів каталогу.

Точка входу: `SearchProductsHandler.handle(SearchQuery)`; зібраний обробник
дає `catalog_search.config.setup.Container`.
"""

__version__ = "0.1.0"
