# 🖨️ catalog_search/infrastructure/formatting/__init__.py
from .price_formatter import LOCALES, LocaleFormat, LocalePriceFormatter

__all__ = ["LOCALES", "LocaleFormat", "LocalePriceFormatter"]
