# 💱 catalog_search/domain/currency/__init__.py
"""
💱 Пакет `domain.currency` публікує value-обʼєкти валют.

🔹 `interfaces.py` містить `CurrencyCode` (валідний ISO-код) і `CurrencyRecord` (збережена валюта).
"""

from .interfaces import CurrencyCode, CurrencyRecord

__all__ = ["CurrencyCode", "CurrencyRecord"]
