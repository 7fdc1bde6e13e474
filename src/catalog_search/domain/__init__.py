# 🏛️ catalog_search/domain/__init__.py
"""🏛️ Доменний шар: валюти, ціноутворення та агрегація знайдених товарів."""
