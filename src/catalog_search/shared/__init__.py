# 🧰 catalog_search/shared/__init__.py
"""🧰 Спільні утиліти пакета: логування, заморожені мапи, метрики."""
