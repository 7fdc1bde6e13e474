# 📊 catalog_search/shared/metrics/__init__.py
"""
📊 Prometheus-метрики обробника пошуку товарів.

🔹 `SEARCH_REQUESTS` / `SEARCH_FAILURES`: лічильники викликів і аварійних завершень.
🔹 `SEARCH_RESULTS`: гістограма кількості знайдених товарів на запит.
🔹 `SEARCH_LATENCY`: гістограма часу побудови відповіді.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                      # 📊 Prometheus-метрики

# 🧩 Внутрішні модулі проєкту
from .exporters import maybe_start_prometheus                          # 📈 HTTP-експортер

# ================================
# 📊 ЛІЧИЛЬНИКИ
# ================================
SEARCH_REQUESTS = Counter(
    "catalog_search_requests_total",                                 # 🏷️ Імʼя метрики
    "Product search calls handled",                                  # 📝 Опис у Prometheus
)

SEARCH_FAILURES = Counter(
    "catalog_search_failures_total",
    "Product search calls aborted with an error",
    ["error"],                                                       # 🏷️ Клас помилки
)

# ================================
# ⏱️ ГІСТОГРАМИ
# ================================
SEARCH_RESULTS = Histogram(
    "catalog_search_results",
    "Number of products returned per search call",
    buckets=(0, 1, 5, 10, 20, 50, 100),
)

SEARCH_LATENCY = Histogram(
    "catalog_search_seconds",
    "Time to assemble product search results",
)

__all__ = [
    "maybe_start_prometheus",
    "SEARCH_REQUESTS",
    "SEARCH_FAILURES",
    "SEARCH_RESULTS",
    "SEARCH_LATENCY",
]
