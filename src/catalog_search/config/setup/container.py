# 📦 catalog_search/config/setup/container.py
"""
📦 Контейнер залежностей пакета пошуку товарів.

🔹 Створює сервіси в правильному порядку DI
🔹 Читає налаштування з `ConfigService` і `SearchOptions`
🔹 Дає єдину точку доступу до `SearchProductsHandler`
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import TYPE_CHECKING, Any, Mapping, Optional                 # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from catalog_search.config.search_options import SearchOptions           # 🧾 Опції пошуку
from catalog_search.domain.pricing import ComputingPrecision, PricingHelper  # 💵 Доменне ціноутворення
from catalog_search.domain.products.services import (                    # 🔎 Агрегатори та оркестратор
    CombinationAggregator,
    CustomizationAggregator,
    SearchProductsHandler,
)
from catalog_search.infrastructure.catalog import (                      # 🗄️ In-memory каталог
    SAMPLE_CATALOG_PATH,
    InMemoryCatalogStore,
    InMemoryProductSearchIndex,
    load_catalog_document,
)
from catalog_search.infrastructure.context import ExecutionContext       # 🌍 Амбієнтний контекст
from catalog_search.infrastructure.formatting import LocalePriceFormatter  # 🖨️ Форматер цін
from catalog_search.shared.metrics import maybe_start_prometheus         # 📈 Bootstrap метрик
from catalog_search.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування

if TYPE_CHECKING:
    from catalog_search.config.config_service import ConfigService       # 🗂️ Тип під час перевірки

logger = logging.getLogger(f"{LOG_NAME}.container")                      # 🧾 Модульний логер контейнера


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """Повертає ціле число або запасне значення, якщо каст неможливий."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def bootstrap_logging(config: Optional["ConfigService"] = None) -> logging.Logger:
    """Зчитує конфіг логування і запускає кореневий логер пакета."""
    from catalog_search.config.config_service import ConfigService      # 🧭 Локальний імпорт для уникнення циклів

    cfg = config or ConfigService()
    node = cfg.get("logging", {}) or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію інфраструктурних і доменних сервісів пошуку.

    Args:
        config: Джерело статичної конфігурації.
        options: Явні опції пошуку; інакше `search`-вузол конфігу, `pricing.rounding` та ENV.
        catalog_document: Готовий YAML-документ каталогу (тести, вбудовування).
    """

    # ================================
    # ⚙️ ІНІЦІАЛІЗАЦІЯ
    # ================================
    def __init__(
        self,
        config: "ConfigService",
        options: Optional[SearchOptions] = None,
        *,
        catalog_document: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.config = config                                              # ⚙️ Джерело конфігурацій DI
        self._setup_logging()                                             # 🧾 Логування раніше за сервіси
        self.options = options or SearchOptions.from_env(base=self._options_from_config())  # 🧾 Опції пошуку
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()                              # 📈 Можливий запуск експорту метрик
        self._setup_catalog(catalog_document)                             # 🗄️ Сховище та індекс
        self._setup_context()                                             # 🌍 Мова/валюта
        self._setup_pricing()                                             # 💵 Форматер, точність, PricingHelper
        self._setup_search()                                              # 🔎 Агрегатори та обробник
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 🧾 ЛОГУВАННЯ ТА ОПЦІЇ
    # ================================
    def _setup_logging(self) -> None:
        """Налаштовує кореневий логер пакета з вузла `logging`."""
        bootstrap_logging(self.config)

    def _options_from_config(self) -> SearchOptions:
        """`search`-вузол конфігу; режим округлення береться з `pricing.rounding`."""
        node = dict(self.config.get("search", {}) or {})
        rounding = self.config.get("pricing.rounding", None, cast=str)
        if rounding:
            node["rounding"] = rounding
        return SearchOptions.from_dict(node)

    # ================================
    # 📈 МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        """Стартує Prometheus-експортер, якщо це дозволено конфігурацією."""
        if not bool(self.config.get("metrics.enabled", False)):
            logger.debug("📉 Prometheus вимкнено конфігом")
            return
        port = _int_or_default(self.config.get("metrics.port", 9108, cast=int), 9108)
        maybe_start_prometheus(port)

    # ================================
    # 🗄️ КАТАЛОГ
    # ================================
    def _setup_catalog(self, document: Optional[Mapping[str, Any]]) -> None:
        if document is None:
            path = self.config.get("catalog.file", None, cast=str) or SAMPLE_CATALOG_PATH
            document = load_catalog_document(path)                        # 📘 Один документ на сховище й індекс
        self.catalog_store = InMemoryCatalogStore(document)
        self.search_index = InMemoryProductSearchIndex(document)

    # ================================
    # 🌍 КОНТЕКСТ
    # ================================
    def _setup_context(self) -> None:
        language_id = _int_or_default(self.config.get("context.language_id", 1, cast=int), 1)
        self.execution_context = ExecutionContext(language_id=language_id)
        logger.debug("🌍 Контекст: %r", self.execution_context)

    # ================================
    # 💵 ЦІНОУТВОРЕННЯ
    # ================================
    def _setup_pricing(self) -> None:
        self.price_formatter = LocalePriceFormatter(self.options.locale, rounding=self.options.rounding_mode)
        self.precision_policy = ComputingPrecision(
            multiplier=_int_or_default(self.config.get("pricing.precision.multiplier", 1, cast=int), 1),
            minimum=_int_or_default(self.config.get("pricing.precision.minimum", 0, cast=int), 0),
        )
        self.pricing_helper = PricingHelper(
            self.catalog_store,
            self.price_formatter,
            self.precision_policy,
            rounding=self.options.rounding_mode,
        )

    # ================================
    # 🔎 ПОШУК
    # ================================
    def _setup_search(self) -> None:
        self.combination_aggregator = CombinationAggregator(
            self.catalog_store,
            self.pricing_helper,
            label_separator=self.options.label_separator,
        )
        self.customization_aggregator = CustomizationAggregator(self.catalog_store)
        self.search_handler = SearchProductsHandler(
            self.catalog_store,
            self.search_index,
            self.execution_context,
            self.pricing_helper,
            self.combination_aggregator,
            self.customization_aggregator,
            max_results_limit=self.options.max_results_limit,
        )
        logger.debug(
            "🔎 SearchProductsHandler готовий (limit_cap=%s, locale=%s)",
            self.options.max_results_limit,
            self.options.locale,
        )
