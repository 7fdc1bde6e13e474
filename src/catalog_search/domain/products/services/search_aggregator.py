# 🔎 catalog_search/domain/products/services/search_aggregator.py
"""
🔎 SearchProductsHandler: оркестратор пошуку товарів.

🔹 Резолвить ISO-код у збережену валюту (`CurrencyNotFoundError`, пошук не виконується).
🔹 На час виклику встановлює валюту в амбієнтному контексті й гарантовано відновлює його.
🔹 Для кожного кандидата індексу будує `FoundProduct` (ціни, склад, комбінації, кастомізація).
🔹 Політика збоїв «все або нічого»: перша помилка кандидата скасовує весь виклик.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                          # 🧾 Логи пошуку
from time import perf_counter                                           # ⏱️ Латентність
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyRecord
from catalog_search.domain.pricing.services import PricingHelper
from catalog_search.domain.products.entities import FoundProduct, SearchQuery
from catalog_search.domain.products.interfaces import (
    ICatalogStore,
    IExecutionContext,
    IProductSearchIndex,
)
from catalog_search.errors.custom_errors import AppError, CurrencyNotFoundError, ErrorCode
from catalog_search.errors.error_handler import translate_errors
from catalog_search.shared.metrics import (
    SEARCH_FAILURES,
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    SEARCH_RESULTS,
)
from catalog_search.shared.utils.logger import LOG_NAME
from .combination_aggregator import CombinationAggregator
from .customization_aggregator import CustomizationAggregator

logger = logging.getLogger(f"{LOG_NAME}.domain.search")


# ================================
# 🏛️ ОБРОБНИК ПОШУКУ
# ================================
class SearchProductsHandler:
    """
    🔎 Єдина публічна операція: `handle(SearchQuery) -> List[FoundProduct]`.

    Спільний `IExecutionContext` мутується на час виклику, тому паралельні
    виклики з тим самим контекстом потребують зовнішньої серіалізації.
    """

    # ================================
    # 🧱 ІНІЦІАЛІЗАЦІЯ
    # ================================
    def __init__(
        self,
        store: ICatalogStore,
        search_index: IProductSearchIndex,
        context: IExecutionContext,
        pricing: PricingHelper,
        combinations: CombinationAggregator,
        customizations: CustomizationAggregator,
        *,
        max_results_limit: Optional[int] = None,
    ) -> None:
        self._store = store                                             # 🗄️ Сховище каталогу
        self._index = search_index                                      # 🔎 Пошуковий індекс
        self._context = context                                         # 🌍 Амбієнтні мова/валюта
        self._pricing = pricing                                         # 💸 Ціни товару
        self._combinations = combinations                               # 🎨 Комбінації
        self._customizations = customizations                           # ✍️ Поля кастомізації
        self._max_results_limit = max_results_limit                     # 🔢 Жорстка стеля ліміту

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    def handle(self, query: SearchQuery) -> List[FoundProduct]:
        """
        Шукає товари за фразою та будує їхні записи у валюті запиту.

        Args:
            query: Валідований запит.

        Returns:
            List[FoundProduct]: У порядку, який повернув індекс; може бути порожнім.

        Raises:
            CurrencyNotFoundError: ISO-код не резолвиться.
            StoreUnavailableError: Збій I/O колаборатора.
            MalformedCatalogDataError: Пошкоджені дані кандидата.
        """
        SEARCH_REQUESTS.inc()
        started = perf_counter()
        try:
            found = self._search(query)
        except AppError as exc:
            SEARCH_FAILURES.labels(error=exc.code).inc()
            logger.error("🔥 Search aborted | phrase=%r: %s", query.phrase, exc, extra=exc.to_log_extra())
            raise
        except Exception:
            SEARCH_FAILURES.labels(error=ErrorCode.UNKNOWN).inc()
            logger.exception("🔥 Search aborted by unexpected error | phrase=%r", query.phrase)
            raise

        elapsed = perf_counter() - started
        SEARCH_RESULTS.observe(len(found))
        SEARCH_LATENCY.observe(elapsed)
        if not found:
            logger.warning("📭 No products for phrase=%r", query.phrase)
        logger.info(
            "✅ Search completed | phrase=%r currency=%s found=%d took=%.2fms",
            query.phrase,
            query.currency_iso_code,
            len(found),
            elapsed * 1000,
        )
        return found

    # ================================
    # 🛠️ ВНУТРІШНІ КРОКИ
    # ================================
    @translate_errors("product search")
    def _search(self, query: SearchQuery) -> List[FoundProduct]:
        currency = self._resolve_currency(query.currency_iso_code)      # 💱 До будь-якої мутації контексту
        limit = self._effective_limit(query.results_limit)

        with self._context.currency_scope(currency.currency_id) as state:
            logger.info(
                "🔎 Search started | phrase=%r lang=%s currency=%s limit=%s",
                query.phrase,
                state.language_id,
                currency.iso_code,
                limit,
            )
            hits = self._index.search_by_name(state.language_id, query.phrase, limit)
            # Будь-який виняток нижче скасовує весь виклик; контекст відновить `with`
            return [self._build(hit.product_id, currency, state.language_id) for hit in hits]

    def _resolve_currency(self, iso_code: str) -> CurrencyRecord:
        currency_id = self._store.resolve_currency_id(iso_code)
        if currency_id is None:
            raise CurrencyNotFoundError(iso_code)
        return self._store.get_currency(currency_id)

    def _effective_limit(self, requested: int) -> int:
        if self._max_results_limit is None:
            return requested
        return min(requested, self._max_results_limit)

    def _build(self, product_id: int, currency: CurrencyRecord, language_id: int) -> FoundProduct:
        """🧱 Збирає `FoundProduct` для одного кандидата."""
        record = self._store.get_product(product_id)                    # 🏷️ Повний запис товару
        price = self._pricing.price_for(product_id, currency)           # 💸 Базова ціна товару
        available = self._store.is_available_when_out_of_stock(record.out_of_stock)

        product = FoundProduct(
            product_id=record.product_id,
            name=record.name_in(language_id),
            formatted_price_excluding_tax=price.formatted_excluding_tax,
            price_including_tax=price.including_tax,
            price_excluding_tax=price.excluding_tax,
            tax_rate=record.tax_rate,
            quantity_in_stock=int(self._store.get_stock_quantity(product_id)),
            stock_location=record.location,
            available_out_of_stock=bool(available),
            combinations=self._combinations.aggregate(product_id, currency),
            customization_fields=self._customizations.aggregate(product_id, language_id),
        )
        logger.debug(
            "🛒 product=%s %r price=%s/%s combinations=%d fields=%d",
            product.product_id,
            product.name,
            product.price_excluding_tax,
            product.price_including_tax,
            len(product.combinations),
            len(product.customization_fields),
        )
        return product
