# 🧩 catalog_search/domain/products/interfaces.py
"""
🧩 Контракти зовнішніх колабораторів обробника пошуку.

🔹 `ICatalogStore`: валюти, товари, ціни, комбінації, кастомізація, склад.
🔹 `IProductSearchIndex`: повнотекстовий пошук кандидатів за назвою.
🔹 `IExecutionContext`: амбієнтні мова/валюта з гарантованим відновленням.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyRecord
from catalog_search.domain.pricing.interfaces import RawPrice
from .rows import CombinationRows, CustomizationRows, ProductRecord, SearchHit


# ================================
# 🗄️ СХОВИЩЕ КАТАЛОГУ
# ================================
class ICatalogStore(ABC):
    """Контракт для персистентного сховища каталогу."""

    @abstractmethod
    def resolve_currency_id(self, iso_code: str) -> Optional[int]:
        """ISO-код → id валюти або None, якщо такої немає."""
        pass

    @abstractmethod
    def get_currency(self, currency_id: int) -> CurrencyRecord:
        pass

    @abstractmethod
    def get_product(self, product_id: int) -> ProductRecord:
        """Повний запис товару; невідомий id → `MalformedCatalogDataError`."""
        pass

    @abstractmethod
    def get_product_price(
        self,
        product_id: int,
        include_tax: bool,
        attribute_id: Optional[int] = None,
        *,
        currency_id: int,
    ) -> RawPrice:
        """Сира ціна товару (або комбінації) у валюті `currency_id`."""
        pass

    @abstractmethod
    def get_attribute_combinations(self, product_id: int) -> CombinationRows:
        """Рядки комбінацій або `NO_ROWS`."""
        pass

    @abstractmethod
    def get_customization_fields(self, product_id: int) -> CustomizationRows:
        """type_id → поля (language_id → рядок) або `NO_ROWS`."""
        pass

    @abstractmethod
    def get_stock_quantity(self, product_id: int) -> int:
        pass

    @abstractmethod
    def is_available_when_out_of_stock(self, flag: int) -> bool:
        """Прапорець out_of_stock товару → чи можна замовити за відсутності."""
        pass


# ================================
# 🔎 ПОШУКОВИЙ ІНДЕКС
# ================================
class IProductSearchIndex(ABC):
    """Контракт для сервісу, який шукає товари за текстовою фразою."""

    @abstractmethod
    def search_by_name(self, language_id: int, phrase: str, limit: int) -> Sequence[SearchHit]:
        """Кандидати у порядку релевантності; порожній результат: не помилка."""
        pass


# ================================
# 🌍 АМБІЄНТНИЙ КОНТЕКСТ
# ================================
@dataclass(frozen=True, slots=True)
class ContextState:
    """Знімок амбієнтного контексту."""

    language_id: int
    currency_id: Optional[int]


class IExecutionContext(ABC):
    """Активні мова та валюта; мутація лише через scope з відновленням."""

    @property
    @abstractmethod
    def language_id(self) -> int:
        pass

    @property
    @abstractmethod
    def currency_id(self) -> Optional[int]:
        pass

    @abstractmethod
    def currency_scope(self, currency_id: int) -> AbstractContextManager[ContextState]:
        """Встановлює валюту на час блоку `with` і відновлює попередній стан на виході."""
        pass

    @abstractmethod
    def snapshot(self) -> ContextState:
        pass
