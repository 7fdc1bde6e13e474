# 🧩 catalog_search/domain/pricing/interfaces.py
"""
🧩 interfaces.py: Контракти та DTO для ціноутворення знайдених товарів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol, Union

RawPrice = Union[Decimal, int, float, str]                          # 💵 Те, що може повернути сховище


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class ProductPrice:
    """Пара округлених цін і відформатована ціна без податку.

    Ціна з податком навмисно не має рядкового представлення.
    """
    excluding_tax: Decimal
    including_tax: Decimal
    formatted_excluding_tax: str


# ================================
# 💰 КОНТРАКТИ
# ================================
class IPriceSource(Protocol):
    """Джерело сирих цін (реалізується сховищем каталогу)."""

    def get_product_price(
        self,
        product_id: int,
        include_tax: bool,
        attribute_id: Optional[int] = None,
        *,
        currency_id: int,
    ) -> RawPrice:
        ...


class IPriceFormatter(ABC):
    """Локалізоване форматування суми для показу."""

    @abstractmethod
    def format(self, amount: Decimal, currency_iso_code: str) -> str:
        """Повертає рядок на кшталт `1 234,50 ₴` або `$1,234.50`."""
        pass


class IPrecisionPolicy(ABC):
    """Правило: кількість десяткових знаків валюти → точність округлення."""

    @abstractmethod
    def get_precision(self, currency_decimal_digits: int) -> int:
        pass
