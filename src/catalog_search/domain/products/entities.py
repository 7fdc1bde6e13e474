# 📦 catalog_search/domain/products/entities.py
"""
📦 Доменні сутності пошуку товарів: запит і результати.

🔹 `SearchQuery`: валідований вхід (фраза, ISO-код валюти, ліміт результатів).
🔹 `FoundProduct`: денормалізований запис товару з цінами, складом, комбінаціями й полями кастомізації.
🔹 `ProductCombination` / `ProductCustomizationField`: вкладені сутності з унікальними ключами.
🔹 Усі сутності іммʼютабельні (frozen dataclass + mapping proxy).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування валідації
from dataclasses import dataclass, field                            # 🧱 Опис сутностей
from decimal import Decimal                                         # 💰 Гроші без float
from typing import Mapping                                          # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyCode
from catalog_search.errors.custom_errors import ProductSearchQueryError
from catalog_search.shared.utils.immutables import freeze_mapping
from catalog_search.shared.utils.logger import LOG_NAME

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.products")


# ================================
# 🔎 ЗАПИТ
# ================================
@dataclass(frozen=True, slots=True)
class SearchQuery:
    """
    Іммʼютабельний запит пошуку.

    `currency_iso_code` нормалізується до upper case; резолв валюти у сховищі
    виконується пізніше і може завершитися `CurrencyNotFoundError`.
    """

    phrase: str                                                     # 🔤 Вільний текст
    currency_iso_code: str                                          # 💱 ISO 4217
    results_limit: int                                              # 🔢 Максимум результатів

    def __post_init__(self) -> None:
        phrase = self.phrase.strip() if isinstance(self.phrase, str) else ""
        if not phrase:
            raise ProductSearchQueryError("Product search phrase must be a non-empty string")
        if isinstance(self.results_limit, bool) or not isinstance(self.results_limit, int) or self.results_limit < 1:
            raise ProductSearchQueryError(
                "Results limit must be a positive integer",
                details=f"got {self.results_limit!r}",
            )
        code = CurrencyCode(self.currency_iso_code)                  # 🔤 Валідує формат ISO
        object.__setattr__(self, "phrase", phrase)
        object.__setattr__(self, "currency_iso_code", code.value)
        logger.debug("🔎 SearchQuery: %r %s limit=%s", phrase, code, self.results_limit)

    @property
    def currency_code(self) -> CurrencyCode:
        return CurrencyCode(self.currency_iso_code)


# ================================
# 🎨 КОМБІНАЦІЯ
# ================================
@dataclass(frozen=True, slots=True)
class ProductCombination:
    """Варіант товару (набір значень атрибутів) з власною парою цін."""

    combination_id: int                                             # 🆔 id_product_attribute
    attribute_label: str                                            # 🏷️ "Red - Large"
    quantity_in_stock: int                                          # 📦 Може бути відʼємною (бекордер)
    formatted_price_excluding_tax: str                              # 🖨️ Для показу
    price_excluding_tax: Decimal
    price_including_tax: Decimal
    stock_location: str
    reference: str                                                  # 🔖 SKU


# ================================
# ✍️ ПОЛЕ КАСТОМІЗАЦІЇ
# ================================
@dataclass(frozen=True, slots=True)
class ProductCustomizationField:
    """Поле, яке покупець заповнює під час покупки (текст або файл)."""

    field_id: int
    field_type_id: int                                              # 🔖 Дискримінатор: файл / текст
    label: str
    required: bool


# ================================
# 🛒 ЗНАЙДЕНИЙ ТОВАР
# ================================
@dataclass(frozen=True)
class FoundProduct:
    """
    Денормалізований запис знайденого товару.

    Мапи комбінацій та полів кастомізації належать лише цьому екземпляру і
    заморожуються при створенні (порядок вставки зберігається).
    """

    product_id: int
    name: str                                                       # 🔤 Назва активною мовою
    formatted_price_excluding_tax: str
    price_including_tax: Decimal
    price_excluding_tax: Decimal
    tax_rate: Decimal                                               # 📊 Відсоток
    quantity_in_stock: int
    stock_location: str
    available_out_of_stock: bool
    combinations: Mapping[int, ProductCombination] = field(default_factory=dict)
    customization_fields: Mapping[int, ProductCustomizationField] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "combinations", freeze_mapping(self.combinations))                  # 🧊
        object.__setattr__(self, "customization_fields", freeze_mapping(self.customization_fields))  # 🧊


__all__ = [
    "SearchQuery",
    "FoundProduct",
    "ProductCombination",
    "ProductCustomizationField",
]
