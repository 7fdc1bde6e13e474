# 🧾 catalog_search/domain/products/rows.py
"""
🧾 Типізовані рядки, які сховище каталогу віддає агрегаторам.

🔹 Сирі асоціативні записи (ключі на кшталт `id_product_attribute`) розбираються тут,
    на межі сховища, а не всередині логіки агрегації.
🔹 Будь-який відсутній ключ або невалідне значення → `MalformedCatalogDataError`.
🔹 `NO_ROWS`: сентинел «даних немає», відмінний від порожньої послідовності.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Literal, Mapping, Sequence, TypeVar, Union

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.pricing.rounding import to_decimal
from catalog_search.errors.custom_errors import MalformedCatalogDataError
from catalog_search.shared.utils.immutables import freeze_mapping
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.rows")

T = TypeVar("T")


# ================================
# 🚫 СЕНТИНЕЛ «НЕМАЄ РЯДКІВ»
# ================================
class _Absent(Enum):
    NO_ROWS = "no_rows"

    def __repr__(self) -> str:
        return "NO_ROWS"


NO_ROWS = _Absent.NO_ROWS
NoRows = Literal[_Absent.NO_ROWS]


# ================================
# 🛠️ ХЕЛПЕРИ РОЗБОРУ
# ================================
def _field(product_id: int, data: Mapping[str, Any], key: str, cast: Callable[[Any], T], what: str) -> T:
    """Дістає `key` з сирого запису й приводить тип або піднімає `MalformedCatalogDataError`."""
    if not isinstance(data, Mapping) or key not in data:
        raise MalformedCatalogDataError(product_id, f"{what} row is missing {key!r}")
    try:
        return cast(data[key])
    except (TypeError, ValueError) as exc:
        raise MalformedCatalogDataError(
            product_id, f"{what} row has invalid {key!r}", details=repr(data[key])
        ) from exc


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_names(value: Any) -> dict:
    """`{"1": "Mug"}` або `{1: "Mug"}` → `{1: "Mug"}`."""
    if not isinstance(value, Mapping):
        raise TypeError("localized names must be a mapping")
    return {int(lang): str(name) for lang, name in value.items()}


# ================================
# 🏷️ ТОВАР
# ================================
@dataclass(frozen=True)
class ProductRecord:
    """Повний запис товару зі сховища."""

    product_id: int
    names: Mapping[int, str]                                        # 🌍 language_id → назва
    tax_rate: Decimal                                               # 📊 Відсоток податку
    location: str = ""                                              # 📍 Місце на складі
    out_of_stock: int = 2                                           # 🚦 0 = заборонити, 1 = дозволити, 2 = дефолт магазину

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", freeze_mapping(self.names))

    def name_in(self, language_id: int) -> str:
        """Назва активною мовою; відсутній переклад: пошкоджені дані."""
        try:
            return self.names[language_id]
        except KeyError:
            raise MalformedCatalogDataError(
                self.product_id, f"name is missing for language {language_id}"
            ) from None

    @classmethod
    def from_mapping(cls, product_id: int, data: Mapping[str, Any]) -> "ProductRecord":
        names = _field(product_id, data, "name", _as_names, "product")
        tax_rate = Decimal("0")                                     # 🧾 Товар без податкового правила
        if "tax_rate" in data:
            tax_rate = _field(product_id, data, "tax_rate", to_decimal, "product")
        out_of_stock = 2
        if "out_of_stock" in data:
            out_of_stock = _field(product_id, data, "out_of_stock", int, "product")
        return cls(
            product_id=product_id,
            names=names,
            tax_rate=tax_rate,
            location=_as_str(data.get("location")),
            out_of_stock=out_of_stock,
        )


# ================================
# 🎨 РЯДОК КОМБІНАЦІЇ
# ================================
@dataclass(frozen=True, slots=True)
class CombinationRow:
    """
    Один рядок комбінації: одне значення атрибута.

    Комбінація з кількома атрибутами (колір + розмір) приходить кількома
    рядками з однаковим `attribute_id`.
    """

    attribute_id: int
    attribute_name: str
    quantity: int
    location: str = ""
    reference: str = ""

    @classmethod
    def from_mapping(cls, product_id: int, data: Mapping[str, Any]) -> "CombinationRow":
        return cls(
            attribute_id=_field(product_id, data, "id_product_attribute", int, "combination"),
            attribute_name=_field(product_id, data, "attribute_name", str, "combination"),
            quantity=_field(product_id, data, "quantity", int, "combination"),
            location=_as_str(data.get("location")),
            reference=_as_str(data.get("reference")),
        )


# ================================
# ✍️ РЯДОК ПОЛЯ КАСТОМІЗАЦІЇ
# ================================
@dataclass(frozen=True, slots=True)
class CustomizationFieldRow:
    """Поле кастомізації однією мовою."""

    field_id: int
    label: str
    required: bool

    @classmethod
    def from_mapping(cls, product_id: int, data: Mapping[str, Any]) -> "CustomizationFieldRow":
        return cls(
            field_id=_field(product_id, data, "id_customization_field", int, "customization field"),
            label=_field(product_id, data, "name", _as_str, "customization field"),
            required=_field(product_id, data, "required", _as_bool, "customization field"),
        )


# ================================
# 🔎 РЕЗУЛЬТАТ ІНДЕКСУ
# ================================
@dataclass(frozen=True, slots=True)
class SearchHit:
    """Кандидат, повернутий пошуковим індексом."""

    product_id: int


CombinationRows = Union[Sequence[CombinationRow], NoRows]
# type_id → послідовність полів, кожне: language_id → рядок
CustomizationRows = Union[Mapping[int, Sequence[Mapping[int, CustomizationFieldRow]]], NoRows]


__all__ = [
    "NO_ROWS",
    "NoRows",
    "ProductRecord",
    "CombinationRow",
    "CustomizationFieldRow",
    "SearchHit",
    "CombinationRows",
    "CustomizationRows",
]
