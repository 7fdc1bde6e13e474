# 🗄️ catalog_search/infrastructure/catalog/in_memory.py
"""
🗄️ In-memory реалізації сховища каталогу та пошукового індексу поверх YAML-документа.

🔹 `load_catalog_document(path)` читає YAML (`currencies`, `products`, `allow_out_of_stock_orders`).
🔹 `InMemoryCatalogStore`: валюти, товари, ціни у кожній валюті, комбінації, кастомізація, склад.
🔹 `InMemoryProductSearchIndex`: регістронезалежний пошук підрядка в назві товару
    потрібною мовою; результат впорядкований за id товару та обрізаний до `limit`.

Сирі записи документа розбираються у типізовані рядки лише на виході зі сховища.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                         # 📘 YAML-парсинг каталогу

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи сховища
from decimal import Decimal                                         # 💰 Ціни
from pathlib import Path                                            # 📁 Шлях до файлу каталогу
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

# 🧩 Внутрішні модулі проєкту
from catalog_search.domain.currency.interfaces import CurrencyRecord
from catalog_search.domain.pricing.rounding import to_decimal
from catalog_search.domain.products.interfaces import ICatalogStore, IProductSearchIndex
from catalog_search.domain.products.rows import (
    NO_ROWS,
    CombinationRow,
    CombinationRows,
    CustomizationFieldRow,
    CustomizationRows,
    ProductRecord,
    SearchHit,
)
from catalog_search.errors.custom_errors import CurrencyNotFoundError, MalformedCatalogDataError
from catalog_search.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.catalog")

SAMPLE_CATALOG_PATH = Path(__file__).parent / "sample_catalog.yaml"   # 📦 Демонстраційний каталог

_HUNDRED = Decimal("100")


# ================================
# 📥 ЗАВАНТАЖЕННЯ ДОКУМЕНТА
# ================================
def load_catalog_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    📥 Читає YAML-каталог з диска.

    Raises:
        OSError: Файл недоступний.
        ValueError: Документ не є YAML-мапою.
    """
    file_path = Path(path)
    with open(file_path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f) or {}
    if not isinstance(document, dict):
        raise ValueError(f"Catalog document {file_path} must be a mapping, got {type(document).__name__}")
    logger.info("📘 Catalog loaded from %s", file_path)
    return document


def _index_products(document: Mapping[str, Any]) -> Dict[int, Mapping[str, Any]]:
    products: Dict[int, Mapping[str, Any]] = {}
    for raw in document.get("products") or []:
        if not isinstance(raw, Mapping) or "id" not in raw:
            raise ValueError(f"Catalog product entry must be a mapping with 'id': {raw!r}")
        product_id = int(raw["id"])
        if product_id in products:
            raise ValueError(f"Duplicate product id {product_id} in catalog")
        products[product_id] = raw
    return products


# ================================
# 🗄️ СХОВИЩЕ
# ================================
class InMemoryCatalogStore(ICatalogStore):
    """🗄️ Сховище каталогу, що тримає YAML-документ у памʼяті."""

    def __init__(self, document: Mapping[str, Any]) -> None:
        self._products = _index_products(document)
        self._currencies: Dict[int, CurrencyRecord] = {}
        for raw in document.get("currencies") or []:
            record = CurrencyRecord(
                currency_id=int(raw["id"]),
                iso_code=str(raw["iso_code"]).upper(),
                precision=int(raw.get("precision", 2)),
            )
            self._currencies[record.currency_id] = record
        self._allow_out_of_stock = bool(document.get("allow_out_of_stock_orders", False))  # 🚦 Дефолт магазину
        logger.debug(
            "🗄️ InMemoryCatalogStore: %d product(s), %d currency(ies)",
            len(self._products),
            len(self._currencies),
        )

    @classmethod
    def from_yaml_file(cls, path: Union[str, Path]) -> "InMemoryCatalogStore":
        return cls(load_catalog_document(path))

    # ================================
    # 💱 ВАЛЮТИ
    # ================================
    def resolve_currency_id(self, iso_code: str) -> Optional[int]:
        code = (iso_code or "").upper()
        for record in self._currencies.values():
            if record.iso_code == code:
                return record.currency_id
        return None

    def get_currency(self, currency_id: int) -> CurrencyRecord:
        try:
            return self._currencies[currency_id]
        except KeyError:
            raise CurrencyNotFoundError(f"#{currency_id}") from None

    # ================================
    # 🏷️ ТОВАРИ ТА ЦІНИ
    # ================================
    def _raw_product(self, product_id: int) -> Mapping[str, Any]:
        try:
            return self._products[product_id]
        except KeyError:
            raise MalformedCatalogDataError(product_id, "product is not present in the catalog") from None

    def get_product(self, product_id: int) -> ProductRecord:
        return ProductRecord.from_mapping(product_id, self._raw_product(product_id))

    def get_product_price(
        self,
        product_id: int,
        include_tax: bool,
        attribute_id: Optional[int] = None,
        *,
        currency_id: int,
    ) -> Decimal:
        raw = self._raw_product(product_id)
        prices = raw.get("prices") or {}
        if attribute_id is not None:
            for combination in raw.get("combinations") or []:
                own = combination.get("prices") if isinstance(combination, Mapping) else None
                if own and int(combination.get("id_product_attribute", -1)) == attribute_id:
                    prices = own                                    # 🎨 Власні ціни комбінації
                    break

        amount = {int(key): value for key, value in prices.items()}.get(currency_id)
        if amount is None:
            raise MalformedCatalogDataError(product_id, f"no price in currency {currency_id}")
        try:
            excluding = to_decimal(amount)
        except ValueError as exc:
            raise MalformedCatalogDataError(product_id, "price is not a number", details=repr(amount)) from exc

        if not include_tax:
            return excluding
        rate = self.get_product(product_id).tax_rate
        return excluding * (1 + rate / _HUNDRED)                    # 📊 Неокруглена ціна з податком

    # ================================
    # 🎨 КОМБІНАЦІЇ ТА КАСТОМІЗАЦІЯ
    # ================================
    def get_attribute_combinations(self, product_id: int) -> CombinationRows:
        raw_rows = self._raw_product(product_id).get("combinations")
        if not raw_rows:
            return NO_ROWS
        return [CombinationRow.from_mapping(product_id, row) for row in raw_rows]

    def get_customization_fields(self, product_id: int) -> CustomizationRows:
        raw_groups = self._raw_product(product_id).get("customization_fields")
        if not raw_groups:
            return NO_ROWS
        if not isinstance(raw_groups, Mapping):
            raise MalformedCatalogDataError(product_id, "customization fields must be grouped by type")

        groups: Dict[int, List[Mapping[int, CustomizationFieldRow]]] = {}
        for type_id, fields in raw_groups.items():
            parsed: List[Mapping[int, CustomizationFieldRow]] = []
            for localized in fields or []:
                if not isinstance(localized, Mapping):
                    raise MalformedCatalogDataError(
                        product_id, "customization field must be keyed by language", details=repr(localized)
                    )
                parsed.append(
                    {int(lang): CustomizationFieldRow.from_mapping(product_id, row) for lang, row in localized.items()}
                )
            groups[int(type_id)] = parsed
        return groups

    # ================================
    # 📦 СКЛАД
    # ================================
    def get_stock_quantity(self, product_id: int) -> int:
        raw = self._raw_product(product_id)
        try:
            return int(raw.get("quantity", 0))
        except (TypeError, ValueError) as exc:
            raise MalformedCatalogDataError(product_id, "quantity is not an integer") from exc

    def is_available_when_out_of_stock(self, flag: int) -> bool:
        if flag == 2:
            return self._allow_out_of_stock
        return flag == 1


# ================================
# 🔎 ПОШУКОВИЙ ІНДЕКС
# ================================
class InMemoryProductSearchIndex(IProductSearchIndex):
    """🔎 Пошук підрядка в локалізованих назвах товарів."""

    def __init__(self, document: Mapping[str, Any]) -> None:
        self._names: Dict[int, Dict[int, str]] = {}
        for product_id, raw in sorted(_index_products(document).items()):
            names = raw.get("name") or {}
            self._names[product_id] = {int(lang): str(name).casefold() for lang, name in names.items()}

    @classmethod
    def from_yaml_file(cls, path: Union[str, Path]) -> "InMemoryProductSearchIndex":
        return cls(load_catalog_document(path))

    def search_by_name(self, language_id: int, phrase: str, limit: int) -> Sequence[SearchHit]:
        needle = phrase.strip().casefold()
        hits: List[SearchHit] = []
        if not needle or limit <= 0:
            return hits
        for product_id, names in self._names.items():
            if needle in names.get(language_id, ""):
                hits.append(SearchHit(product_id))
                if len(hits) >= limit:
                    break
        logger.debug("🔎 %r (lang=%s, limit=%s) → %d hit(s)", phrase, language_id, limit, len(hits))
        return hits
