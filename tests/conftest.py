# tests/conftest.py
import logging
import os
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "catalog_search.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from catalog_search.domain.currency import CurrencyRecord  # noqa: E402
from catalog_search.domain.pricing import ComputingPrecision, IPriceFormatter, PricingHelper  # noqa: E402
from catalog_search.domain.products import (  # noqa: E402
    NO_ROWS,
    CombinationAggregator,
    CustomizationAggregator,
    ICatalogStore,
    IProductSearchIndex,
    ProductRecord,
    SearchHit,
    SearchProductsHandler,
)
from catalog_search.errors import MalformedCatalogDataError  # noqa: E402
from catalog_search.infrastructure.context import ExecutionContext  # noqa: E402
from catalog_search.shared.utils import LOG_NAME  # noqa: E402

UAH = CurrencyRecord(currency_id=1, iso_code="UAH", precision=2)
USD = CurrencyRecord(currency_id=2, iso_code="USD", precision=2)
JPY = CurrencyRecord(currency_id=3, iso_code="JPY", precision=0)


class FakeCatalogStore(ICatalogStore):
    """Сховище з ручним наповненням і журналом викликів."""

    def __init__(self, currencies=(UAH, USD, JPY)):
        self.currencies = {c.currency_id: c for c in currencies}
        self.products = {}
        self.prices = {}                # (product_id, attribute_id, include_tax, currency_id) → raw
        self.combinations = {}
        self.customizations = {}
        self.stock = {}
        self.failures = {}              # product_id → виняток у get_product
        self.price_calls = []
        self.allow_default = True

    def add_product(self, product_id, name="Mug", *, excl="10.00", incl="12.00", tax_rate="20",
                    location="", out_of_stock=2, quantity=0, language_id=1, currency_id=1):
        self.products[product_id] = ProductRecord(
            product_id=product_id,
            names={language_id: name},
            tax_rate=Decimal(tax_rate),
            location=location,
            out_of_stock=out_of_stock,
        )
        self.set_price(product_id, None, excl, incl, currency_id=currency_id)
        self.stock[product_id] = quantity

    def set_price(self, product_id, attribute_id, excl, incl, *, currency_id=1):
        self.prices[(product_id, attribute_id, False, currency_id)] = excl
        self.prices[(product_id, attribute_id, True, currency_id)] = incl

    def resolve_currency_id(self, iso_code):
        for record in self.currencies.values():
            if record.iso_code == iso_code:
                return record.currency_id
        return None

    def get_currency(self, currency_id):
        return self.currencies[currency_id]

    def get_product(self, product_id):
        if product_id in self.failures:
            raise self.failures[product_id]
        try:
            return self.products[product_id]
        except KeyError:
            raise MalformedCatalogDataError(product_id, "unknown product") from None

    def get_product_price(self, product_id, include_tax, attribute_id=None, *, currency_id):
        self.price_calls.append((product_id, include_tax, attribute_id, currency_id))
        return self.prices[(product_id, attribute_id, include_tax, currency_id)]

    def get_attribute_combinations(self, product_id):
        return self.combinations.get(product_id, NO_ROWS)

    def get_customization_fields(self, product_id):
        return self.customizations.get(product_id, NO_ROWS)

    def get_stock_quantity(self, product_id):
        return self.stock.get(product_id, 0)

    def is_available_when_out_of_stock(self, flag):
        return self.allow_default if flag == 2 else flag == 1


class FakeSearchIndex(IProductSearchIndex):
    """Індекс, що повертає заздалегідь задані id у заданому порядку."""

    def __init__(self, product_ids=()):
        self.product_ids = list(product_ids)
        self.calls = []
        self.error = None

    def search_by_name(self, language_id, phrase, limit):
        self.calls.append((language_id, phrase, limit))
        if self.error is not None:
            raise self.error
        return [SearchHit(pid) for pid in self.product_ids[:limit]]


class StubFormatter(IPriceFormatter):
    def format(self, amount, currency_iso_code):
        return f"{amount} {currency_iso_code}"


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Контейнер налаштовує логер пакета; повертаємо його стан після тесту."""
    logger = logging.getLogger(LOG_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def store():
    return FakeCatalogStore()


@pytest.fixture
def index():
    return FakeSearchIndex()


@pytest.fixture
def context():
    return ExecutionContext(language_id=1, currency_id=7)


@pytest.fixture
def pricing(store):
    return PricingHelper(store, StubFormatter(), ComputingPrecision())


@pytest.fixture
def make_handler(store, index, context, pricing):
    def _make(max_results_limit=None, separator=" - "):
        return SearchProductsHandler(
            store,
            index,
            context,
            pricing,
            CombinationAggregator(store, pricing, label_separator=separator),
            CustomizationAggregator(store),
            max_results_limit=max_results_limit,
        )

    return _make
