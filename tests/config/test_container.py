import logging
from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from catalog_search.config import ConfigService, SearchOptions
from catalog_search.config.setup import Container
from catalog_search.domain.products import SearchQuery
from catalog_search.shared.utils import LOG_NAME


@pytest.fixture
def container(monkeypatch):
    monkeypatch.setenv("CATALOG_SEARCH_LANGUAGE_ID", "2")
    monkeypatch.delenv("CATALOG_SEARCH_CATALOG_FILE", raising=False)
    ConfigService.reset()
    yield Container(ConfigService(), SearchOptions(locale="en"))
    ConfigService.reset()


def test_container_wires_handler_over_sample_catalog(container):
    found = container.search_handler.handle(
        SearchQuery(phrase="mug", currency_iso_code="usd", results_limit=10)
    )

    assert [p.product_id for p in found] == [1, 3]
    mug, travel = found
    assert mug.name == "Ceramic mug"
    assert mug.formatted_price_excluding_tax == "$6.25"
    assert mug.price_including_tax == Decimal("7.50")
    assert mug.available_out_of_stock is False
    assert [c.attribute_label for c in mug.combinations.values()] == ["Red - Large", "Blue"]
    assert mug.combinations[11].price_excluding_tax == Decimal("6.50")
    assert mug.combinations[12].price_excluding_tax == Decimal("6.25")
    assert mug.customization_fields[5].label == "Engraving"
    assert travel.price_including_tax == Decimal("10.97")
    assert container.execution_context.currency_id is None


def test_container_uses_given_document(monkeypatch):
    ConfigService.reset()
    document = {
        "currencies": [{"id": 1, "iso_code": "EUR"}],
        "products": [{"id": 9, "name": {1: "Teapot"}, "prices": {1: "19.995"}}],
    }
    monkeypatch.delenv("CATALOG_SEARCH_LANGUAGE_ID", raising=False)

    container = Container(ConfigService(), SearchOptions(locale="de", max_results_limit=1), catalog_document=document)
    found = container.search_handler.handle(SearchQuery("tea", "EUR", 5))

    assert found[0].formatted_price_excluding_tax == "20,00 €"
    assert container.options.max_results_limit == 1
    ConfigService.reset()


@pytest.fixture
def packaged_config(monkeypatch):
    for name in ("CATALOG_SEARCH_LANGUAGE_ID", "CATALOG_SEARCH_CATALOG_FILE", "CATALOG_SEARCH_ROUNDING"):
        monkeypatch.delenv(name, raising=False)
    ConfigService.reset()
    yield ConfigService()
    ConfigService.reset()


def test_rounding_is_read_from_pricing_node(packaged_config, monkeypatch):
    monkeypatch.setitem(packaged_config._config["pricing"], "rounding", "half_even")
    document = {
        "currencies": [{"id": 1, "iso_code": "EUR"}],
        "products": [{"id": 9, "name": {1: "Teapot"}, "prices": {1: "0.125"}}],
    }

    container = Container(packaged_config, catalog_document=document)
    found = container.search_handler.handle(SearchQuery("tea", "EUR", 5))

    assert container.options.rounding == "half_even"
    assert container.options.rounding_mode == ROUND_HALF_EVEN
    assert found[0].price_excluding_tax == Decimal("0.12")


def test_container_bootstraps_logging_from_config(packaged_config, monkeypatch):
    monkeypatch.setitem(packaged_config._config["logging"], "level", "WARNING")

    Container(packaged_config)

    root = logging.getLogger(LOG_NAME)
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
