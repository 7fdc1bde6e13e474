import pytest

from catalog_search.domain.currency import CurrencyCode
from catalog_search.domain.products import FoundProduct, SearchQuery
from catalog_search.errors import ProductSearchQueryError


def test_query_normalizes_phrase_and_iso_code():
    query = SearchQuery(phrase="  mug ", currency_iso_code="uah", results_limit=5)

    assert query.phrase == "mug"
    assert query.currency_iso_code == "UAH"
    assert query.currency_code == CurrencyCode("UAH")


@pytest.mark.parametrize("phrase", ["", "   ", None])
def test_query_rejects_empty_phrase(phrase):
    with pytest.raises(ProductSearchQueryError):
        SearchQuery(phrase=phrase, currency_iso_code="EUR", results_limit=1)


@pytest.mark.parametrize("limit", [0, -3, True, "10", 2.5])
def test_query_rejects_non_positive_or_non_int_limit(limit):
    with pytest.raises(ProductSearchQueryError):
        SearchQuery(phrase="mug", currency_iso_code="EUR", results_limit=limit)


@pytest.mark.parametrize("code", ["EU", "EURO", "E1R", "", None])
def test_query_rejects_malformed_iso_code(code):
    with pytest.raises(ProductSearchQueryError):
        SearchQuery(phrase="mug", currency_iso_code=code, results_limit=1)


def test_found_product_maps_are_frozen_copies():
    combinations = {}
    product = FoundProduct(
        product_id=1,
        name="Mug",
        formatted_price_excluding_tax="10.00 UAH",
        price_including_tax=None,
        price_excluding_tax=None,
        tax_rate=None,
        quantity_in_stock=0,
        stock_location="",
        available_out_of_stock=False,
        combinations=combinations,
    )
    combinations[5] = "late write"

    assert dict(product.combinations) == {}
    assert dict(product.customization_fields) == {}
    with pytest.raises(TypeError):
        product.combinations[1] = "x"
