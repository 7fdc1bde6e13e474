from decimal import Decimal

import pytest

from catalog_search.domain.products import NO_ROWS, CombinationRow, CustomizationFieldRow, ProductRecord
from catalog_search.errors import MalformedCatalogDataError


def test_product_record_from_mapping():
    record = ProductRecord.from_mapping(
        7, {"name": {"1": "Чашка", 2: "Mug"}, "tax_rate": "20.0", "location": None, "out_of_stock": "1"}
    )

    assert record.name_in(1) == "Чашка"
    assert record.name_in(2) == "Mug"
    assert record.tax_rate == Decimal("20.0")
    assert record.location == ""
    assert record.out_of_stock == 1


def test_product_record_defaults():
    record = ProductRecord.from_mapping(7, {"name": {1: "Mug"}})

    assert record.tax_rate == Decimal("0")
    assert record.out_of_stock == 2


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"name": "Mug"},
        {"name": {"en": "Mug"}},
        {"name": {1: "Mug"}, "tax_rate": "twenty"},
        {"name": {1: "Mug"}, "out_of_stock": "maybe"},
    ],
)
def test_product_record_malformed(data):
    with pytest.raises(MalformedCatalogDataError):
        ProductRecord.from_mapping(7, data)


def test_missing_translation_is_malformed():
    record = ProductRecord.from_mapping(7, {"name": {1: "Mug"}})

    with pytest.raises(MalformedCatalogDataError):
        record.name_in(3)


def test_combination_row_from_mapping():
    row = CombinationRow.from_mapping(
        1, {"id_product_attribute": "10", "attribute_name": "Red", "quantity": 3, "reference": "R-1"}
    )

    assert row == CombinationRow(10, "Red", 3, "", "R-1")


def test_combination_row_requires_keys():
    with pytest.raises(MalformedCatalogDataError):
        CombinationRow.from_mapping(1, {"attribute_name": "Red", "quantity": 3})


def test_customization_row_parses_required_flag():
    row = CustomizationFieldRow.from_mapping(1, {"id_customization_field": 4, "name": "Text", "required": "0"})

    assert row.required is False


def test_no_rows_is_not_an_empty_sequence():
    assert NO_ROWS is not None
    assert NO_ROWS != []
    assert repr(NO_ROWS) == "NO_ROWS"
