import pytest

from catalog_search.domain.products import NO_ROWS, CustomizationAggregator, CustomizationFieldRow
from catalog_search.errors import MalformedCatalogDataError


def test_fields_are_read_in_active_language(store):
    store.customizations[1] = {
        0: [{1: CustomizationFieldRow(5, "Фото", True), 2: CustomizationFieldRow(5, "Photo", True)}],
        1: [
            {1: CustomizationFieldRow(6, "Напис", False), 2: CustomizationFieldRow(6, "Text", False)},
            {2: CustomizationFieldRow(7, "Colour", True), 1: CustomizationFieldRow(7, "Колір", True)},
        ],
    }

    fields = CustomizationAggregator(store).aggregate(1, language_id=2)

    assert list(fields) == [5, 6, 7]
    assert fields[5].field_type_id == 0
    assert fields[6].field_type_id == 1
    assert [f.label for f in fields.values()] == ["Photo", "Text", "Colour"]
    assert fields[7].required is True


def test_no_rows_gives_empty_map(store):
    store.customizations[1] = NO_ROWS

    assert CustomizationAggregator(store).aggregate(1, language_id=1) == {}


def test_missing_language_entry_is_malformed(store):
    store.customizations[1] = {1: [{2: CustomizationFieldRow(6, "Text", False)}]}

    with pytest.raises(MalformedCatalogDataError) as exc:
        CustomizationAggregator(store).aggregate(1, language_id=1)

    assert exc.value.product_id == 1
