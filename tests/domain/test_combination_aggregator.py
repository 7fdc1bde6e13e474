from decimal import Decimal

from conftest import UAH

from catalog_search.domain.products import NO_ROWS, CombinationAggregator, CombinationRow


def _row(attribute_id, name, quantity=1, location="", reference=""):
    return CombinationRow(attribute_id, name, quantity, location, reference)


def test_rows_sharing_an_id_join_labels_in_row_order(store, pricing):
    store.add_product(1)
    store.set_price(1, 10, "15.00", "18.00")
    store.combinations[1] = [_row(10, "Red", 3), _row(10, "Large", 4, "B-2", "SKU-10")]

    result = CombinationAggregator(store, pricing).aggregate(1, UAH)

    assert list(result) == [10]
    combo = result[10]
    assert combo.attribute_label == "Red - Large"
    assert (combo.quantity_in_stock, combo.stock_location, combo.reference) == (4, "B-2", "SKU-10")
    assert combo.price_excluding_tax == Decimal("15.00")
    assert combo.formatted_price_excluding_tax == "15.00 UAH"


def test_reversed_rows_give_reversed_label(store, pricing):
    store.add_product(1)
    store.set_price(1, 10, "15.00", "18.00")
    store.combinations[1] = [_row(10, "Large"), _row(10, "Red")]

    result = CombinationAggregator(store, pricing).aggregate(1, UAH)

    assert result[10].attribute_label == "Large - Red"


def test_distinct_ids_are_priced_independently(store, pricing):
    store.add_product(1, excl="10.00", incl="12.00")
    store.set_price(1, 10, "15.00", "18.00")
    store.set_price(1, 11, "16.50", "19.80")
    store.combinations[1] = [_row(10, "Red"), _row(11, "Blue")]

    result = CombinationAggregator(store, pricing).aggregate(1, UAH)

    assert [c.combination_id for c in result.values()] == [10, 11]
    assert result[10].price_including_tax == Decimal("18.00")
    assert result[11].price_including_tax == Decimal("19.80")


def test_custom_separator(store, pricing):
    store.add_product(1)
    store.set_price(1, 10, "1", "1")
    store.combinations[1] = [_row(10, "Red"), _row(10, "L")]

    result = CombinationAggregator(store, pricing, label_separator=" / ").aggregate(1, UAH)

    assert result[10].attribute_label == "Red / L"


def test_no_rows_gives_empty_map_without_pricing(store, pricing):
    store.add_product(1)
    store.combinations[1] = NO_ROWS

    assert CombinationAggregator(store, pricing).aggregate(1, UAH) == {}
    assert store.price_calls == []
