from decimal import ROUND_HALF_EVEN

import pytest

from catalog_search.config import SearchOptions


def test_defaults():
    options = SearchOptions()

    assert options.max_results_limit == 50
    assert options.label_separator == " - "
    assert options.rounding == "half_up"
    assert options.locale == "uk"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_results_limit": 0},
        {"max_results_limit": True},
        {"label_separator": ""},
        {"rounding": "banker"},
        {"locale": "xx"},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        SearchOptions(**kwargs)


def test_from_dict_ignores_unknown_and_null_keys():
    options = SearchOptions.from_dict({"max_results_limit": 5, "locale": None, "colour": "red"})

    assert options == SearchOptions(max_results_limit=5)
    assert SearchOptions.from_dict(None) == SearchOptions()


def test_from_env_layers_over_base(monkeypatch):
    monkeypatch.setenv("CATALOG_SEARCH_MAX_RESULTS_LIMIT", "7")
    monkeypatch.setenv("CATALOG_SEARCH_ROUNDING", "half_even")
    monkeypatch.delenv("CATALOG_SEARCH_LOCALE", raising=False)
    monkeypatch.delenv("CATALOG_SEARCH_LABEL_SEPARATOR", raising=False)

    options = SearchOptions.from_env(base=SearchOptions(locale="en"))

    assert options.max_results_limit == 7
    assert options.rounding_mode == ROUND_HALF_EVEN
    assert options.locale == "en"


def test_from_env_bad_int_falls_back(monkeypatch):
    monkeypatch.setenv("CATALOG_SEARCH_MAX_RESULTS_LIMIT", "many")

    assert SearchOptions.from_env().max_results_limit == 50


def test_merge_returns_new_instance():
    base = SearchOptions()
    merged = base.merge(label_separator=" / ", locale=None)

    assert merged.label_separator == " / "
    assert merged.locale == "uk"
    assert base.label_separator == " - "
