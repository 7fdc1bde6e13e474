import pytest

from catalog_search.errors import (
    CurrencyNotFoundError,
    ErrorCode,
    MalformedCatalogDataError,
    StoreIOErrorStrategy,
    StoreUnavailableError,
    convert_error,
    translate_errors,
)


def test_io_errors_become_store_unavailable():
    @translate_errors("catalog lookup")
    def lookup():
        raise TimeoutError("slow")

    with pytest.raises(StoreUnavailableError) as exc:
        lookup()

    assert exc.value.operation == "catalog lookup"
    assert isinstance(exc.value.__cause__, TimeoutError)
    assert exc.value.to_log_extra()["error_code"] == ErrorCode.STORE


def test_domain_errors_pass_through_untouched():
    error = CurrencyNotFoundError("ZZZ")

    @translate_errors("search")
    def search():
        raise error

    with pytest.raises(CurrencyNotFoundError) as exc:
        search()

    assert exc.value is error


def test_unknown_errors_are_reraised():
    @translate_errors("search")
    def search():
        raise ValueError("bug")

    with pytest.raises(ValueError):
        search()


def test_custom_strategy_list():
    class KeyErrorStrategy:
        def handle(self, error, operation):
            if isinstance(error, KeyError):
                return MalformedCatalogDataError(0, "missing key")
            return None

    @translate_errors("rows", strategies=[KeyErrorStrategy()])
    def rows():
        raise KeyError("id")

    with pytest.raises(MalformedCatalogDataError):
        rows()


def test_convert_error_returns_none_when_unrecognised():
    assert convert_error(RuntimeError("x"), [StoreIOErrorStrategy()], "op") is None


def test_error_messages_and_log_extra():
    error = MalformedCatalogDataError(3, "bad row", details="{'x': 1}")

    assert str(error) == "Malformed catalog data for product 3: bad row ({'x': 1})"
    assert error.to_log_extra() == {
        "error_code": ErrorCode.CATALOG,
        "details": "{'x': 1}",
        "product_id": 3,
    }
