from decimal import Decimal

import pytest

from catalog_search.infrastructure.formatting import LocalePriceFormatter


@pytest.mark.parametrize(
    "locale,amount,iso,expected",
    [
        ("en", "1234.5", "USD", "$1,234.50"),
        ("uk", "1234.5", "UAH", "1 234,50 ₴"),
        ("de", "1234567.891", "EUR", "1.234.567,89 €"),
        ("fr", "0.5", "EUR", "0,50 €"),
        ("pl", "99.999", "PLN", "100,00 zł"),
        ("en", "1499.5", "JPY", "¥1,500"),
    ],
)
def test_format_per_locale(locale, amount, iso, expected):
    assert LocalePriceFormatter(locale).format(Decimal(amount), iso) == expected


def test_unknown_currency_uses_iso_code_and_two_digits():
    assert LocalePriceFormatter("en").format(Decimal("5"), "chf") == "CHF5.00"


def test_negative_amounts_keep_sign():
    assert LocalePriceFormatter("uk").format(Decimal("-12.3"), "UAH") == "-12,30 ₴"


def test_currency_digits_override():
    formatter = LocalePriceFormatter("en", currency_digits={"usd": 3})

    assert formatter.digits_for("USD") == 3
    assert formatter.format(Decimal("1.2345"), "USD") == "$1.235"


def test_locale_tag_is_normalized_and_validated():
    assert LocalePriceFormatter("en_US").locale == "en"
    with pytest.raises(ValueError):
        LocalePriceFormatter("xx")
