import pytest

from storefront.web.jinja_filters import format_number_eu, format_percent, format_price


@pytest.mark.parametrize(
    "cents, locale, expected",
    [
        (590, "en", "€5.90"),
        (123456, "en", "€1,234.56"),
        (123456, "en-GB", "€1,234.56"),
        (123456, "nl", "€1.234,56"),
        (123456, "de", "1.234,56 €"),
        (123456, "fr", "1 234,56 €"),
        (0, "en", "€0.00"),
        (590, "xx", "€5.90"),
    ],
)
def test_format_price(cents, locale, expected):
    assert format_price(cents, "EUR", locale) == expected


def test_format_price_unknown_currency():
    assert format_price(590, "USD") == "5.90 USD"


def test_format_number_eu():
    assert format_number_eu("1234567.891") == "1.234.567,89"
    assert format_number_eu(-5.9) == "-5,90"


def test_format_percent():
    assert format_percent("0.06") == "6%"
    assert format_percent("0.055") == "5.5%"
