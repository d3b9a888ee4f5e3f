from decimal import Decimal

import pytest

from storefront.pricing.shipping import (
    billable_kg,
    calculate_shipping_cost,
    get_rate_zone,
    quote_shipping,
)
from storefront.pricing.tables import PricingTables


@pytest.mark.parametrize(
    "code, zone",
    [
        ("DEU", "DEU"),
        ("de", "DEU"),
        ("FRA", "EU1"),
        ("fr", "EU1"),
        ("BEL", "EU1"),
        (" nld ", "EU1"),
        ("POL", "EU1"),
        ("ESP", "DEFAULT"),
        ("USA", "DEFAULT"),
        ("XYZ", "DEFAULT"),
        ("", "DEFAULT"),
    ],
)
def test_rate_zone(tables, code, zone):
    assert get_rate_zone(code, tables) == zone


def test_germany_free_over_threshold(tables):
    assert calculate_shipping_cost("DEU", 2.3, 5500, tables) == 0


def test_germany_threshold_is_inclusive(tables):
    assert calculate_shipping_cost("DEU", 2.3, 5000, tables) == 0


def test_germany_below_threshold_is_base_price(tables):
    assert calculate_shipping_cost("DEU", 2.3, 100, tables) == 590


def test_eu_zone_ignores_weight(tables):
    assert calculate_shipping_cost("FRA", 3.1, 0, tables) == 1290
    assert calculate_shipping_cost("FRA", 12, 0, tables) == 1290


def test_unknown_country_uses_default_rate(tables):
    assert calculate_shipping_cost("XYZ", 1.0, 0, tables) == 2190


def test_default_zone_bills_started_kilos(tables):
    # 2.3 kg -> 3 kg
    assert calculate_shipping_cost("XYZ", Decimal("2.3"), 0, tables) == 1990 + 3 * 200
    # exact kilos are not rounded up further
    assert calculate_shipping_cost("XYZ", Decimal("2.00"), 0, tables) == 1990 + 2 * 200


def test_default_zone_has_no_free_shipping(tables):
    assert calculate_shipping_cost("USA", 0.38, 1_000_000, tables) == 2190


def test_subtotal_defaults_to_zero(tables):
    assert calculate_shipping_cost("DEU", 1.0, tables=tables) == 590


@pytest.mark.parametrize("kg, expected", [(0, 0), (0.01, 1), (1.0, 1), (1.01, 2), ("2.99", 3)])
def test_billable_kg(kg, expected):
    assert billable_kg(kg) == expected


def test_quote_shipping_carries_zone_and_rate(tables):
    q = quote_shipping("de", Decimal("1.66"), 5690, tables)

    assert q.zone == "DEU"
    assert q.rate_name == "Germany (National)"
    assert q.shipping_cents == 0
    assert q.free_shipping is True
    assert q.weight_kg == Decimal("1.66")


def test_quote_shipping_paid(tables):
    q = quote_shipping("BE", Decimal("0.38"), 895, tables)

    assert (q.zone, q.shipping_cents, q.free_shipping) == ("EU1", 1290, False)


def test_zero_threshold_means_always_free(raw_tables):
    raw_tables["shipping"]["rates"]["EU1"]["freeShippingThresholdCents"] = 0
    t = PricingTables.from_dict(raw_tables)

    assert calculate_shipping_cost("FRA", 1.0, 0, t) == 0
    assert quote_shipping("FRA", Decimal("1.00"), 0, t).free_shipping is True
