from decimal import Decimal

import pytest

from storefront.pricing.models import ProductCategory
from storefront.pricing.tables import PricingTables, PricingTablesError, load_tables


def test_shipped_tables_load(tables):
    assert tables.version == "v1"
    assert tables.default_zone == "DEFAULT"
    assert set(tables.rates) == {"DEU", "EU1", "DEFAULT"}
    assert tables.rates["DEU"].free_shipping_threshold_cents == 5000
    assert tables.rates["EU1"].free_shipping_threshold_cents is None
    assert tables.bottle_weights == {Decimal("100"): 280, Decimal("200"): 450}
    assert tables.smallest_bottle_grams == 280
    assert tables.standard_tax_rate == Decimal("0.06")
    assert tables.shipping_label == "DHL Shipping"
    assert [c for c, _ in tables.classification] == [
        ProductCategory.HOODIE,
        ProductCategory.TSHIRT,
        ProductCategory.BOTTLE,
    ]


def test_zone_order_is_kept(tables):
    assert [z for z, _ in tables.zones] == ["DEU", "EU1"]


def test_missing_default_zone(raw_tables):
    del raw_tables["shipping"]["rates"]["DEFAULT"]

    with pytest.raises(PricingTablesError) as exc:
        PricingTables.from_dict(raw_tables, source="test")

    assert any("default zone" in p for p in exc.value.problems)


def test_zone_without_rate(raw_tables):
    raw_tables["shipping"]["zones"].append({"zone": "EU2", "countries": ["ESP"]})

    with pytest.raises(PricingTablesError) as exc:
        PricingTables.from_dict(raw_tables)

    assert any("EU2" in p for p in exc.value.problems)


def test_negative_price_rejected(raw_tables):
    raw_tables["shipping"]["rates"]["EU1"]["basePriceCents"] = -1

    with pytest.raises(PricingTablesError):
        PricingTables.from_dict(raw_tables)


def test_fractional_cents_rejected(raw_tables):
    raw_tables["shipping"]["rates"]["EU1"]["basePriceCents"] = "12.5"

    with pytest.raises(PricingTablesError):
        PricingTables.from_dict(raw_tables)


@pytest.mark.parametrize("rate", ["0", "1", "1.5", "abc"])
def test_tax_rate_range(raw_tables, rate):
    raw_tables["tax"]["standardRate"] = rate

    with pytest.raises(PricingTablesError):
        PricingTables.from_dict(raw_tables)


def test_bottles_required(raw_tables):
    raw_tables["weights"]["bottlesByCapacityMl"] = {}

    with pytest.raises(PricingTablesError):
        PricingTables.from_dict(raw_tables)


def test_unknown_category_rejected(raw_tables):
    raw_tables["classification"].append({"category": "mug", "keywords": ["mug"]})

    with pytest.raises(PricingTablesError):
        PricingTables.from_dict(raw_tables)


def test_all_problems_reported_at_once(raw_tables):
    del raw_tables["shipping"]["rates"]["DEFAULT"]
    raw_tables["weights"]["tshirtGrams"] = -5

    with pytest.raises(PricingTablesError) as exc:
        PricingTables.from_dict(raw_tables)

    assert len(exc.value.problems) >= 2


def test_error_is_value_error():
    assert issubclass(PricingTablesError, ValueError)


def test_load_missing_file(tmp_path):
    with pytest.raises(PricingTablesError):
        load_tables(tmp_path / "nope.yaml")


def test_load_invalid_yaml(tmp_path):
    p = tmp_path / "broken.yaml"
    p.write_text("shipping: [unclosed", encoding="utf-8")

    with pytest.raises(PricingTablesError):
        load_tables(p)
