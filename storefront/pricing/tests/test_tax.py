from decimal import Decimal

import pytest

from storefront.pricing.tax import (
    calculate_tax_from_total,
    net_amount,
    split_vat_inclusive,
)


def test_standard_example():
    # net 943.40 -> 943, tax = 1000 - 943
    assert calculate_tax_from_total(1000, 0.06) == 57
    assert net_amount(1000, 0.06) == 943


def test_default_rate_comes_from_tables():
    out = split_vat_inclusive(1000)
    assert out.tax_rate == Decimal("0.06")
    assert out.tax_cents == 57


def test_zero_total():
    out = split_vat_inclusive(0, 0.21)
    assert (out.net_cents, out.tax_cents) == (0, 0)


def test_net_rounds_half_up():
    # 4 / 1.6 = 2.5 -> 3 (bankers rounding would give 2)
    out = split_vat_inclusive(4, "0.6")
    assert (out.net_cents, out.tax_cents) == (3, 1)


@pytest.mark.parametrize("rate", [0.06, 0.09, 0.19, 0.21, "0.055", Decimal("0.25")])
def test_net_plus_tax_is_total(rate):
    for total in range(0, 20_000, 37):
        assert net_amount(total, rate) + calculate_tax_from_total(total, rate) == total
        split = split_vat_inclusive(total, rate)
        assert split.net_cents + split.tax_cents == split.total_cents == total


def test_tax_is_never_negative():
    for total in range(0, 500):
        assert calculate_tax_from_total(total, 0.06) >= 0
