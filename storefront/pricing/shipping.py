from __future__ import annotations

from decimal import Decimal, ROUND_CEILING
from typing import Optional

from storefront.domain.geo import normalize_country_code

from .models import ShippingQuote, ShippingRate
from .tables import PricingTables, get_tables

D = Decimal


def get_rate_zone(country_code: str, tables: Optional[PricingTables] = None) -> str:
    """
    Country -> rate zone. Zones are checked in table order (national first),
    anything else lands in the default zone.
    """
    tables = tables or get_tables()
    code = normalize_country_code(country_code)

    for zone, countries in tables.zones:
        if code in countries:
            return zone

    return tables.default_zone


def get_rate(zone: str, tables: Optional[PricingTables] = None) -> ShippingRate:
    tables = tables or get_tables()
    return tables.rates.get(zone) or tables.rates[tables.default_zone]


def billable_kg(weight_kg) -> int:
    # begonnen kilo = hele kilo
    return int(D(str(weight_kg)).to_integral_value(rounding=ROUND_CEILING))


def _cost_for_rate(rate: ShippingRate, weight_kg, subtotal_cents: int) -> int:
    threshold = rate.free_shipping_threshold_cents
    if threshold is not None and subtotal_cents >= threshold:
        return 0
    return rate.base_price_cents + billable_kg(weight_kg) * rate.per_kg_cents


def calculate_shipping_cost(
    country_code: str,
    weight_kg,
    subtotal_cents: int = 0,
    tables: Optional[PricingTables] = None,
) -> int:
    """Shipping cost in cents for a destination, package weight (kg) and order subtotal."""
    tables = tables or get_tables()
    rate = get_rate(get_rate_zone(country_code, tables), tables)
    return _cost_for_rate(rate, weight_kg, int(subtotal_cents))


def quote_shipping(
    country_code: str,
    weight_kg,
    subtotal_cents: int = 0,
    tables: Optional[PricingTables] = None,
) -> ShippingQuote:
    tables = tables or get_tables()
    zone = get_rate_zone(country_code, tables)
    rate = get_rate(zone, tables)
    cost = _cost_for_rate(rate, weight_kg, int(subtotal_cents))

    return ShippingQuote(
        zone=zone,
        rate_name=rate.name,
        weight_kg=D(str(weight_kg)),
        subtotal_cents=int(subtotal_cents),
        shipping_cents=cost,
        free_shipping=cost == 0,
    )
