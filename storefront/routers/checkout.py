from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException, Request

from storefront.core.logging_config import logger
from storefront.observability.metrics import latency_hist, shipping_quote_counter, unknown_product_counter
from storefront.pricing.checkout import EmptyCartError, build_checkout_quote
from storefront.pricing.models import ShippingQuote
from storefront.pricing.shipping import quote_shipping
from storefront.pricing.tables import PricingTables, PricingTablesError, get_tables
from storefront.schemas.checkout import (
    CheckoutQuoteInputV1,
    CheckoutQuoteV1,
    ShippingQuoteInputV1,
    ShippingQuoteV1,
    ShippingRateV1,
    ShippingZonesV1,
)

router = APIRouter(prefix="/api", tags=["checkout"])


def _tables() -> PricingTables:
    try:
        return get_tables()
    except PricingTablesError as e:
        logger.error("pricing_tables_unavailable", error=str(e))
        raise HTTPException(status_code=500, detail="Pricing configuration unavailable")


def _count_shipping(q: ShippingQuote) -> None:
    shipping_quote_counter.labels(zone=q.zone, free=str(q.free_shipping).lower()).inc()


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID", "unknown")


# ----------------------------
# 1) Checkout quote (cart -> payment lines)
# ----------------------------
@router.post("/checkout/quote", response_model=CheckoutQuoteV1)
def checkout_quote(payload: CheckoutQuoteInputV1, request: Request) -> CheckoutQuoteV1:
    t0 = time.time()
    tables = _tables()

    try:
        quote = build_checkout_quote(
            [line.to_cart_line() for line in payload.items],
            country_code=payload.country,
            tables=tables,
        )
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))

    _count_shipping(quote.shipping)
    if quote.package.warnings:
        unknown_product_counter.inc(len(quote.package.warnings))

    duration = time.time() - t0
    latency_hist.labels(route="/api/checkout/quote").observe(duration)
    logger.bind(
        request_id=_request_id(request),
        zone=quote.shipping.zone,
        line_count=len(payload.items),
        duration_ms=round(duration * 1000, 2),
        result="warning" if quote.package.warnings else "ok",
    ).info("checkout_quote")

    return CheckoutQuoteV1.from_quote(quote)


# ----------------------------
# 2) Shipping only
# ----------------------------
@router.post("/shipping/quote", response_model=ShippingQuoteV1)
def shipping_quote(payload: ShippingQuoteInputV1) -> ShippingQuoteV1:
    t0 = time.time()
    q = quote_shipping(payload.country, payload.weight_kg, payload.subtotal_cents, _tables())
    _count_shipping(q)
    latency_hist.labels(route="/api/shipping/quote").observe(time.time() - t0)
    return ShippingQuoteV1.model_validate(q)


@router.get("/shipping/zones", response_model=ShippingZonesV1)
def shipping_zones() -> ShippingZonesV1:
    tables = _tables()
    countries_by_zone = {zone: sorted(countries) for zone, countries in tables.zones}

    zones = [
        ShippingRateV1(
            zone=zone,
            name=rate.name,
            base_price_cents=rate.base_price_cents,
            per_kg_cents=rate.per_kg_cents,
            free_shipping_threshold_cents=rate.free_shipping_threshold_cents,
            countries=countries_by_zone.get(zone, []),
        )
        for zone, rate in tables.rates.items()
    ]
    return ShippingZonesV1(
        label=tables.shipping_label,
        default_zone=tables.default_zone,
        zones=zones,
        allowed_countries=list(tables.allowed_countries),
    )
