from __future__ import annotations

from typing import Iterable, List, Optional

from storefront.config import get_settings
from storefront.core.logging_config import logger
from storefront.domain.geo import normalize_country_code

from .models import (
    CartLine,
    CheckoutLineItem,
    CheckoutQuote,
    OrderItemAmount,
    OrderItemTax,
    OrderTotals,
)
from .shipping import quote_shipping
from .tables import PricingTables, get_tables
from .tax import split_vat_inclusive
from .weights import estimate_package

SHIPPING_LINE_NAME = "Shipping"


class EmptyCartError(ValueError):
    """Checkout without cart lines."""


def build_checkout_quote(
    cart_lines: Iterable[CartLine],
    country_code: Optional[str] = None,
    tables: Optional[PricingTables] = None,
) -> CheckoutQuote:
    """
    Price a cart for the payment session:
      - package weight from all lines (box included)
      - subtotal = sum(price * qty)
      - shipping for destination/weight/subtotal
      - one payment line per cart line, plus a Shipping line when shipping > 0
    """
    tables = tables or get_tables()
    settings = get_settings()

    lines = list(cart_lines)
    if not lines:
        raise EmptyCartError("Cart is empty")

    country = normalize_country_code(country_code or settings.default_country)

    package = estimate_package((cl.item for cl in lines), tables)
    subtotal = sum(cl.price_cents * int(cl.item.quantity) for cl in lines)
    shipping = quote_shipping(country, package.weight_kg, subtotal, tables)

    payment_lines: List[CheckoutLineItem] = [
        CheckoutLineItem(
            name=cl.item.product_name,
            unit_amount_cents=cl.price_cents,
            quantity=int(cl.item.quantity),
            description=cl.description or "",
            images=[cl.image_url] if cl.image_url else [],
        )
        for cl in lines
    ]
    if shipping.shipping_cents > 0:
        payment_lines.append(
            CheckoutLineItem(name=SHIPPING_LINE_NAME, unit_amount_cents=shipping.shipping_cents, quantity=1)
        )

    logger.info(
        "checkout_quoted",
        country=country,
        zone=shipping.zone,
        line_count=len(lines),
        weight_kg=str(package.weight_kg),
        subtotal_cents=subtotal,
        shipping_cents=shipping.shipping_cents,
        warnings=len(package.warnings),
    )

    return CheckoutQuote(
        currency=settings.currency,
        country=country,
        lines=payment_lines,
        package=package,
        shipping=shipping,
        subtotal_cents=subtotal,
        total_cents=subtotal + shipping.shipping_cents,
        allowed_countries=list(tables.allowed_countries),
    )


def finalize_order(
    subtotal_cents: int,
    shipping_cents: int,
    total_cents: int,
    items: Iterable[OrderItemAmount],
    tax_rate=None,
) -> OrderTotals:
    """
    Bookkeeping split for a paid order.
    Order tax comes from the (VAT-inclusive) subtotal; each item gets its own split.
    The Shipping line is not an order item.
    """
    order_split = split_vat_inclusive(subtotal_cents, tax_rate)

    item_taxes: List[OrderItemTax] = []
    for it in items:
        if it.name == SHIPPING_LINE_NAME:
            continue
        item_taxes.append(
            OrderItemTax(
                name=it.name,
                quantity=it.quantity,
                price_cents=it.amount_total_cents,
                tax_cents=split_vat_inclusive(it.amount_total_cents, order_split.tax_rate).tax_cents,
            )
        )

    return OrderTotals(
        subtotal_cents=int(subtotal_cents),
        shipping_cents=int(shipping_cents),
        tax_cents=order_split.tax_cents,
        total_cents=int(total_cents),
        tax_rate=order_split.tax_rate,
        items=item_taxes,
    )
