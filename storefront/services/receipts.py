from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from storefront.config import get_settings
from storefront.pricing.models import OrderTotals
from storefront.templates import render_template


@dataclass(frozen=True)
class OrderReceipt:
    id: str
    customer_email: str
    shipping_name: str
    street: str
    city: str
    postal_code: str
    country: str


def _context(order: OrderReceipt, totals: OrderTotals, currency: str | None, locale: str | None) -> dict:
    s = get_settings()
    return {
        "order": order,
        "totals": totals,
        "currency": currency or s.currency,
        "locale": locale or s.default_locale,
        "shop_name": s.shop_name,
    }


def render_order_confirmation(
    order: OrderReceipt, totals: OrderTotals, *, currency: str | None = None, locale: str | None = None
) -> Tuple[str, str]:
    """Returns (subject, html) for the purchaser."""
    subject = f"Order Confirmation - {get_settings().shop_name} (#{order.id})"
    html = render_template("emails/order_confirmation.html", _context(order, totals, currency, locale))
    return subject, html


def render_packing_slip(
    order: OrderReceipt, totals: OrderTotals, *, currency: str | None = None, locale: str | None = None
) -> Tuple[str, str]:
    """Returns (subject, html) for the seller."""
    subject = f"[Packing Slip] Order #{order.id} - {order.shipping_name}"
    html = render_template("emails/packing_slip.html", _context(order, totals, currency, locale))
    return subject, html
