from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from typing import Any, Dict, List, Optional

D = Decimal


class ProductCategory(StrEnum):
    BOTTLE = "bottle"
    TSHIRT = "tshirt"
    HOODIE = "hoodie"
    UNKNOWN = "unknown"


# -----------------------------
# Input
# -----------------------------


@dataclass(frozen=True)
class LineItem:
    """
    One cart row as seen by the weight estimator.
    `category` is the explicit catalog tag; without it we fall back to the product name.
    """

    product_name: str
    quantity: int
    capacity_ml: Optional[D] = None
    selected_size: Optional[str] = None
    weight_grams: Optional[D] = None
    category: Optional[ProductCategory] = None


@dataclass(frozen=True)
class CartLine:
    item: LineItem
    price_cents: int
    description: str = ""
    image_url: Optional[str] = None


@dataclass(frozen=True)
class OrderItemAmount:
    name: str
    quantity: int
    amount_total_cents: int  # qty * unit, zoals de payment processor het teruggeeft


# -----------------------------
# Static configuration
# -----------------------------


@dataclass(frozen=True)
class ShippingRate:
    name: str
    base_price_cents: int
    per_kg_cents: int
    free_shipping_threshold_cents: Optional[int] = None


@dataclass(frozen=True)
class BoxDimensions:
    length: D
    width: D
    height: D


# -----------------------------
# Output
# -----------------------------


@dataclass(frozen=True)
class PackageEstimate:
    total_grams: int
    weight_kg: D
    warnings: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ShippingQuote:
    zone: str
    rate_name: str
    weight_kg: D
    subtotal_cents: int
    shipping_cents: int
    free_shipping: bool


@dataclass(frozen=True)
class TaxBreakdown:
    total_cents: int
    net_cents: int
    tax_cents: int
    tax_rate: D


@dataclass(frozen=True)
class CheckoutLineItem:
    name: str
    unit_amount_cents: int
    quantity: int
    description: str = ""
    images: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CheckoutQuote:
    currency: str
    country: str
    lines: List[CheckoutLineItem]
    package: PackageEstimate
    shipping: ShippingQuote
    subtotal_cents: int
    total_cents: int
    allowed_countries: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OrderItemTax:
    name: str
    quantity: int
    price_cents: int
    tax_cents: int


@dataclass(frozen=True)
class OrderTotals:
    subtotal_cents: int
    shipping_cents: int
    tax_cents: int
    total_cents: int
    tax_rate: D
    items: List[OrderItemTax] = field(default_factory=list)
