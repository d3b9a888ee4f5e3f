# storefront/schemas/checkout.py
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, constr

from storefront.pricing.models import (
    CartLine,
    CheckoutQuote,
    LineItem,
    OrderItemAmount,
    ProductCategory,
)


# -----------------------------
# Input
# -----------------------------


class CartLineV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_name: constr(strip_whitespace=True, min_length=1)  # type: ignore
    quantity: PositiveInt
    price_cents: NonNegativeInt
    capacity_ml: Optional[Decimal] = Field(None, gt=0)
    selected_size: Optional[str] = None
    weight_grams: Optional[Decimal] = Field(None, gt=0)
    category: Optional[ProductCategory] = None
    description: str = ""
    image_url: Optional[str] = None

    def to_cart_line(self) -> CartLine:
        return CartLine(
            item=LineItem(
                product_name=self.product_name,
                quantity=self.quantity,
                capacity_ml=self.capacity_ml,
                selected_size=self.selected_size,
                weight_grams=self.weight_grams,
                category=self.category,
            ),
            price_cents=self.price_cents,
            description=self.description,
            image_url=self.image_url,
        )


class CheckoutQuoteInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    items: List[CartLineV1] = Field(min_length=1)
    country: Optional[str] = None  # leeg -> settings.default_country


class ShippingQuoteInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    country: constr(strip_whitespace=True, min_length=1)  # type: ignore
    weight_kg: Decimal = Field(ge=0)
    subtotal_cents: NonNegativeInt = 0


class TaxInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_cents: NonNegativeInt
    tax_rate: Optional[Decimal] = Field(None, gt=0, lt=1)


class OrderItemV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: constr(strip_whitespace=True, min_length=1)  # type: ignore
    quantity: PositiveInt
    amount_total_cents: NonNegativeInt

    def to_amount(self) -> OrderItemAmount:
        return OrderItemAmount(name=self.name, quantity=self.quantity, amount_total_cents=self.amount_total_cents)


class FinalizeOrderInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    subtotal_cents: NonNegativeInt
    shipping_cents: NonNegativeInt = 0
    total_cents: NonNegativeInt
    items: List[OrderItemV1] = Field(default_factory=list)
    tax_rate: Optional[Decimal] = Field(None, gt=0, lt=1)


# -----------------------------
# Output
# -----------------------------


class ShippingQuoteV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone: str
    rate_name: str
    weight_kg: float
    subtotal_cents: int
    shipping_cents: int
    free_shipping: bool


class TaxBreakdownV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_cents: int
    net_cents: int
    tax_cents: int
    tax_rate: float


class CheckoutLineV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    unit_amount_cents: int
    quantity: int
    description: str = ""
    images: List[str] = Field(default_factory=list)


class CheckoutQuoteV1(BaseModel):
    version: str = "v1"
    currency: str
    country: str
    lines: List[CheckoutLineV1]
    weight_kg: float
    total_grams: int
    shipping: ShippingQuoteV1
    subtotal_cents: int
    total_cents: int
    allowed_countries: List[str]
    warnings: List[Dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_quote(cls, q: CheckoutQuote) -> "CheckoutQuoteV1":
        return cls(
            currency=q.currency,
            country=q.country,
            lines=[CheckoutLineV1.model_validate(line) for line in q.lines],
            weight_kg=float(q.package.weight_kg),
            total_grams=q.package.total_grams,
            shipping=ShippingQuoteV1.model_validate(q.shipping),
            subtotal_cents=q.subtotal_cents,
            total_cents=q.total_cents,
            allowed_countries=q.allowed_countries,
            warnings=q.package.warnings,
        )


class OrderItemTaxV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: int
    price_cents: int
    tax_cents: int


class OrderTotalsV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subtotal_cents: int
    shipping_cents: int
    tax_cents: int
    total_cents: int
    tax_rate: float
    items: List[OrderItemTaxV1] = Field(default_factory=list)


class ShippingRateV1(BaseModel):
    zone: str
    name: str
    base_price_cents: int
    per_kg_cents: int
    free_shipping_threshold_cents: Optional[int] = None
    countries: List[str] = Field(default_factory=list)


class ShippingZonesV1(BaseModel):
    label: str
    default_zone: str
    zones: List[ShippingRateV1]
    allowed_countries: List[str]
