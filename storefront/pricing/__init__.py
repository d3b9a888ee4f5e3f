from .checkout import build_checkout_quote, finalize_order
from .models import LineItem, ProductCategory, ShippingRate, TaxBreakdown
from .shipping import calculate_shipping_cost, get_rate_zone, quote_shipping
from .tables import PricingTables, PricingTablesError, get_tables, load_tables
from .tax import calculate_tax_from_total, net_amount, split_vat_inclusive
from .weights import calculate_package_weight, estimate_package, get_box_dimensions

__all__ = [
    "LineItem",
    "ProductCategory",
    "ShippingRate",
    "TaxBreakdown",
    "PricingTables",
    "PricingTablesError",
    "load_tables",
    "get_tables",
    "calculate_package_weight",
    "estimate_package",
    "get_box_dimensions",
    "calculate_shipping_cost",
    "get_rate_zone",
    "quote_shipping",
    "split_vat_inclusive",
    "net_amount",
    "calculate_tax_from_total",
    "build_checkout_quote",
    "finalize_order",
]
