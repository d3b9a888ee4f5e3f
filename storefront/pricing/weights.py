from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from storefront.core.logging_config import logger

from .models import BoxDimensions, LineItem, PackageEstimate, ProductCategory
from .tables import PricingTables, get_tables

D = Decimal

GRAMS_PER_KG = D("1000")
KG_STEP = D("0.01")


def classify_product(product_name: str, tables: Optional[PricingTables] = None) -> ProductCategory:
    """
    Best-effort category from the display name (legacy catalog rows without a category tag).
    First matching keyword group wins; order comes from the tables.
    """
    tables = tables or get_tables()
    name = (product_name or "").lower()

    for category, keywords in tables.classification:
        if any(k in name for k in keywords):
            return category

    return ProductCategory.UNKNOWN


def resolve_category(item: LineItem, tables: Optional[PricingTables] = None) -> ProductCategory:
    if item.category is not None:
        return ProductCategory(item.category)
    return classify_product(item.product_name, tables)


def _bottle_grams(capacity_ml: Any, tables: PricingTables) -> int:
    if capacity_ml:
        grams = tables.bottle_weights.get(D(str(capacity_ml)))
        if grams is not None:
            return grams
    # geen of onbekende inhoud -> kleinste fles
    return tables.smallest_bottle_grams


def _hoodie_grams(selected_size: Optional[str], tables: PricingTables) -> int:
    size = (selected_size or "").strip().upper()
    if size in tables.hoodie_oversize_sizes:
        return tables.hoodie_oversize_grams
    return tables.hoodie_grams


def unit_weight_grams(
    item: LineItem,
    tables: Optional[PricingTables] = None,
    warnings: Optional[List[Dict[str, Any]]] = None,
) -> D:
    """
    Weight of one unit in grams.

    Order:
      1) category (explicit tag, else keyword match on the name)
      2) unknown -> smallest bottle, plus a warning

    The catalog weight_grams is carried on the item but never used here.
    """
    tables = tables or get_tables()

    category = resolve_category(item, tables)

    if category == ProductCategory.BOTTLE:
        return D(_bottle_grams(item.capacity_ml, tables))
    if category == ProductCategory.TSHIRT:
        return D(tables.tshirt_grams)
    if category == ProductCategory.HOODIE:
        return D(_hoodie_grams(item.selected_size, tables))

    fallback = tables.smallest_bottle_grams
    logger.warning(
        "unknown_product_type",
        product_name=item.product_name,
        fallback_grams=fallback,
    )
    if warnings is not None:
        warnings.append(
            {
                "code": "UNKNOWN_PRODUCT_TYPE",
                "message": f'Unknown product type for "{item.product_name}", using default weight',
                "meta": {"product_name": item.product_name, "fallback_grams": fallback},
            }
        )
    return D(fallback)


def estimate_package(items: Iterable[LineItem], tables: Optional[PricingTables] = None) -> PackageEstimate:
    tables = tables or get_tables()
    warnings: List[Dict[str, Any]] = []

    total = D(tables.box_weight_grams)
    for item in items:
        total += unit_weight_grams(item, tables, warnings) * int(item.quantity)

    grams = int(total.quantize(D("1"), rounding=ROUND_HALF_UP))
    kg = (D(grams) / GRAMS_PER_KG).quantize(KG_STEP, rounding=ROUND_HALF_UP)

    return PackageEstimate(
        total_grams=grams,
        weight_kg=max(tables.min_weight_kg, kg),
        warnings=warnings,
    )


def calculate_package_weight(items: Iterable[LineItem], tables: Optional[PricingTables] = None) -> D:
    """Total package weight in kg (box included), never below the carrier minimum."""
    return estimate_package(items, tables).weight_kg


def get_box_dimensions(tables: Optional[PricingTables] = None) -> BoxDimensions:
    # carrier API rekent in cm
    mm = (tables or get_tables()).box_dimensions_mm
    return BoxDimensions(length=mm.length / 10, width=mm.width / 10, height=mm.height / 10)
