from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

import yaml

from storefront.config import get_settings
from storefront.core.logging_config import logger

from .models import BoxDimensions, ProductCategory, ShippingRate

D = Decimal


class PricingTablesError(ValueError):
    """Raised when the pricing tables cannot be loaded or are inconsistent."""

    def __init__(self, source: str, problems: List[str]):
        self.source = source
        self.problems = list(problems)
        super().__init__(f"{source}: invalid pricing tables: {'; '.join(self.problems)}")


@dataclass(frozen=True)
class PricingTables:
    """
    Static checkout configuration (weights, zones, rates, tax).
    Immutable after load; shared by every request.
    """

    version: str
    box_weight_grams: int
    box_dimensions_mm: BoxDimensions
    min_weight_kg: D
    bottle_weights: Dict[D, int]
    tshirt_grams: int
    hoodie_grams: int
    hoodie_oversize_grams: int
    hoodie_oversize_sizes: FrozenSet[str]
    classification: Tuple[Tuple[ProductCategory, Tuple[str, ...]], ...]
    shipping_label: str
    zones: Tuple[Tuple[str, FrozenSet[str]], ...]
    default_zone: str
    rates: Dict[str, ShippingRate]
    allowed_countries: Tuple[str, ...]
    standard_tax_rate: D

    @property
    def smallest_bottle_grams(self) -> int:
        return self.bottle_weights[min(self.bottle_weights)]

    @staticmethod
    def from_dict(d: Dict[str, Any], *, source: str = "<dict>") -> "PricingTables":
        problems: List[str] = []

        packaging = dict(d.get("packaging") or {})
        weights = dict(d.get("weights") or {})
        shipping = dict(d.get("shipping") or {})
        tax = dict(d.get("tax") or {})

        box_weight = _non_negative_int(packaging.get("boxWeightGrams"), "packaging.boxWeightGrams", problems)
        dims_raw = dict(packaging.get("boxDimensionsMm") or {})
        dims = BoxDimensions(
            length=_non_negative_decimal(dims_raw.get("length"), "packaging.boxDimensionsMm.length", problems),
            width=_non_negative_decimal(dims_raw.get("width"), "packaging.boxDimensionsMm.width", problems),
            height=_non_negative_decimal(dims_raw.get("height"), "packaging.boxDimensionsMm.height", problems),
        )
        min_weight = _non_negative_decimal(packaging.get("minWeightKg", "0.01"), "packaging.minWeightKg", problems)

        bottle_weights: Dict[D, int] = {}
        for cap, grams in dict(weights.get("bottlesByCapacityMl") or {}).items():
            cap_d = _non_negative_decimal(cap, f"weights.bottlesByCapacityMl[{cap}]", problems)
            bottle_weights[cap_d] = _non_negative_int(grams, f"weights.bottlesByCapacityMl.{cap}", problems)
        if not bottle_weights:
            problems.append("weights.bottlesByCapacityMl must define at least one capacity")

        tshirt = _non_negative_int(weights.get("tshirtGrams"), "weights.tshirtGrams", problems)
        hoodie = _non_negative_int(weights.get("hoodieGrams"), "weights.hoodieGrams", problems)
        hoodie_xl = _non_negative_int(weights.get("hoodieOversizeGrams"), "weights.hoodieOversizeGrams", problems)
        oversize = frozenset(str(s).strip().upper() for s in (weights.get("hoodieOversizeSizes") or []))

        classification: List[Tuple[ProductCategory, Tuple[str, ...]]] = []
        for entry in d.get("classification") or []:
            try:
                category = ProductCategory(str(entry.get("category")))
            except ValueError:
                problems.append(f"classification: unknown category {entry.get('category')!r}")
                continue
            keywords = tuple(str(k).strip().lower() for k in (entry.get("keywords") or []) if str(k).strip())
            if not keywords:
                problems.append(f"classification.{category}: no keywords")
            classification.append((category, keywords))

        rates: Dict[str, ShippingRate] = {}
        for zone, raw in dict(shipping.get("rates") or {}).items():
            raw = dict(raw or {})
            threshold = raw.get("freeShippingThresholdCents")
            rates[str(zone)] = ShippingRate(
                name=str(raw.get("name") or zone),
                base_price_cents=_non_negative_int(raw.get("basePriceCents"), f"shipping.rates.{zone}.basePriceCents", problems),
                per_kg_cents=_non_negative_int(raw.get("perKgCents", 0), f"shipping.rates.{zone}.perKgCents", problems),
                free_shipping_threshold_cents=(
                    None
                    if threshold is None
                    else _non_negative_int(threshold, f"shipping.rates.{zone}.freeShippingThresholdCents", problems)
                ),
            )

        default_zone = str(shipping.get("defaultZone") or "DEFAULT")
        if default_zone not in rates:
            problems.append(f"shipping.rates: default zone {default_zone!r} missing")

        zones: List[Tuple[str, FrozenSet[str]]] = []
        seen_zones: set[str] = set()
        for entry in shipping.get("zones") or []:
            zone = str(entry.get("zone") or "").strip()
            if not zone:
                problems.append("shipping.zones: zone name is required")
                continue
            if zone in seen_zones:
                problems.append(f"shipping.zones: duplicate zone {zone!r}")
            seen_zones.add(zone)
            if zone not in rates:
                problems.append(f"shipping.zones: zone {zone!r} has no rate")
            countries = frozenset(str(c).strip().upper() for c in (entry.get("countries") or []))
            zones.append((zone, countries))

        tax_rate = _non_negative_decimal(tax.get("standardRate"), "tax.standardRate", problems)
        if not (D("0") < tax_rate < D("1")):
            problems.append("tax.standardRate must be between 0 and 1 (exclusive)")

        if problems:
            raise PricingTablesError(source, problems)

        return PricingTables(
            version=str(d.get("version") or "v1"),
            box_weight_grams=box_weight,
            box_dimensions_mm=dims,
            min_weight_kg=min_weight,
            bottle_weights=bottle_weights,
            tshirt_grams=tshirt,
            hoodie_grams=hoodie,
            hoodie_oversize_grams=hoodie_xl,
            hoodie_oversize_sizes=oversize,
            classification=tuple(classification),
            shipping_label=str(shipping.get("label") or "Shipping"),
            zones=tuple(zones),
            default_zone=default_zone,
            rates=rates,
            allowed_countries=tuple(str(c).strip().upper() for c in (shipping.get("allowedCountries") or [])),
            standard_tax_rate=tax_rate,
        )


def _non_negative_decimal(value: Any, path: str, problems: List[str]) -> D:
    if value is None or str(value).strip() == "":
        problems.append(f"{path} is required")
        return D("0")
    try:
        d = D(str(value).strip())
    except InvalidOperation:
        problems.append(f"{path}: not a number: {value!r}")
        return D("0")
    if not d.is_finite() or d < 0:
        problems.append(f"{path} must be >= 0")
        return D("0")
    return d


def _non_negative_int(value: Any, path: str, problems: List[str]) -> int:
    d = _non_negative_decimal(value, path, problems)
    if d != d.to_integral_value():
        problems.append(f"{path} must be a whole number")
    return int(d)


def load_tables(path: str | Path) -> PricingTables:
    """Load + validate a YAML table file. Raises PricingTablesError on any problem."""
    p = Path(path)
    if not p.exists():
        raise PricingTablesError(str(p), ["file not found"])

    with p.open("r", encoding="utf-8") as f:
        try:
            raw: Dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PricingTablesError(str(p), [f"invalid YAML: {e}"]) from e

    tables = PricingTables.from_dict(raw, source=str(p))
    logger.info(
        "pricing_tables_loaded",
        path=str(p),
        version=tables.version,
        zones=[z for z, _ in tables.zones] + [tables.default_zone],
    )
    return tables


@lru_cache(maxsize=1)
def get_tables(path: Optional[str] = None) -> PricingTables:
    """Process-wide tables, loaded once from settings.pricing_tables_path."""
    return load_tables(path or get_settings().pricing_tables_path)
