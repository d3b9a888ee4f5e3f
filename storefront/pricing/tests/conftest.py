from __future__ import annotations

from decimal import Decimal

import pytest
import yaml

from storefront.config import DEFAULT_TABLES_PATH
from storefront.pricing.models import CartLine, LineItem
from storefront.pricing.tables import PricingTables, load_tables


@pytest.fixture
def tables() -> PricingTables:
    # the shipped v1 tables (same file the app loads at startup)
    return load_tables(DEFAULT_TABLES_PATH)


@pytest.fixture
def raw_tables() -> dict:
    # fresh dict per test, safe to mutate
    return yaml.safe_load(DEFAULT_TABLES_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def sample_cart():
    return [
        CartLine(
            item=LineItem(product_name="Habanero Hot Sauce", quantity=2, capacity_ml=Decimal("100")),
            price_cents=895,
            description="Fruity, 100ml",
            image_url="https://cdn.example.com/habanero.png",
        ),
        CartLine(
            item=LineItem(product_name="Logo Hoodie", quantity=1, selected_size="XXL"),
            price_cents=3900,
        ),
    ]
