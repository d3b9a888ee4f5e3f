from __future__ import annotations

from fastapi import APIRouter

from storefront.core.logging_config import logger
from storefront.pricing.checkout import finalize_order
from storefront.pricing.tax import split_vat_inclusive
from storefront.schemas.checkout import FinalizeOrderInputV1, OrderTotalsV1, TaxBreakdownV1, TaxInputV1

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("/tax", response_model=TaxBreakdownV1)
def order_tax(payload: TaxInputV1) -> TaxBreakdownV1:
    return TaxBreakdownV1.model_validate(split_vat_inclusive(payload.total_cents, payload.tax_rate))


@router.post("/finalize", response_model=OrderTotalsV1)
def order_finalize(payload: FinalizeOrderInputV1) -> OrderTotalsV1:
    """Bookkeeping amounts for a paid order (called from the payment webhook handler)."""
    totals = finalize_order(
        payload.subtotal_cents,
        payload.shipping_cents,
        payload.total_cents,
        [it.to_amount() for it in payload.items],
        tax_rate=payload.tax_rate,
    )
    logger.info(
        "order_finalized",
        subtotal_cents=totals.subtotal_cents,
        tax_cents=totals.tax_cents,
        total_cents=totals.total_cents,
        item_count=len(totals.items),
    )
    return OrderTotalsV1.model_validate(totals)
