# storefront/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter(tags=["observability"])

shipping_quote_counter = Counter(
    "storefront_shipping_quotes_total",
    "Aantal shipping quotes",
    ["zone", "free"],  # free: "true" | "false"
)

unknown_product_counter = Counter(
    "storefront_unknown_products_total",
    "Cart lines priced with the fallback weight",
)

latency_hist = Histogram(
    "storefront_api_latency_seconds",
    "API latency per route",
    ["route"],  # e.g. /api/checkout/quote
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
