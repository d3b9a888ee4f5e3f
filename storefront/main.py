# storefront/main.py
import time

from fastapi import FastAPI, Request

from storefront.config import settings
from storefront.core.logging_config import setup_logging, logger
from storefront.middleware.request_id import RequestIdMiddleware
from storefront.observability.metrics import router as metrics_router
from storefront.pricing.tables import get_tables
from storefront.routers import checkout, orders


# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title="Storefront Checkout Pricing", version="0.1.0")

setup_logging(settings.log_level)
logger.info("startup", service="storefront-api", env=settings.app_env)


@app.on_event("startup")
def _load_pricing_tables():
    # fail fast: kapotte tabellen = geen checkout
    get_tables()


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID", "unknown"
    )
    client_ip = request.client.host if request.client else "unknown"

    bound_logger = logger.bind(
        request_id=request_id,
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.add_middleware(RequestIdMiddleware)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(checkout.router)
app.include_router(orders.router)
if settings.metrics_enabled:
    app.include_router(metrics_router)  # /metrics
