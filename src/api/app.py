"""
FastAPI application factory.

* Registers routes for availability, catalogue, reservations and admin.
* Disposes the DB engine (and the Redis pool, when the price cache is on)
  via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, catalog, reservations, vehicles
from src.config import settings
from src.infrastructure import redis_client
from src.infrastructure.database import engine

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release pooled connections on shutdown."""
    logger.info(
        "Transfer booking API starting (price cache ttl=%ds)",
        settings.price_cache_ttl_seconds,
    )
    yield
    if settings.price_cache_ttl_seconds > 0:
        await redis_client.close_pool()
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Transfer Booking API",
        description=(
            "Public reservation flow for airport and hotel transfers: "
            "region-based fare lookup, vehicle availability by passenger "
            "count, and reservation creation / lookup."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(vehicles.router, prefix="/api/v1")
    app.include_router(catalog.router, prefix="/api/v1")
    app.include_router(reservations.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
