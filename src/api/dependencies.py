"""FastAPI dependency injection helpers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.domain.availability import AvailabilityResolver
from src.infrastructure.database import async_session_factory
from src.infrastructure.price_cache import CachedPriceListRepository
from src.infrastructure.redis_client import get_redis
from src.infrastructure.repositories import (
    LocationRepository,
    PriceListRepository,
    VehicleRepository,
)


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_resolver(db: AsyncSession = Depends(get_db)) -> AvailabilityResolver:
    """Wire the resolver to this request's session (and the cache, if on)."""
    prices = PriceListRepository(db)
    if settings.price_cache_ttl_seconds > 0:
        prices = CachedPriceListRepository(
            prices, await get_redis(), settings.price_cache_ttl_seconds
        )
    return AvailabilityResolver(
        LocationRepository(db), VehicleRepository(db), prices
    )
