"""
Read-through Redis cache for price-list lookups.

Wraps ``PriceListRepository`` with the same ``find_active`` signature, so
the resolver cannot tell the difference.  Entries are keyed by the
directional region pair plus the sorted vehicle types and expire after a
short TTL; admin edits (including ``is_active`` toggles) are visible once
the TTL lapses.

Redis is an optimisation only: a cache read or write that fails is logged
and the lookup falls through to the database.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Optional, Sequence

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.domain.entities import PriceListEntry
from src.domain.enums import PriceType, TransferType

logger = logging.getLogger(__name__)


def cache_key(from_region_id: int, to_region_id: int, vehicle_types: Sequence[str]) -> str:
    # JSON keeps a comma-bearing type distinct from a pair of types.
    types = json.dumps(sorted(set(vehicle_types)), separators=(",", ":"))
    return f"price_lists:{from_region_id}:{to_region_id}:{types}"


def _dump(entries: list[PriceListEntry]) -> str:
    return json.dumps(
        [
            {
                "id": e.id,
                "from_region_id": e.from_region_id,
                "to_region_id": e.to_region_id,
                "vehicle_type": e.vehicle_type,
                "price": str(e.price),
                "currency": e.currency,
                "price_type": e.price_type.value,
                "transfer_type": e.transfer_type.value,
            }
            for e in entries
        ]
    )


def _load(raw: str) -> list[PriceListEntry]:
    return [
        PriceListEntry(
            id=item["id"],
            from_region_id=item["from_region_id"],
            to_region_id=item["to_region_id"],
            vehicle_type=item["vehicle_type"],
            price=Decimal(item["price"]),
            currency=item["currency"],
            price_type=PriceType(item["price_type"]),
            transfer_type=TransferType(item["transfer_type"]),
        )
        for item in json.loads(raw)
    ]


class CachedPriceListRepository:
    def __init__(self, inner, client: aioredis.Redis, ttl_seconds: int = 30):
        self.inner = inner
        self.redis = client
        self.ttl = ttl_seconds

    async def find_active(
        self,
        from_region_id: int,
        to_region_id: int,
        vehicle_types: Sequence[str],
    ) -> list[PriceListEntry]:
        key = cache_key(from_region_id, to_region_id, vehicle_types)

        cached = await self._get(key)
        if cached is not None:
            return _load(cached)

        entries = await self.inner.find_active(
            from_region_id, to_region_id, vehicle_types
        )
        await self._set(key, _dump(entries))
        return entries

    async def _get(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except RedisError as exc:
            logger.warning("Price cache read failed for %s: %s", key, exc)
            return None

    async def _set(self, key: str, value: str) -> None:
        try:
            await self.redis.set(key, value, ex=self.ttl)
        except RedisError as exc:
            logger.warning("Price cache write failed for %s: %s", key, exc)
