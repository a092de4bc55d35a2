"""
Vehicle Availability & Price Resolver
=====================================

Given a pickup location, a dropoff location and a passenger count, decide
which vehicle types can serve the trip and at what price.

Algorithm
---------
1. Validate input (no store access on failure).
2. Resolve pickup and dropoff locations to their regions ("bolge").
3. Fetch active vehicles with ``capacity >= passenger_count``.
4. Fetch active price rows for ``(pickup_region -> dropoff_region)`` and the
   candidate vehicle types.  Pairs are directional: no reverse fallback.
5. Walk vehicles in query order; the first vehicle of each type that has a
   price row yields one ``VehicleTypeOption``.

"No options" is a valid answer, never an error.  Any store failure
short-circuits to an error result; nothing is retried.

Complexity: four sequential queries, then O(V x P) in-memory join where
V = candidate vehicles and P = matching price rows.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Optional, Protocol, Sequence, TypeVar

from .entities import (
    AvailabilityError,
    AvailabilityResult,
    Location,
    NotFoundError,
    PriceListEntry,
    StoreError,
    ValidationError,
    Vehicle,
    VehicleTypeOption,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocationStore(Protocol):
    async def get_by_id(self, location_id: int) -> Optional[Location]: ...


class VehicleStore(Protocol):
    async def get_active_with_capacity(self, min_capacity: int) -> list[Vehicle]: ...


class PriceListStore(Protocol):
    async def find_active(
        self, from_region_id: int, to_region_id: int, vehicle_types: Sequence[str]
    ) -> list[PriceListEntry]: ...


def _require_positive_int(name: str, value: object) -> int:
    if value is None:
        raise ValidationError(
            "Missing required parameters (pickup, dropoff, passenger_count)."
        )
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Invalid {name}: expected an integer.")
    if value < 1:
        raise ValidationError(f"Invalid {name}: must be a positive integer.")
    return value


async def _read(what: str, query: Awaitable[T]) -> T:
    """Await a store read, turning any driver failure into ``StoreError``."""
    try:
        return await query
    except AvailabilityError:
        raise
    except Exception as exc:
        raise StoreError(f"Could not fetch {what}: {exc}") from exc


def match_options(
    vehicles: Sequence[Vehicle], price_rows: Sequence[PriceListEntry]
) -> list[VehicleTypeOption]:
    """Join vehicles to price rows by type, one option per type.

    Vehicle order decides which row represents a type; the first price row
    for a type wins.
    """
    first_price: dict[str, PriceListEntry] = {}
    for entry in price_rows:
        first_price.setdefault(entry.vehicle_type, entry)

    options: list[VehicleTypeOption] = []
    seen: set[str] = set()
    for vehicle in vehicles:
        entry = first_price.get(vehicle.type)
        if entry is None or vehicle.type in seen:
            continue
        seen.add(vehicle.type)
        options.append(VehicleTypeOption.from_match(vehicle, entry))
    return options


class AvailabilityResolver:
    """Read-only resolver; one instance per request session."""

    def __init__(
        self,
        locations: LocationStore,
        vehicles: VehicleStore,
        prices: PriceListStore,
    ):
        self.locations = locations
        self.vehicles = vehicles
        self.prices = prices

    async def resolve(
        self,
        pickup_location_id: Optional[int],
        dropoff_location_id: Optional[int],
        passenger_count: Optional[int],
    ) -> AvailabilityResult:
        logger.info(
            "Resolving vehicle types pickup=%s dropoff=%s passengers=%s",
            pickup_location_id,
            dropoff_location_id,
            passenger_count,
        )
        try:
            options = await self._resolve(
                pickup_location_id, dropoff_location_id, passenger_count
            )
        except AvailabilityError as exc:
            logger.error("Vehicle type resolution failed (%s): %s", exc.kind, exc)
            return AvailabilityResult.failed(exc)
        except Exception as exc:
            logger.exception("Unexpected error while resolving vehicle types")
            return AvailabilityResult.failed(
                StoreError(
                    str(exc)
                    or "An unexpected error occurred while fetching vehicle options."
                )
            )
        logger.info("Created %d vehicle type options", len(options))
        return AvailabilityResult(options=options)

    async def _resolve(
        self,
        pickup_location_id: Optional[int],
        dropoff_location_id: Optional[int],
        passenger_count: Optional[int],
    ) -> list[VehicleTypeOption]:
        pickup_id = _require_positive_int("pickup_location_id", pickup_location_id)
        dropoff_id = _require_positive_int("dropoff_location_id", dropoff_location_id)
        passengers = _require_positive_int("passenger_count", passenger_count)

        pickup_region = await self._region_of(pickup_id, "pickup")
        dropoff_region = await self._region_of(dropoff_id, "dropoff")
        if pickup_region is None or dropoff_region is None:
            raise NotFoundError("Could not determine region IDs for locations.")
        logger.info(
            "Pickup region=%d dropoff region=%d", pickup_region, dropoff_region
        )

        vehicles = await _read(
            "potential vehicles", self.vehicles.get_active_with_capacity(passengers)
        )
        if not vehicles:
            logger.info("No active vehicles seat %d passengers", passengers)
            return []

        vehicle_types = list(dict.fromkeys(v.type for v in vehicles))
        price_rows = await _read(
            "price lists",
            self.prices.find_active(pickup_region, dropoff_region, vehicle_types),
        )
        logger.info(
            "Found %d candidate vehicles, %d price rows",
            len(vehicles),
            len(price_rows),
        )
        if not price_rows:
            return []

        return match_options(vehicles, price_rows)

    async def _region_of(self, location_id: int, role: str) -> Optional[int]:
        location = await _read(
            f"{role} location details", self.locations.get_by_id(location_id)
        )
        if location is None:
            raise NotFoundError(f"Could not fetch {role} location details.")
        return location.region_id
