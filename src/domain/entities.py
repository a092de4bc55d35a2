"""
Domain entities and the availability error family.

Patterns used
-------------
- **Value Objects** (frozen dataclasses) for every row the resolver reads;
  repositories map ORM rows into these at the boundary so domain logic
  never touches SQLAlchemy.
- **Tagged errors**: ``ValidationError | NotFoundError | StoreError`` share
  the ``AvailabilityError`` base so callers can branch on kind, while the
  JSON body only ever carries ``str(error)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .enums import PriceType, TransferType


# ── Errors ────────────────────────────────────────────────────────────


class AvailabilityError(Exception):
    """Base class for every failure the resolver can report."""

    kind = "error"


class ValidationError(AvailabilityError):
    """Missing or malformed input; raised before any store access."""

    kind = "validation"


class NotFoundError(AvailabilityError):
    """A location id did not resolve, or resolved without a region."""

    kind = "not_found"


class StoreError(AvailabilityError):
    """The underlying data store failed a read."""

    kind = "store"


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    id: int
    region_id: Optional[int] = None
    is_active: bool = True


@dataclass(frozen=True)
class Vehicle:
    id: int
    type: str
    name: str
    capacity: int
    is_active: bool = True


@dataclass(frozen=True)
class PriceListEntry:
    id: int
    from_region_id: int
    to_region_id: int
    vehicle_type: str
    price: Decimal
    currency: str
    price_type: PriceType
    transfer_type: TransferType
    is_active: bool = True


@dataclass(frozen=True)
class VehicleTypeOption:
    """One bookable vehicle type for a trip, priced for its region pair."""

    type: str
    name: str
    capacity: int
    price: Decimal
    currency: str
    price_type: PriceType
    transfer_type: TransferType
    vehicle_id_example: int

    @classmethod
    def from_match(cls, vehicle: Vehicle, entry: PriceListEntry) -> VehicleTypeOption:
        return cls(
            type=vehicle.type,
            name=vehicle.name,
            capacity=vehicle.capacity,
            price=entry.price,
            currency=entry.currency,
            price_type=entry.price_type,
            transfer_type=entry.transfer_type,
            vehicle_id_example=vehicle.id,
        )


# ── Result ────────────────────────────────────────────────────────────


@dataclass
class AvailabilityResult:
    options: list[VehicleTypeOption] = field(default_factory=list)
    failure: Optional[AvailabilityError] = None

    @property
    def error(self) -> Optional[str]:
        return str(self.failure) if self.failure is not None else None

    @property
    def error_kind(self) -> Optional[str]:
        return self.failure.kind if self.failure is not None else None

    @property
    def is_failure(self) -> bool:
        """True when the caller should report a system problem (HTTP 500)."""
        return self.failure is not None and not self.options

    @classmethod
    def failed(cls, error: AvailabilityError) -> AvailabilityResult:
        return cls(options=[], failure=error)
