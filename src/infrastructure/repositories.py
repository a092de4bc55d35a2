"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  The three stores the availability resolver
reads map their rows into frozen domain dataclasses; the booking-flow
repositories hand ORM rows straight to the response schemas.
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .models import (
    ExtraModel,
    LocationModel,
    PriceListModel,
    ReservationModel,
    VehicleModel,
)
from src.domain.entities import Location, PriceListEntry, Vehicle
from src.domain.enums import PriceType, TransferType


class LocationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, location_id: int) -> Optional[Location]:
        """Single-row lookup projecting the location's region."""
        result = await self.session.execute(
            select(LocationModel.id, LocationModel.bolge_id).where(
                LocationModel.id == location_id
            )
        )
        row = result.one_or_none()
        if row is None:
            return None
        return Location(id=row.id, region_id=row.bolge_id)

    async def exists(self, location_id: int) -> bool:
        return await self.session.get(LocationModel, location_id) is not None

    async def list_active(self, limit: int) -> list[LocationModel]:
        result = await self.session.execute(
            select(LocationModel)
            .where(LocationModel.is_active.is_(True))
            .order_by(LocationModel.name)
            .limit(limit)
        )
        return list(result.scalars().all())


class VehicleRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active_with_capacity(self, min_capacity: int) -> list[Vehicle]:
        """Active vehicles seating at least *min_capacity*, lowest id first."""
        result = await self.session.execute(
            select(
                VehicleModel.id,
                VehicleModel.name,
                VehicleModel.type,
                VehicleModel.capacity,
            )
            .where(
                VehicleModel.is_active.is_(True),
                VehicleModel.capacity >= min_capacity,
            )
            .order_by(VehicleModel.id)
        )
        return [
            Vehicle(id=r.id, name=r.name, type=r.type, capacity=r.capacity)
            for r in result.all()
        ]

    async def get_by_id(self, vehicle_id: int) -> Optional[VehicleModel]:
        return await self.session.get(VehicleModel, vehicle_id)


class PriceListRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_active(
        self,
        from_region_id: int,
        to_region_id: int,
        vehicle_types: Sequence[str],
    ) -> list[PriceListEntry]:
        """Active fares for the directional pair, restricted to *vehicle_types*."""
        if not vehicle_types:
            return []
        result = await self.session.execute(
            select(PriceListModel)
            .where(
                PriceListModel.from_bolge_id == from_region_id,
                PriceListModel.to_bolge_id == to_region_id,
                PriceListModel.vehicle_type.in_(list(vehicle_types)),
                PriceListModel.is_active.is_(True),
            )
            .order_by(PriceListModel.id)
        )
        return [
            PriceListEntry(
                id=m.id,
                from_region_id=m.from_bolge_id,
                to_region_id=m.to_bolge_id,
                vehicle_type=m.vehicle_type,
                price=m.price,
                currency=m.currency,
                price_type=PriceType(m.price_type),
                transfer_type=TransferType(m.transfer_type),
                is_active=m.is_active,
            )
            for m in result.scalars().all()
        ]


class ExtraRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active(self) -> list[ExtraModel]:
        result = await self.session.execute(
            select(ExtraModel)
            .where(ExtraModel.is_active.is_(True))
            .order_by(ExtraModel.id)
        )
        return list(result.scalars().all())


class ReservationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, reservation: ReservationModel) -> ReservationModel:
        self.session.add(reservation)
        await self.session.flush()
        return reservation

    async def get_by_code(self, code: str) -> Optional[ReservationModel]:
        """Load a reservation with its locations and vehicle eagerly."""
        result = await self.session.execute(
            select(ReservationModel)
            .where(ReservationModel.code == code)
            .options(
                selectinload(ReservationModel.pickup_location),
                selectinload(ReservationModel.dropoff_location),
                selectinload(ReservationModel.vehicle),
            )
        )
        return result.scalar_one_or_none()

    async def code_exists(self, code: str) -> bool:
        result = await self.session.execute(
            select(ReservationModel.id).where(ReservationModel.code == code)
        )
        return result.first() is not None
