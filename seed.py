"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 3 regions (Ercan airport, Girne, Gazimagusa)
  - 6 sample locations, one of them without a region
  - 5 sample vehicles across three types
  - price rows for airport <-> Girne and airport -> Gazimagusa
  - 3 extras
"""

import asyncio
from decimal import Decimal

from sqlalchemy import text

from src.domain.enums import LocationType, PriceType, TransferType
from src.infrastructure.database import async_session_factory, engine
from src.infrastructure.models import (
    ExtraModel,
    LocationModel,
    PriceListModel,
    RegionModel,
    VehicleModel,
)

REGIONS = ["Ercan Havalimani", "Girne", "Gazimagusa"]

LOCATIONS = [
    # (name, type, address, lat, lng, region index or None)
    ("Ercan Airport (ECN)", LocationType.AIRPORT, "Ercan, Lefkosa", 35.1547, 33.4961, 0),
    ("Merit Park Hotel", LocationType.HOTEL, "Karaoglanoglu, Girne", 35.3386, 33.2458, 1),
    ("Acapulco Resort", LocationType.HOTEL, "Catalkoy, Girne", 35.3440, 33.3880, 1),
    ("Girne Harbour", LocationType.OTHER, "Girne Limani", 35.3420, 33.3190, 1),
    ("Salamis Bay Conti", LocationType.HOTEL, "Salamis Yolu, Gazimagusa", 35.1780, 33.9030, 2),
    ("Private Villa (unassigned)", LocationType.OTHER, "Esentepe", 35.3470, 33.5800, None),
]

VEHICLES = [
    {"name": "Mercedes Taksi", "type": "sedan", "capacity": 3, "luggage_capacity": 3},
    {"name": "Mercedes Vito", "type": "minivan", "capacity": 7, "luggage_capacity": 7},
    {"name": "Mercedes Vito (2)", "type": "minivan", "capacity": 7, "luggage_capacity": 7},
    {"name": "Mercedes Sprinter", "type": "minibus", "capacity": 13, "luggage_capacity": 13},
    {"name": "Retired Sedan", "type": "sedan", "capacity": 4, "luggage_capacity": 2, "is_active": False},
]

# (from region index, to region index, vehicle type, price, price type, transfer type)
PRICES = [
    (0, 1, "sedan", "45.00", PriceType.PER_VEHICLE, TransferType.PRIVATE),
    (0, 1, "minivan", "60.00", PriceType.PER_VEHICLE, TransferType.PRIVATE),
    (0, 1, "minibus", "12.00", PriceType.PER_PERSON, TransferType.SHARED),
    (1, 0, "sedan", "45.00", PriceType.PER_VEHICLE, TransferType.PRIVATE),
    (1, 0, "minivan", "60.00", PriceType.PER_VEHICLE, TransferType.PRIVATE),
    (0, 2, "minivan", "70.00", PriceType.PER_VEHICLE, TransferType.PRIVATE),
]

EXTRAS = [
    ("Child seat", "Suitable for ages 1-4", "5.00"),
    ("Meet & greet", "Driver waits in arrivals with a name board", "10.00"),
    ("Extra stop", "One additional stop on the way", "8.00"),
]


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM bolge"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        # ── Regions ───────────────────────────────────────────────────
        regions = [RegionModel(name=name) for name in REGIONS]
        session.add_all(regions)
        await session.flush()
        print(f"  Created {len(regions)} regions")

        # ── Locations ─────────────────────────────────────────────────
        for name, kind, address, lat, lng, region in LOCATIONS:
            session.add(
                LocationModel(
                    name=name,
                    type=kind,
                    address=address,
                    latitude=lat,
                    longitude=lng,
                    bolge_id=regions[region].id if region is not None else None,
                )
            )
        print(f"  Created {len(LOCATIONS)} locations")

        # ── Vehicles ──────────────────────────────────────────────────
        for v in VEHICLES:
            session.add(VehicleModel(**v))
        print(f"  Created {len(VEHICLES)} vehicles")

        # ── Price lists ───────────────────────────────────────────────
        for src, dst, vehicle_type, price, price_type, transfer_type in PRICES:
            session.add(
                PriceListModel(
                    from_bolge_id=regions[src].id,
                    to_bolge_id=regions[dst].id,
                    vehicle_type=vehicle_type,
                    price=Decimal(price),
                    currency="GBP",
                    price_type=price_type,
                    transfer_type=transfer_type,
                )
            )
        print(f"  Created {len(PRICES)} price list rows")

        # ── Extras ────────────────────────────────────────────────────
        for name, description, price in EXTRAS:
            session.add(ExtraModel(name=name, description=description, price=Decimal(price)))
        print(f"  Created {len(EXTRAS)} extras")

        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
