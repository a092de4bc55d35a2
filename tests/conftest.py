"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL / Redis.  The production models are portable, so the
real ``Base.metadata`` is created directly; ``StaticPool`` keeps every
session on the same in-memory connection.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.domain.enums import LocationType, PriceType, TransferType
from src.infrastructure.database import Base
from src.infrastructure.models import (
    ExtraModel,
    LocationModel,
    PriceListModel,
    RegionModel,
    VehicleModel,
)


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


@dataclass
class Scenario:
    """Ids of the reference trip: P (region 1) -> D (region 2)."""

    pickup_id: int
    dropoff_id: int
    unassigned_id: int
    sedan_id: int
    van_id: int


async def seed_scenario(session: AsyncSession) -> Scenario:
    """Regions 1/2, sedan (4 seats) and van (8 seats), both priced 1 -> 2."""
    r1, r2 = RegionModel(name="Airport"), RegionModel(name="City")
    session.add_all([r1, r2])
    await session.flush()

    pickup = LocationModel(
        name="P Airport", type=LocationType.AIRPORT, address="Terminal 1", bolge_id=r1.id
    )
    dropoff = LocationModel(
        name="D Hotel", type=LocationType.HOTEL, address="Main St 1", bolge_id=r2.id
    )
    unassigned = LocationModel(name="Z Villa", address="Hillside", bolge_id=None)
    sedan = VehicleModel(name="Sedan", type="sedan", capacity=4)
    van = VehicleModel(name="Van", type="van", capacity=8)
    session.add_all([pickup, dropoff, unassigned, sedan, van])
    await session.flush()

    session.add_all(
        [
            PriceListModel(
                from_bolge_id=r1.id,
                to_bolge_id=r2.id,
                vehicle_type="sedan",
                price=Decimal("100.00"),
                currency="TRY",
                price_type=PriceType.PER_VEHICLE,
                transfer_type=TransferType.PRIVATE,
            ),
            PriceListModel(
                from_bolge_id=r1.id,
                to_bolge_id=r2.id,
                vehicle_type="van",
                price=Decimal("200.00"),
                currency="TRY",
                price_type=PriceType.PER_VEHICLE,
                transfer_type=TransferType.PRIVATE,
            ),
            ExtraModel(name="Child seat", price=Decimal("5.00")),
            ExtraModel(name="Retired extra", price=Decimal("1.00"), is_active=False),
        ]
    )
    await session.commit()
    return Scenario(
        pickup_id=pickup.id,
        dropoff_id=dropoff.id,
        unassigned_id=unassigned.id,
        sedan_id=sedan.id,
        van_id=van.id,
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionFactory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def scenario(db_session: AsyncSession) -> Scenario:
    return await seed_scenario(db_session)


@pytest_asyncio.fixture
async def client(scenario: Scenario) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the seeded SQLite database."""

    async def _test_db():
        async with TestSessionFactory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    from src.api.app import create_app
    from src.api.dependencies import get_db
    from src.api.middleware import limiter

    limiter.reset()
    app = create_app()
    app.dependency_overrides[get_db] = _test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
