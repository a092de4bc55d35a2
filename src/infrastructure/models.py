"""
SQLAlchemy ORM models  (maps to PostgreSQL).

Tables
------
* ``bolge``         -- regions; the granularity of fare lookups
* ``locations``     -- pickup / dropoff points, each in at most one region
* ``vehicles``      -- fleet rows; ``type`` is the free-text join key
* ``price_lists``   -- directional (from_bolge -> to_bolge) fares per vehicle type
* ``extras``        -- bookable add-ons (child seat, meet & greet, ...)
* ``reservations``  -- customer bookings

Indexes
-------
* **B-Tree** on ``(is_active, capacity)`` for the vehicle candidate query.
* **B-Tree** on ``(from_bolge_id, to_bolge_id, vehicle_type)`` for the
  price-list lookup.
* Unique ``reservations.code`` for customer-facing lookups.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from src.domain.enums import (
    LocationType,
    PaymentStatus,
    PriceType,
    ReservationStatus,
    TransferType,
)


def _values(enum_cls):
    # Persist the lowercase values the database enum types use.
    return [member.value for member in enum_cls]


class RegionModel(Base):
    __tablename__ = "bolge"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class LocationModel(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    type = Column(
        Enum(LocationType, name="location_type", values_callable=_values),
        default=LocationType.OTHER,
        nullable=False,
    )
    address = Column(String(255), nullable=False, default="")
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    bolge_id = Column(Integer, ForeignKey("bolge.id"), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (Index("idx_locations_bolge", "bolge_id"),)


class VehicleModel(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    type = Column(String(50), nullable=False)
    capacity = Column(Integer, nullable=False)
    luggage_capacity = Column(Integer, default=0, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("idx_vehicles_active_capacity", "is_active", "capacity"),
    )


class PriceListModel(Base):
    __tablename__ = "price_lists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_bolge_id = Column(Integer, ForeignKey("bolge.id"), nullable=True)
    to_bolge_id = Column(Integer, ForeignKey("bolge.id"), nullable=True)
    vehicle_type = Column(String(50), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default="TRY", nullable=False)
    price_type = Column(
        Enum(PriceType, name="price_type", values_callable=_values),
        default=PriceType.PER_VEHICLE,
        nullable=False,
    )
    transfer_type = Column(
        Enum(TransferType, name="transfer_type", values_callable=_values),
        default=TransferType.PRIVATE,
        nullable=False,
    )
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index(
            "idx_price_lists_route",
            "from_bolge_id",
            "to_bolge_id",
            "vehicle_type",
        ),
    )


class ExtraModel(Base):
    __tablename__ = "extras"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class ReservationModel(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(32), unique=True, nullable=False)
    pickup_location_id = Column(Integer, ForeignKey("locations.id"), nullable=False)
    dropoff_location_id = Column(Integer, ForeignKey("locations.id"), nullable=False)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    reservation_time = Column(DateTime(timezone=True), nullable=False)
    passenger_count = Column(Integer, nullable=False)

    customer_name = Column(String(120), nullable=False)
    customer_last_name = Column(String(120), nullable=False)
    customer_email = Column(String(255), nullable=False)
    customer_phone = Column(String(40), nullable=False)
    flight_number = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)

    total_price = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default="TRY", nullable=False)
    payment_method = Column(String(20), nullable=True)
    extras = Column(JSON, nullable=True)
    status = Column(
        String(30), default=ReservationStatus.PENDING_CONFIRMATION.value, nullable=False
    )
    payment_status = Column(
        String(20), default=PaymentStatus.PENDING.value, nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    pickup_location = relationship(
        LocationModel, foreign_keys=[pickup_location_id], lazy="raise"
    )
    dropoff_location = relationship(
        LocationModel, foreign_keys=[dropoff_location_id], lazy="raise"
    )
    vehicle = relationship(VehicleModel, lazy="raise")

    __table_args__ = (
        Index("idx_reservations_status", "status"),
        Index("idx_reservations_pickup_time", "reservation_time"),
    )
