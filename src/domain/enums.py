"""Domain enumerations mirroring the database enum types."""

import enum


class PriceType(str, enum.Enum):
    PER_VEHICLE = "per_vehicle"  # flat fare
    PER_PERSON = "per_person"  # fare scales with passenger count


class TransferType(str, enum.Enum):
    PRIVATE = "private"
    SHARED = "shared"


class LocationType(str, enum.Enum):
    AIRPORT = "airport"
    HOTEL = "hotel"
    OTHER = "other"


class ReservationStatus(str, enum.Enum):
    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
