"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.enums import LocationType, PriceType, TransferType


# ── Requests ──────────────────────────────────────────────────────────


class ReservationExtra(BaseModel):
    id: int
    name: str
    price: float = Field(..., ge=0)


class ReservationCreateRequest(BaseModel):
    pickup_location_id: int = Field(..., ge=1)
    dropoff_location_id: int = Field(..., ge=1)
    reservation_time: datetime
    passenger_count: int = Field(..., ge=1)
    vehicle_id: int = Field(
        ...,
        ge=1,
        description="The vehicle_id_example of the chosen vehicle type option.",
    )

    customer_name: str = Field(..., min_length=1, max_length=120)
    customer_last_name: str = Field(..., min_length=1, max_length=120)
    customer_email: str = Field(
        ..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
    )
    customer_phone: str = Field(..., min_length=3, max_length=40)
    flight_number: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

    extras: list[ReservationExtra] = []
    total_price: Decimal = Field(..., ge=0)
    currency: str = Field("TRY", min_length=3, max_length=3)
    payment_method: Optional[str] = Field(None, max_length=20)
    code: Optional[str] = Field(
        None,
        max_length=32,
        description="Client-generated reservation code; generated server-side if omitted.",
    )


# ── Responses ─────────────────────────────────────────────────────────


class VehicleTypeOptionResponse(BaseModel):
    type: str
    name: str
    capacity: int
    price: float
    currency: str
    price_type: PriceType
    transfer_type: TransferType
    vehicle_id_example: int

    model_config = {"from_attributes": True}


class AvailabilityResponse(BaseModel):
    options: list[VehicleTypeOptionResponse] = []
    error: Optional[str] = None


class LocationResponse(BaseModel):
    id: int
    name: str
    type: LocationType
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = {"from_attributes": True}


class LocationListResponse(BaseModel):
    data: list[LocationResponse]


class ExtraResponse(BaseModel):
    id: int
    name: str
    price: float

    model_config = {"from_attributes": True}


class ExtraListResponse(BaseModel):
    data: list[ExtraResponse]


class VehicleSummary(BaseModel):
    id: int
    name: str
    type: str
    capacity: int
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class ReservationCreatedResponse(BaseModel):
    message: str = "Reservation created successfully!"
    code: str
    reservation_id: int


class ReservationResponse(BaseModel):
    id: int
    code: str
    reservation_time: datetime
    passenger_count: int
    customer_name: str
    customer_last_name: str
    customer_email: str
    customer_phone: str
    flight_number: Optional[str] = None
    notes: Optional[str] = None
    total_price: float
    currency: str
    payment_method: Optional[str] = None
    extras: Optional[list[ReservationExtra]] = None
    status: str
    payment_status: str
    pickup_location: LocationResponse
    dropoff_location: LocationResponse
    vehicle: VehicleSummary
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ReservationDetailResponse(BaseModel):
    data: ReservationResponse


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
