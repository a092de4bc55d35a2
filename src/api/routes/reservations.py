"""
Reservation endpoints
=====================

POST /api/v1/reservations        -- create a booking (returns 201)
GET  /api/v1/reservations/{code} -- look a booking up by its code
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.middleware import limiter, rate_limit
from src.api.schemas import (
    ErrorResponse,
    ReservationCreatedResponse,
    ReservationCreateRequest,
    ReservationDetailResponse,
    ReservationResponse,
)
from src.config import settings
from src.domain.enums import PaymentStatus, ReservationStatus
from src.domain.reservation_code import generate_reservation_code
from src.infrastructure.models import ReservationModel
from src.infrastructure.repositories import (
    LocationRepository,
    ReservationRepository,
    VehicleRepository,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post(
    "",
    status_code=201,
    response_model=ReservationCreatedResponse,
    summary="Create a reservation",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown location or vehicle."},
        409: {"model": ErrorResponse, "description": "Reservation code already in use."},
    },
)
@limiter.limit(rate_limit)
async def create_reservation(
    request: Request,
    body: ReservationCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    repo = ReservationRepository(db)
    locations = LocationRepository(db)

    for field_name in ("pickup_location_id", "dropoff_location_id"):
        if not await locations.exists(getattr(body, field_name)):
            raise HTTPException(
                status_code=400, detail=f"Unknown {field_name}: {getattr(body, field_name)}"
            )
    if await VehicleRepository(db).get_by_id(body.vehicle_id) is None:
        raise HTTPException(status_code=400, detail=f"Unknown vehicle_id: {body.vehicle_id}")

    code = body.code or generate_reservation_code(settings.reservation_code_prefix)
    if await repo.code_exists(code):
        raise HTTPException(status_code=409, detail=f"Reservation code '{code}' already exists.")

    # Card details are never accepted or persisted.
    reservation = ReservationModel(
        code=code,
        pickup_location_id=body.pickup_location_id,
        dropoff_location_id=body.dropoff_location_id,
        vehicle_id=body.vehicle_id,
        reservation_time=body.reservation_time,
        passenger_count=body.passenger_count,
        customer_name=body.customer_name,
        customer_last_name=body.customer_last_name,
        customer_email=body.customer_email,
        customer_phone=body.customer_phone,
        flight_number=body.flight_number,
        notes=body.notes,
        total_price=body.total_price,
        currency=body.currency,
        payment_method=body.payment_method,
        extras=[extra.model_dump() for extra in body.extras],
        status=ReservationStatus.PENDING_CONFIRMATION.value,
        payment_status=PaymentStatus.PENDING.value,
    )
    try:
        reservation = await repo.create(reservation)
    except IntegrityError as exc:
        logger.warning("Reservation insert rejected for code %s: %s", code, exc)
        raise HTTPException(
            status_code=409, detail=f"Reservation code '{code}' already exists."
        ) from exc

    logger.info("Reservation %s created (id=%d)", code, reservation.id)
    return ReservationCreatedResponse(code=code, reservation_id=reservation.id)


@router.get(
    "/{code}",
    response_model=ReservationDetailResponse,
    summary="Get a reservation by code",
    responses={404: {"model": ErrorResponse, "description": "No reservation with this code."}},
)
@limiter.limit(rate_limit)
async def get_reservation(
    request: Request,
    code: str,
    db: AsyncSession = Depends(get_db),
):
    reservation = await ReservationRepository(db).get_by_code(code)
    if not reservation:
        raise HTTPException(
            status_code=404, detail=f"Reservation with code '{code}' not found."
        )
    return ReservationDetailResponse(
        data=ReservationResponse.model_validate(reservation)
    )
