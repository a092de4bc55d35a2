"""
Booking-form catalogue endpoints
================================

GET /api/v1/locations -- active pickup / dropoff points
GET /api/v1/extras    -- active add-ons
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.middleware import limiter, rate_limit
from src.api.schemas import (
    ErrorResponse,
    ExtraListResponse,
    ExtraResponse,
    LocationListResponse,
    LocationResponse,
)
from src.config import settings
from src.infrastructure.repositories import ExtraRepository, LocationRepository

router = APIRouter(tags=["catalog"])


@router.get(
    "/locations",
    response_model=LocationListResponse,
    summary="List active locations",
    responses={400: {"model": ErrorResponse, "description": "Invalid limit parameter."}},
)
@limiter.limit(rate_limit)
async def list_locations(
    request: Request,
    limit: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    if limit is None:
        size = settings.locations_default_limit
    else:
        try:
            size = int(limit)
        except ValueError:
            size = 0
        if size <= 0:
            raise HTTPException(status_code=400, detail="Invalid limit parameter")

    locations = await LocationRepository(db).list_active(size)
    return LocationListResponse(
        data=[LocationResponse.model_validate(loc) for loc in locations]
    )


@router.get(
    "/extras",
    response_model=ExtraListResponse,
    summary="List active extras",
)
@limiter.limit(rate_limit)
async def list_extras(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    extras = await ExtraRepository(db).list_active()
    return ExtraListResponse(
        data=[ExtraResponse.model_validate(extra) for extra in extras]
    )
