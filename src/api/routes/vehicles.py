"""
Vehicle availability endpoint
=============================

GET /api/v1/available-vehicle-types -- bookable vehicle types and fares
for a pickup / dropoff / passenger-count triple.

Status codes
------------
* 400 -- missing, non-integer or non-positive query parameters
* 500 -- resolution failed and produced no options
* 200 -- otherwise, including an empty ``options`` list
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.api.dependencies import get_resolver
from src.api.middleware import limiter, rate_limit
from src.api.schemas import AvailabilityResponse, VehicleTypeOptionResponse
from src.domain.availability import AvailabilityResolver
from src.domain.entities import ValidationError

router = APIRouter(tags=["availability"])

_PARAMS = ("pickup_location_id", "dropoff_location_id", "passenger_count")


def _bad_request(message: str) -> JSONResponse:
    body = AvailabilityResponse(options=[], error=message)
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


@router.get(
    "/available-vehicle-types",
    response_model=AvailabilityResponse,
    summary="List vehicle types and prices available for a trip",
    responses={
        400: {"model": AvailabilityResponse, "description": "Invalid query parameters."},
        500: {"model": AvailabilityResponse, "description": "Lookup failed."},
    },
)
@limiter.limit(rate_limit)
async def available_vehicle_types(
    request: Request,
    pickup_location_id: Optional[str] = Query(None),
    dropoff_location_id: Optional[str] = Query(None),
    passenger_count: Optional[str] = Query(None),
    resolver: AvailabilityResolver = Depends(get_resolver),
):
    raw = (pickup_location_id, dropoff_location_id, passenger_count)
    if any(not value for value in raw):
        return _bad_request(
            "Missing required query parameters (" + ", ".join(_PARAMS) + ")."
        )
    try:
        pickup_id, dropoff_id, passengers = (int(value) for value in raw)
    except ValueError:
        return _bad_request("Invalid numeric query parameters.")

    result = await resolver.resolve(pickup_id, dropoff_id, passengers)

    body = AvailabilityResponse(
        options=[
            VehicleTypeOptionResponse.model_validate(option)
            for option in result.options
        ],
        error=result.error,
    )
    if isinstance(result.failure, ValidationError):
        status_code = 400
    elif result.is_failure:
        status_code = 500
    else:
        status_code = 200
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
