"""
Integration tests for the REST API endpoints.

Uses the in-memory SQLite database seeded with the reference scenario
(see ``conftest.seed_scenario``).
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from src.config import settings
from src.infrastructure.repositories import PriceListRepository, VehicleRepository

URL = "/api/v1/available-vehicle-types"


def _params(scenario, passengers):
    return {
        "pickup_location_id": scenario.pickup_id,
        "dropoff_location_id": scenario.dropoff_id,
        "passenger_count": passengers,
    }


# ── Health ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/v1/admin/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_health_degraded_when_database_fails(client: AsyncClient):
    failing = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
    with patch("sqlalchemy.ext.asyncio.AsyncSession.execute", failing):
        resp = await client.get("/api/v1/admin/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "degraded"


# ── Availability ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_availability_returns_both_types(client: AsyncClient, scenario):
    resp = await client.get(URL, params=_params(scenario, 3))
    assert resp.status_code == 200
    body = resp.json()
    assert body["error"] is None
    assert [o["type"] for o in body["options"]] == ["sedan", "van"]
    sedan = body["options"][0]
    assert sedan == {
        "type": "sedan",
        "name": "Sedan",
        "capacity": 4,
        "price": 100.0,
        "currency": "TRY",
        "price_type": "per_vehicle",
        "transfer_type": "private",
        "vehicle_id_example": scenario.sedan_id,
    }


@pytest.mark.asyncio
async def test_availability_capacity_filter(client: AsyncClient, scenario):
    resp = await client.get(URL, params=_params(scenario, 5))
    assert resp.status_code == 200
    assert [o["type"] for o in resp.json()["options"]] == ["van"]


@pytest.mark.asyncio
async def test_availability_no_options_is_200(client: AsyncClient, scenario):
    resp = await client.get(URL, params=_params(scenario, 9))
    assert resp.status_code == 200
    assert resp.json() == {"options": [], "error": None}


@pytest.mark.asyncio
async def test_availability_reverse_direction_has_no_price(client: AsyncClient, scenario):
    resp = await client.get(
        URL,
        params={
            "pickup_location_id": scenario.dropoff_id,
            "dropoff_location_id": scenario.pickup_id,
            "passenger_count": 2,
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"options": [], "error": None}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {},
        {"pickup_location_id": 1, "dropoff_location_id": 2},
        {"pickup_location_id": 1, "passenger_count": 2},
        {"pickup_location_id": "abc", "dropoff_location_id": 2, "passenger_count": 2},
        {"pickup_location_id": 1, "dropoff_location_id": 2, "passenger_count": "two"},
        {"pickup_location_id": 1, "dropoff_location_id": 2, "passenger_count": 0},
        {"pickup_location_id": 1, "dropoff_location_id": 2, "passenger_count": -1},
    ],
)
async def test_availability_invalid_params_are_400(client: AsyncClient, params):
    resp = await client.get(URL, params=params)
    assert resp.status_code == 400
    body = resp.json()
    assert body["options"] == []
    assert body["error"]


@pytest.mark.asyncio
async def test_availability_unknown_location_is_500(client: AsyncClient, scenario):
    resp = await client.get(
        URL,
        params={
            "pickup_location_id": 9999,
            "dropoff_location_id": scenario.dropoff_id,
            "passenger_count": 2,
        },
    )
    assert resp.status_code == 500
    body = resp.json()
    assert body["options"] == []
    assert "pickup" in body["error"]


@pytest.mark.asyncio
async def test_availability_missing_region_is_500(client: AsyncClient, scenario):
    resp = await client.get(
        URL,
        params={
            "pickup_location_id": scenario.pickup_id,
            "dropoff_location_id": scenario.unassigned_id,
            "passenger_count": 2,
        },
    )
    assert resp.status_code == 500
    assert resp.json()["error"] == "Could not determine region IDs for locations."


@pytest.mark.asyncio
async def test_availability_store_failure_is_500(client: AsyncClient, scenario):
    failing = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection lost"))
    )
    with patch.object(VehicleRepository, "get_active_with_capacity", failing):
        resp = await client.get(URL, params=_params(scenario, 2))
    assert resp.status_code == 500
    body = resp.json()
    assert body["options"] == []
    assert body["error"].startswith("Could not fetch potential vehicles")


# ── Catalogue ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_locations(client: AsyncClient):
    resp = await client.get("/api/v1/locations")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [loc["name"] for loc in data] == ["D Hotel", "P Airport", "Z Villa"]
    assert data[1]["type"] == "airport"
    assert set(data[0]) == {"id", "name", "type", "address", "latitude", "longitude"}


@pytest.mark.asyncio
async def test_list_locations_limit(client: AsyncClient):
    resp = await client.get("/api/v1/locations", params={"limit": 2})
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", ["0", "-5", "many"])
async def test_list_locations_invalid_limit(client: AsyncClient, limit):
    resp = await client.get("/api/v1/locations", params={"limit": limit})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_list_extras(client: AsyncClient):
    resp = await client.get("/api/v1/extras")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert len(data) == 1
    assert data[0]["name"] == "Child seat"
    assert data[0]["price"] == 5.0


# ── Reservations ──────────────────────────────────────────────────────


def _reservation(scenario, **overrides):
    body = {
        "pickup_location_id": scenario.pickup_id,
        "dropoff_location_id": scenario.dropoff_id,
        "reservation_time": "2026-11-01T10:30:00",
        "passenger_count": 3,
        "vehicle_id": scenario.sedan_id,
        "customer_name": "Ayse",
        "customer_last_name": "Yilmaz",
        "customer_email": "ayse@example.com",
        "customer_phone": "+90 555 000 0000",
        "flight_number": "TK123",
        "extras": [{"id": 1, "name": "Child seat", "price": 5.0}],
        "total_price": "105.00",
        "currency": "TRY",
        "payment_method": "cash",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_create_and_fetch_reservation(client: AsyncClient, scenario):
    resp = await client.post(
        "/api/v1/reservations", json=_reservation(scenario, code="KTR0001ABCD")
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["code"] == "KTR0001ABCD"
    assert created["reservation_id"] >= 1

    resp = await client.get("/api/v1/reservations/KTR0001ABCD")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["status"] == "pending_confirmation"
    assert data["payment_status"] == "pending"
    assert data["total_price"] == 105.0
    assert data["pickup_location"]["name"] == "P Airport"
    assert data["dropoff_location"]["name"] == "D Hotel"
    assert data["vehicle"]["type"] == "sedan"
    assert data["extras"] == [{"id": 1, "name": "Child seat", "price": 5.0}]


@pytest.mark.asyncio
async def test_create_reservation_generates_code(client: AsyncClient, scenario):
    resp = await client.post("/api/v1/reservations", json=_reservation(scenario))
    assert resp.status_code == 201
    code = resp.json()["code"]
    assert code.startswith("KTR")
    assert len(code) == 11


@pytest.mark.asyncio
async def test_duplicate_reservation_code_conflicts(client: AsyncClient, scenario):
    body = _reservation(scenario, code="KTRDUPE0001")
    assert (await client.post("/api/v1/reservations", json=body)).status_code == 201
    resp = await client.post("/api/v1/reservations", json=body)
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_reservation_unknown_vehicle(client: AsyncClient, scenario):
    resp = await client.post(
        "/api/v1/reservations", json=_reservation(scenario, vehicle_id=9999)
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_reservation_missing_customer_fields(client: AsyncClient, scenario):
    body = _reservation(scenario)
    del body["customer_email"]
    resp = await client.post("/api/v1/reservations", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_reservation_not_found(client: AsyncClient):
    resp = await client.get("/api/v1/reservations/NOPE")
    assert resp.status_code == 404


# ── Price cache wiring ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_availability_served_from_price_cache(client: AsyncClient, scenario):
    stored = {}

    async def _set(key, value, ex):
        stored[key] = value

    async def _get(key):
        return stored.get(key)

    fake_redis = AsyncMock()
    fake_redis.get = AsyncMock(side_effect=_get)
    fake_redis.set = AsyncMock(side_effect=_set)

    calls = []
    find_active = PriceListRepository.find_active

    async def _counting_find_active(self, *args):
        calls.append(args)
        return await find_active(self, *args)

    with patch.object(settings, "price_cache_ttl_seconds", 30), patch(
        "src.api.dependencies.get_redis", AsyncMock(return_value=fake_redis)
    ), patch.object(PriceListRepository, "find_active", _counting_find_active):
        first = await client.get(URL, params=_params(scenario, 3))
        second = await client.get(URL, params=_params(scenario, 3))

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert [o["type"] for o in second.json()["options"]] == ["sedan", "van"]
    assert len(calls) == 1
    assert len(stored) == 1
    assert fake_redis.set.await_args.kwargs == {"ex": 30}


# ── Rate limiting ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_rate_limit_rejects_excess_requests(client: AsyncClient):
    with patch.object(settings, "rate_limit", "2/minute"):
        statuses = [(await client.get("/api/v1/extras")).status_code for _ in range(3)]
    assert statuses == [200, 200, 429]


@pytest.mark.asyncio
async def test_error_responses_documented_in_openapi(client: AsyncClient):
    paths = (await client.get("/openapi.json")).json()["paths"]
    ref = "#/components/schemas/ErrorResponse"

    create = paths["/api/v1/reservations"]["post"]["responses"]
    fetch = paths["/api/v1/reservations/{code}"]["get"]["responses"]
    for responses, status in ((create, "400"), (create, "409"), (fetch, "404")):
        assert responses[status]["content"]["application/json"]["schema"]["$ref"] == ref
