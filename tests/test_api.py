"""Endpoint modules against a fake transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from carfuel._api._common import ResponseKind, classify_response
from carfuel._api.cars import create_car, extract_car_id
from carfuel._api.fuel import add_fuel_entry, fetch_fuel_stats, format_fuel_stats
from carfuel._transport import ApiResponse
from carfuel.exceptions import NotFoundError, RequestFailedError, ResponseFormatError
from carfuel.models.car import Car
from carfuel.models.fuel import FuelEntry

CREATED_BODY = '{"id": 42, "brand": "Toyota", "model": "Corolla", "year": 2018}'
STATS_BODY = '{"totalFuel": 120.5, "totalCost": 195.75, "averageConsumptionPer100Km": 7.3}'


@dataclass
class _FakeTransport:
    status: int
    text: str = ""
    calls: list[tuple[str, str, dict[str, Any] | None]] = field(default_factory=list)

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        self.calls.append((method, endpoint, dict(payload) if payload is not None else None))
        return ApiResponse(status=self.status, text=self.text)


@pytest.mark.parametrize(
    ("status", "expected_status", "kind"),
    [
        (201, 201, ResponseKind.SUCCESS),
        (200, 200, ResponseKind.SUCCESS),
        (200, 201, ResponseKind.REQUEST_FAILED),
        (404, 200, ResponseKind.NOT_FOUND),
        (500, 200, ResponseKind.REQUEST_FAILED),
        (400, 201, ResponseKind.REQUEST_FAILED),
    ],
)
def test_classify_response(status: int, expected_status: int, kind: ResponseKind) -> None:
    assert classify_response(ApiResponse(status=status, text=""), expected_status) is kind


# ------------------------------------------------------------------
# create car
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_car_then_extract_id() -> None:
    transport = _FakeTransport(201, CREATED_BODY)

    body = await create_car(transport, Car(brand="Toyota", model="Corolla", year=2018))

    assert extract_car_id(body) == 42
    assert transport.calls == [("POST", "/api/cars", {"brand": "Toyota", "model": "Corolla", "year": 2018})]


@pytest.mark.asyncio
async def test_create_car_200_is_not_success() -> None:
    transport = _FakeTransport(200, CREATED_BODY)

    with pytest.raises(RequestFailedError) as exc_info:
        await create_car(transport, Car(brand="Toyota", model="Corolla", year=2018))

    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_create_car_404_is_request_failure() -> None:
    transport = _FakeTransport(404, "not json")

    with pytest.raises(RequestFailedError) as exc_info:
        await create_car(transport, Car(brand="Toyota", model="Corolla", year=2018))

    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Failed to create car. Status: 404"


@pytest.mark.parametrize("body", ["", "not json", "[42]", '{"brand": "Toyota"}', '{"id": 4.2}'])
def test_extract_car_id_rejects_bad_bodies(body: str) -> None:
    with pytest.raises(ResponseFormatError, match="succeeded"):
        extract_car_id(body)


# ------------------------------------------------------------------
# fuel entries
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_add_fuel_entry_posts_to_car_path() -> None:
    transport = _FakeTransport(200, '{"ok": true}')

    body = await add_fuel_entry(transport, FuelEntry(car_id=7, liters=40.0, price=52.5, odometer=45000))

    assert body == '{"ok": true}'
    assert transport.calls == [("POST", "/api/cars/7/fuel", {"liters": 40.0, "price": 52.5, "odometer": 45000})]


@pytest.mark.asyncio
async def test_add_fuel_entry_404_carries_car_id() -> None:
    transport = _FakeTransport(404)

    with pytest.raises(NotFoundError) as exc_info:
        await add_fuel_entry(transport, FuelEntry(car_id=99, liters=40.0, price=52.5, odometer=45000))

    assert exc_info.value.car_id == 99
    assert exc_info.value.endpoint == "/api/cars/99/fuel"


@pytest.mark.asyncio
async def test_add_fuel_entry_server_error_does_not_parse_body() -> None:
    transport = _FakeTransport(500, "<html>Internal Server Error</html>")

    with pytest.raises(RequestFailedError) as exc_info:
        await add_fuel_entry(transport, FuelEntry(car_id=1, liters=40.0, price=52.5, odometer=45000))

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "Failed to add fuel entry. Status: 500"


# ------------------------------------------------------------------
# fuel stats
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_fetch_fuel_stats_and_format() -> None:
    transport = _FakeTransport(200, STATS_BODY)

    body = await fetch_fuel_stats(transport, 3)

    assert transport.calls == [("GET", "/api/cars/3/fuel/stats", None)]
    assert format_fuel_stats(body) == (
        "Total fuel: 120.5 L\n"
        "Total cost: 195.75\n"
        "Average consumption: 7.3 L/100km"
    )


@pytest.mark.asyncio
async def test_fetch_fuel_stats_404() -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await fetch_fuel_stats(_FakeTransport(404), 5)

    assert exc_info.value.car_id == 5


@pytest.mark.asyncio
async def test_fetch_fuel_stats_other_status() -> None:
    with pytest.raises(RequestFailedError) as exc_info:
        await fetch_fuel_stats(_FakeTransport(503, "busy"), 5)

    assert exc_info.value.status_code == 503


@pytest.mark.parametrize(
    "body",
    [
        '{"totalFuel": 120.5, "totalCost": 195.75}',
        '{"totalFuel": "lots", "totalCost": 195.75, "averageConsumptionPer100Km": 7.3}',
        '{"totalFuel": null, "totalCost": 195.75, "averageConsumptionPer100Km": 7.3}',
        "[]",
    ],
)
def test_format_fuel_stats_rejects_incomplete_bodies(body: str) -> None:
    with pytest.raises(ResponseFormatError):
        format_fuel_stats(body)


def test_format_fuel_stats_rejects_snake_case_keys() -> None:
    body = '{"total_fuel": 120.5, "total_cost": 195.75, "average_consumption_per_100km": 7.3}'

    with pytest.raises(ResponseFormatError):
        format_fuel_stats(body)


@pytest.mark.parametrize(
    "body",
    [
        '{"totalFuel": Infinity, "totalCost": 195.75, "averageConsumptionPer100Km": 7.3}',
        '{"totalFuel": 120.5, "totalCost": NaN, "averageConsumptionPer100Km": 7.3}',
    ],
)
def test_format_fuel_stats_rejects_non_finite_numbers(body: str) -> None:
    with pytest.raises(ResponseFormatError):
        format_fuel_stats(body)


def test_stats_error_names_concrete_path() -> None:
    with pytest.raises(ResponseFormatError) as exc_info:
        format_fuel_stats("{}", 3)

    assert "/api/cars/3/fuel/stats" in str(exc_info.value)
    assert exc_info.value.endpoint == "/api/cars/3/fuel/stats"


def test_stats_error_without_car_id_has_no_placeholder() -> None:
    with pytest.raises(ResponseFormatError) as exc_info:
        format_fuel_stats("{}")

    message = str(exc_info.value)
    assert "{car_id}" not in message
    assert message.startswith("Request succeeded but its response could not be read")
