"""Fuel endpoints.

Endpoints:
  - POST /api/cars/{carId}/fuel (record entry, 200)
  - GET  /api/cars/{carId}/fuel/stats (aggregates, 200)
"""

from __future__ import annotations

from carfuel._api._common import ensure_success, parse_body
from carfuel._constants import fuel_endpoint, fuel_stats_endpoint
from carfuel._transport import Transport
from carfuel.models.fuel import FuelEntry, FuelStats

_OK = 200



async def add_fuel_entry(transport: Transport, entry: FuelEntry) -> str:
    """Record *entry* and return the raw (acknowledgment) response body.

    Raises
    ------
    NotFoundError
        If the car does not exist.
    RequestFailedError
        On any other unexpected status.
    TransportError
        If the request never completes.
    """
    endpoint = fuel_endpoint(entry.car_id)
    response = await transport.request("POST", endpoint, entry.to_payload())
    return ensure_success(
        response,
        endpoint=endpoint,
        expected_status=_OK,
        action="add fuel entry",
        car_id=entry.car_id,
    )


async def fetch_fuel_stats(transport: Transport, car_id: int) -> str:
    """Fetch the raw fuel statistics body for *car_id*.

    Raises
    ------
    NotFoundError
        If the car does not exist.
    RequestFailedError
        On any other unexpected status.
    TransportError
        If the request never completes.
    """
    endpoint = fuel_stats_endpoint(car_id)
    response = await transport.request("GET", endpoint)
    return ensure_success(
        response,
        endpoint=endpoint,
        expected_status=_OK,
        action="get fuel stats",
        car_id=car_id,
    )


def parse_fuel_stats(body: str, car_id: int | None = None) -> FuelStats:
    endpoint = fuel_stats_endpoint(car_id) if car_id is not None else ""
    return parse_body(FuelStats, body, endpoint=endpoint)


def format_fuel_stats(body: str, car_id: int | None = None) -> str:
    """Render a stats body as three human-readable lines.

    *car_id*, when given, names the request path in error messages.
    """
    return parse_fuel_stats(body, car_id).render()
