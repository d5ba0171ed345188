"""High-level async client for the car management API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from carfuel._api import cars as _cars_api
from carfuel._api import fuel as _fuel_api
from carfuel._transport import HttpTransport, Transport
from carfuel.config import CarFuelConfig
from carfuel.exceptions import CarFuelError
from carfuel.models.car import Car
from carfuel.models.fuel import FuelEntry, FuelStats

_logger = logging.getLogger(__name__)


class CarFuelClient:
    """Async client for the car management API.

    Every method performs exactly one HTTP request and never retries.

    Usage::

        async with CarFuelClient(config) as client:
            body = await client.create_car("Toyota", "Corolla", 2018)
            car_id = client.extract_car_id(body)
    """

    def __init__(
        self,
        config: CarFuelConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else CarFuelConfig()
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport
        self._transport: Transport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CarFuelClient:
        if self._external_transport is not None:
            self._transport = self._external_transport
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise CarFuelError("Client not initialized. Use 'async with CarFuelClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def create_car(self, brand: str, model: str, year: int) -> str:
        """Create a car; returns the raw ``201`` response body."""
        car = Car(brand=brand, model=model, year=year)
        _logger.debug("Creating car brand=%s model=%s year=%d", brand, model, year)
        return await _cars_api.create_car(self._require_transport(), car)

    async def add_fuel_entry(self, car_id: int, liters: float, price: float, odometer: int) -> str:
        """Record a fuel entry for an existing car; returns the raw response body."""
        entry = FuelEntry(car_id=car_id, liters=liters, price=price, odometer=odometer)
        return await _fuel_api.add_fuel_entry(self._require_transport(), entry)

    async def get_fuel_stats(self, car_id: int) -> str:
        """Fetch the raw fuel statistics body for a car."""
        return await _fuel_api.fetch_fuel_stats(self._require_transport(), car_id)

    # ------------------------------------------------------------------
    # Result extraction
    # ------------------------------------------------------------------

    @staticmethod
    def extract_car_id(body: str) -> int:
        return _cars_api.extract_car_id(body)

    @staticmethod
    def parse_fuel_stats(body: str, car_id: int | None = None) -> FuelStats:
        return _fuel_api.parse_fuel_stats(body, car_id)

    @staticmethod
    def format_fuel_stats(body: str, car_id: int | None = None) -> str:
        return _fuel_api.format_fuel_stats(body, car_id)
