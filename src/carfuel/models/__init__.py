"""Pydantic models for car management API payloads."""

from carfuel.models.car import Car, CreatedCar
from carfuel.models.fuel import FuelEntry, FuelStats

__all__ = [
    "Car",
    "CreatedCar",
    "FuelEntry",
    "FuelStats",
]
