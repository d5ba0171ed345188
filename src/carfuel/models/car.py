"""Car models."""

from __future__ import annotations

from pydantic import Field

from carfuel._constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from carfuel.models._base import CarFuelBaseModel, CarFuelRequestModel


class Car(CarFuelRequestModel):
    """A car to be created by the remote service.

    The service assigns the ID; it comes back as :class:`CreatedCar`.
    """

    brand: str
    model: str
    year: int = Field(ge=INT32_MIN, le=INT32_MAX)


class CreatedCar(CarFuelBaseModel):
    """Identity part of a ``POST /api/cars`` response.

    Only ``id`` is read; it must be a JSON integer.
    """

    id: int = Field(strict=True, ge=INT64_MIN, le=INT64_MAX)
