"""Fuel entry and fuel statistics models."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import ClassVar

from pydantic import Field

from carfuel._constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from carfuel.models._base import CarFuelBaseModel, CarFuelRequestModel

# Wide enough to quantize any finite double without an InvalidOperation.
_FORMAT_CONTEXT = Context(prec=400)


def format_fixed(value: float, places: int) -> str:
    """Render *value* with *places* decimals, rounding half up on its shortest decimal form.

    ``format(0.125, ".2f")`` gives ``"0.12"`` because the binary value sits
    below the half; operators expect ``"0.13"``.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT)
    return f"{rounded:f}"


class FuelEntry(CarFuelRequestModel):
    """One fueling event recorded against an existing car.

    Parameters
    ----------
    car_id : int
        Car the entry belongs to. Sent in the URL path, not the body.
    liters : float
        Volume of fuel added.
    price : float
        Total price paid.
    odometer : int
        Odometer reading in km at the time of fueling.
    """

    _PAYLOAD_EXCLUDE: ClassVar[frozenset[str]] = frozenset({"car_id"})

    car_id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    liters: float
    price: float
    odometer: int = Field(ge=INT32_MIN, le=INT32_MAX)


class FuelStats(CarFuelBaseModel):
    """Aggregate fuel metrics computed by the service for one car.

    All three fields are required, keyed by their camelCase names, and
    must be finite JSON numbers.
    """

    total_fuel: float = Field(strict=True, allow_inf_nan=False)
    total_cost: float = Field(strict=True, allow_inf_nan=False)
    average_consumption_per_100km: float = Field(
        strict=True, allow_inf_nan=False, alias="averageConsumptionPer100Km"
    )

    def render(self) -> str:
        return (
            f"Total fuel: {format_fixed(self.total_fuel, 1)} L\n"
            f"Total cost: {format_fixed(self.total_cost, 2)}\n"
            f"Average consumption: {format_fixed(self.average_consumption_per_100km, 1)} L/100km"
        )
