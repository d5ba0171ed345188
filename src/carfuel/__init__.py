"""carfuel - Async Python client and CLI for a car fuel-tracking API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("carfuel")
except PackageNotFoundError:
    __version__ = "0+local"
from carfuel.client import CarFuelClient
from carfuel.config import CarFuelConfig
from carfuel.exceptions import (
    CarFuelApiError,
    CarFuelConfigError,
    CarFuelError,
    CarFuelUsageError,
    NotFoundError,
    ParseError,
    RequestFailedError,
    ResponseFormatError,
    TransportError,
    UnknownCommandError,
    ValidationError,
)
from carfuel.models import Car, CreatedCar, FuelEntry, FuelStats
from carfuel.parser import Invocation, parse_tokens

__all__ = [
    "__version__",
    "Car",
    "CarFuelApiError",
    "CarFuelClient",
    "CarFuelConfig",
    "CarFuelConfigError",
    "CarFuelError",
    "CarFuelUsageError",
    "CreatedCar",
    "FuelEntry",
    "FuelStats",
    "Invocation",
    "NotFoundError",
    "ParseError",
    "RequestFailedError",
    "ResponseFormatError",
    "TransportError",
    "UnknownCommandError",
    "ValidationError",
    "parse_tokens",
]
