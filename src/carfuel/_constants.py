"""Internal constants shared across the package."""

BASE_URL = "http://localhost:8080"
USER_AGENT = "carfuel-cli/1"
DEFAULT_TIMEOUT: float = 10.0

CARS_ENDPOINT = "/api/cars"
FUEL_PATH = CARS_ENDPOINT + "/{car_id}/fuel"
FUEL_STATS_PATH = CARS_ENDPOINT + "/{car_id}/fuel/stats"

# Java-style integer widths used by the remote service.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fuel_endpoint(car_id: int) -> str:
    """Path for recording fuel entries of *car_id*."""
    return FUEL_PATH.format(car_id=car_id)


def fuel_stats_endpoint(car_id: int) -> str:
    """Path for the fuel statistics of *car_id*."""
    return FUEL_STATS_PATH.format(car_id=car_id)
