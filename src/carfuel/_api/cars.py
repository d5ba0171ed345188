"""Car endpoint.

Endpoint:
  - POST /api/cars (create, 201)
"""

from __future__ import annotations

import logging

from carfuel._api._common import ensure_success, parse_body
from carfuel._constants import CARS_ENDPOINT
from carfuel._transport import Transport
from carfuel.models.car import Car, CreatedCar

_logger = logging.getLogger(__name__)

_CREATED = 201


async def create_car(transport: Transport, car: Car) -> str:
    """Create *car* and return the raw response body.

    Raises
    ------
    RequestFailedError
        If the service does not answer ``201 Created``.
    TransportError
        If the request never completes.
    """
    response = await transport.request("POST", CARS_ENDPOINT, car.to_payload())
    return ensure_success(
        response,
        endpoint=CARS_ENDPOINT,
        expected_status=_CREATED,
        action="create car",
    )


def extract_car_id(body: str) -> int:
    """Read the service-assigned ``id`` from a create-car response body."""
    created = parse_body(CreatedCar, body, endpoint=CARS_ENDPOINT)
    _logger.debug("Car created with id=%d", created.id)
    return created.id
