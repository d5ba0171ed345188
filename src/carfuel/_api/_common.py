"""Shared helpers for car management endpoint modules.

This module centralizes the most repeated patterns:
- classifying an HTTP status against the endpoint's success code
- mapping the classification onto the exception hierarchy
- validating a success body into a pydantic model

It is internal to carfuel and may change at any time.
"""

from __future__ import annotations

import enum
import logging
from typing import TypeVar

import pydantic

from carfuel._transport import ApiResponse
from carfuel.exceptions import NotFoundError, RequestFailedError, ResponseFormatError

_logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404

TModel = TypeVar("TModel", bound=pydantic.BaseModel)


class ResponseKind(enum.Enum):
    """Outcome of a completed HTTP exchange.

    Exchanges that never complete are not classified; the transport
    raises :class:`~carfuel.exceptions.TransportError` for them.
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    REQUEST_FAILED = "request_failed"


def classify_response(response: ApiResponse, expected_status: int) -> ResponseKind:
    if response.status == expected_status:
        return ResponseKind.SUCCESS
    if response.status == HTTP_NOT_FOUND:
        return ResponseKind.NOT_FOUND
    return ResponseKind.REQUEST_FAILED


def ensure_success(
    response: ApiResponse,
    *,
    endpoint: str,
    expected_status: int,
    action: str,
    car_id: int | None = None,
) -> str:
    """Return the body of a successful response or raise the matching error.

    A 404 becomes :class:`NotFoundError` only when the request addressed a
    car (*car_id* given); otherwise it is an ordinary unexpected status.
    Error bodies are logged, never parsed.
    """
    kind = classify_response(response, expected_status)
    if kind is ResponseKind.SUCCESS:
        return response.text

    _logger.debug("%s returned HTTP %d: %s", endpoint, response.status, response.text[:200])
    if kind is ResponseKind.NOT_FOUND and car_id is not None:
        raise NotFoundError(car_id, endpoint=endpoint)
    raise RequestFailedError(response.status, endpoint=endpoint, action=action)


def parse_body(model: type[TModel], body: str, *, endpoint: str = "") -> TModel:
    """Validate a JSON success body into *model*.

    *endpoint* names the concrete request path in the error message; leave
    it empty when the body's origin is unknown.

    Raises
    ------
    ResponseFormatError
        If *body* is not a JSON object or lacks a required field.
    """
    try:
        return model.model_validate_json(body)
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()
        )
        subject = f"Request to {endpoint}" if endpoint else "Request"
        raise ResponseFormatError(
            f"{subject} succeeded but its response could not be read ({problems})",
            endpoint=endpoint,
        ) from exc
