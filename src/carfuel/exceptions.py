"""Custom exception hierarchy for carfuel."""

from __future__ import annotations


class CarFuelError(Exception):
    """Base exception for all carfuel errors."""


class CarFuelConfigError(CarFuelError):
    """Invalid configuration (usually a malformed environment variable)."""


class CarFuelUsageError(CarFuelError):
    """Command line could not be turned into a request.

    Raised before any network activity, so no remote effect has happened.
    """


class ParseError(CarFuelUsageError):
    """Malformed token stream (no command, flag without a value)."""


class ValidationError(CarFuelUsageError):
    """A typed flag value is missing or cannot be converted.

    ``expected`` is ``None`` when the flag is absent and names the
    expected type (e.g. ``"integer"``) when it is present but malformed.
    """

    def __init__(self, key: str, *, expected: str | None = None) -> None:
        self.key = key
        self.expected = expected
        if expected is None:
            message = f"Missing required argument: --{key}"
        else:
            message = f"Argument --{key} must be a valid {expected}"
        super().__init__(message)


class UnknownCommandError(CarFuelUsageError):
    """Command name outside the supported set."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown command: {command}")


class CarFuelApiError(CarFuelError):
    """The remote service answered, but not with the expected status."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class NotFoundError(CarFuelApiError):
    """The car addressed by the request does not exist (HTTP 404)."""

    def __init__(self, car_id: int, *, endpoint: str = "") -> None:
        self.car_id = car_id
        super().__init__(f"Car with ID {car_id} not found (404)", endpoint=endpoint)


class RequestFailedError(CarFuelApiError):
    """Unexpected HTTP status from the remote service."""

    def __init__(self, status_code: int, *, endpoint: str = "", action: str = "complete request") -> None:
        self.status_code = status_code
        super().__init__(f"Failed to {action}. Status: {status_code}", endpoint=endpoint)


class TransportError(CarFuelError):
    """HTTP exchange never completed (connection refused, timeout, broken response)."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ResponseFormatError(CarFuelError):
    """A successful response body could not be interpreted.

    The remote operation itself succeeded when this is raised.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
