"""HTTP transport for the car management JSON API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import aiohttp

from carfuel.config import CarFuelConfig
from carfuel.exceptions import TransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Status and decoded body of one completed HTTP exchange."""

    status: int
    text: str


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        ...


class HttpTransport:
    """aiohttp-backed transport sending JSON bodies and returning raw responses.

    Any HTTP status is returned as an :class:`ApiResponse`; classifying it
    is up to the caller. Only exchanges that never complete raise.
    """

    def __init__(self, config: CarFuelConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(
            connect=config.connect_timeout,
            sock_read=config.read_timeout,
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Send one request and return its status and UTF-8 body.

        Raises
        ------
        TransportError
            On connection failure, timeout, or a malformed HTTP response.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        body: str | None = None
        if payload is not None:
            headers["content-type"] = "application/json; charset=UTF-8"
            body = json.dumps(dict(payload), separators=(",", ":"))

        url = f"{self._config.base_url}{endpoint}"
        _logger.debug("%s %s body=%s", method, url, body)

        try:
            async with self._http.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                raw = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            detail = str(exc) or type(exc).__name__
            raise TransportError(
                f"Request to {method} {endpoint} failed: {detail}",
                endpoint=endpoint,
            ) from exc

        text = raw.decode("utf-8", errors="replace")
        _logger.debug("%s %s -> HTTP %d", method, endpoint, status)
        return ApiResponse(status=status, text=text)
