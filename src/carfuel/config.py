"""Client configuration for carfuel."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from carfuel._constants import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from carfuel.exceptions import CarFuelConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        result = float(value)
    except ValueError as exc:
        raise CarFuelConfigError(f"{name} must be a number of seconds, got {value!r}") from exc
    if result <= 0:
        raise CarFuelConfigError(f"{name} must be positive, got {value!r}")
    return result


@dataclasses.dataclass(frozen=True)
class CarFuelConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the car management service, without a trailing slash.
    connect_timeout : float
        Seconds allowed for establishing the TCP connection.
    read_timeout : float
        Seconds allowed between reads of the response.
    user_agent : str
        ``User-Agent`` header sent with every request.
    debug : bool
        Enable DEBUG logging of the HTTP exchange.
    """

    base_url: str = BASE_URL
    connect_timeout: float = DEFAULT_TIMEOUT
    read_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT
    debug: bool = False

    def __post_init__(self) -> None:
        # Paths are appended verbatim, so a trailing slash would double up.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> CarFuelConfig:
        """Create configuration from environment variables.

        Reads ``CARFUEL_BASE_URL``, ``CARFUEL_CONNECT_TIMEOUT``,
        ``CARFUEL_READ_TIMEOUT``, ``CARFUEL_USER_AGENT`` and
        ``CARFUEL_DEBUG``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        CarFuelConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        _ENV_CONFIG_MAP = {
            "CARFUEL_BASE_URL": "base_url",
            "CARFUEL_USER_AGENT": "user_agent",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        _ENV_TIMEOUT_MAP = {
            "CARFUEL_CONNECT_TIMEOUT": "connect_timeout",
            "CARFUEL_READ_TIMEOUT": "read_timeout",
        }
        for env_key, field_name in _ENV_TIMEOUT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool(env.get("CARFUEL_DEBUG"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
