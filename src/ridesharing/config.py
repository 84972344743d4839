"""Client configuration for ridesharing."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from ridesharing.exceptions import RideshareConfigError

#: Seconds a popup stays visible before it removes itself.
DEFAULT_POPUP_TTL: float = 5.0


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise RideshareConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RideshareConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Origin of the rideshare server, without a trailing slash.
    auth_path : str
        Path of the endpoint that returns the logged-in user record.
    login_path : str
        View that unauthenticated navigation is redirected to.
    popup_ttl : float
        Seconds before a popup notification expires on its own.
    request_timeout : float
        Total timeout for a single HTTP request, in seconds.
    verify_ssl : bool
        Verify TLS certificates of the server.
    """

    base_url: str = "http://localhost:8080"
    auth_path: str = "/api/v1/auth/"
    login_path: str = "/login"
    popup_ttl: float = DEFAULT_POPUP_TTL
    request_timeout: float = 10.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if self.popup_ttl < 0:
            raise RideshareConfigError("popup_ttl must be >= 0")
        if self.request_timeout <= 0:
            raise RideshareConfigError("request_timeout must be > 0")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def auth_url(self) -> str:
        return f"{self.base_url}{self.auth_path}"

    @classmethod
    def from_env(cls, **overrides: Any) -> RideshareConfig:
        """Create configuration from ``RIDESHARE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        RideshareConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RIDESHARE_BASE_URL": "base_url",
            "RIDESHARE_AUTH_PATH": "auth_path",
            "RIDESHARE_LOGIN_PATH": "login_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        ttl_env = env.get("RIDESHARE_POPUP_TTL")
        if ttl_env is not None and "popup_ttl" not in overrides:
            config_kwargs["popup_ttl"] = _env_float("RIDESHARE_POPUP_TTL", ttl_env)

        timeout_env = env.get("RIDESHARE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("RIDESHARE_REQUEST_TIMEOUT", timeout_env)

        if "verify_ssl" not in overrides:
            config_kwargs["verify_ssl"] = _env_bool(env.get("RIDESHARE_VERIFY_SSL"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
