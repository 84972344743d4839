"""HTTP transport for the rideshare server."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from ridesharing.config import RideshareConfig
from ridesharing.exceptions import RideshareTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Returns the HTTP status together with the decoded JSON body (``None``
    for non-JSON bodies), so endpoint modules decide what a status means.
    Test doubles only need to implement this one coroutine.
    """

    async def get_json(self, path: str) -> tuple[int, Any]:
        ...


class HttpTransport:
    """aiohttp-backed transport; the session cookie lives in the client session."""

    def __init__(self, config: RideshareConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def get_json(self, path: str) -> tuple[int, Any]:
        url = f"{self._config.base_url}{path}"
        _logger.debug("GET %s", url)

        try:
            async with self._http.get(
                url,
                headers={"accept": "application/json"},
                timeout=aiohttp.ClientTimeout(total=self._config.request_timeout),
                ssl=self._config.verify_ssl,
            ) as resp:
                status = resp.status
                if status != 200:
                    return status, None
                body = await resp.read()
                charset = resp.charset or "utf-8"
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise RideshareTransportError(f"Request to {path} failed: {exc}", endpoint=path) from exc

        try:
            text = body.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise RideshareTransportError(
                f"Undecodable {charset} body from {path}",
                status_code=status,
                endpoint=path,
            ) from exc

        try:
            return status, json.loads(text)
        except json.JSONDecodeError as exc:
            raise RideshareTransportError(
                f"Invalid JSON from {path}: {text[:200]}",
                status_code=status,
                endpoint=path,
            ) from exc
