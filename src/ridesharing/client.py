"""High-level async client tying the stores to the auth endpoint."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ridesharing._api.auth import fetch_current_user
from ridesharing._transport import HttpTransport, Transport
from ridesharing.config import RideshareConfig
from ridesharing.exceptions import RideshareError
from ridesharing.models.user import UserData
from ridesharing.routing import guard_route
from ridesharing.state import AppState
from ridesharing.state.popups import Scheduler

_logger = logging.getLogger(__name__)


class RideshareClient:
    """Async client owning one :class:`AppState`.

    Usage::

        async with RideshareClient(config) as client:
            if await client.refresh_session():
                user = client.state.session.user

    A ready-made *transport* (e.g. a test double) can be passed instead of
    an aiohttp session.
    """

    def __init__(
        self,
        config: RideshareConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        state: AppState | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._config = config or RideshareConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self._state = state or AppState.create(self._config, scheduler=scheduler)

    @property
    def config(self) -> RideshareConfig:
        return self._config

    @property
    def state(self) -> AppState:
        return self._state

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RideshareClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self._state.popups.clear()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def fetch_user(self) -> UserData:
        """Ask the server for the logged-in user; raises on failure."""
        return await fetch_current_user(self._require_transport(), self._config.auth_path)

    async def refresh_session(self) -> bool:
        """Sync the session store with the server.

        A 200 answer stores the user.  Any other answer, a malformed body or
        a transport failure clears the user.  Returns whether a user is set.
        """
        try:
            user = await self.fetch_user()
        except RideshareError as exc:
            _logger.warning("Session check failed: %s", exc)
            self._state.session.clear_user()
            return False
        self._state.session.set_user(user)
        return True

    async def resolve_navigation(self, path: str) -> str:
        """Check the session and return *path* or the login view.

        The session is refreshed on every navigation, including to the login
        view, so the store never lags behind the server.
        """
        authenticated = await self.refresh_session()
        return guard_route(path, authenticated=authenticated, login_path=self._config.login_path)

    def logout(self) -> None:
        """Drop the session user along with every user-scoped store."""
        self._state.reset()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise RideshareError("Client not initialized. Use 'async with RideshareClient(...) as client:'")
        return self._transport
