from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from ridesharing._api.auth import parse_user_response
from ridesharing.client import RideshareClient
from ridesharing.config import RideshareConfig
from ridesharing.exceptions import (
    RideshareApiError,
    RideshareAuthenticationError,
    RideshareError,
    RideshareTransportError,
)
from ridesharing.models import AuthType, UserData

USER_PAYLOAD: dict[str, Any] = {
    "type": "CSH",
    "id": "csh-42",
    "given_name": "Linus",
    "family_name": "Torvalds",
    "preferred_username": "linus",
    "email": "linus@example.com",
}


@dataclass
class FakeTransport:
    status: int = 200
    body: Any = field(default_factory=lambda: dict(USER_PAYLOAD))
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def get_json(self, path: str) -> tuple[int, Any]:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.status, self.body


def _client(transport: FakeTransport) -> RideshareClient:
    return RideshareClient(RideshareConfig(), transport=transport)


@pytest.mark.asyncio
async def test_refresh_session_stores_user() -> None:
    transport = FakeTransport()
    client = _client(transport)

    assert await client.refresh_session() is True

    user = client.state.session.user
    assert user is not None
    assert user.type is AuthType.CSH
    assert user.id == "csh-42"
    assert transport.calls == ["/api/v1/auth/"]


@pytest.mark.asyncio
async def test_non_200_clears_user() -> None:
    client = _client(FakeTransport(status=401, body=None))
    client.state.session.set_user(UserData.model_validate(USER_PAYLOAD))

    assert await client.refresh_session() is False
    assert client.state.session.user is None


@pytest.mark.asyncio
async def test_transport_failure_clears_user() -> None:
    client = _client(FakeTransport(error=RideshareTransportError("boom", endpoint="/api/v1/auth/")))
    client.state.session.set_user(UserData.model_validate(USER_PAYLOAD))

    assert await client.refresh_session() is False
    assert client.state.session.user is None


@pytest.mark.asyncio
async def test_malformed_user_record_clears_user() -> None:
    client = _client(FakeTransport(body={"id": "no-names"}))
    assert await client.refresh_session() is False
    assert not client.state.session.is_authenticated


@pytest.mark.asyncio
async def test_fetch_user_raises_authentication_error() -> None:
    client = _client(FakeTransport(status=403, body=None))
    with pytest.raises(RideshareAuthenticationError) as excinfo:
        await client.fetch_user()
    assert excinfo.value.status_code == 403
    assert excinfo.value.endpoint == "/api/v1/auth/"


@pytest.mark.asyncio
async def test_fetch_user_requires_initialized_client() -> None:
    client = RideshareClient(RideshareConfig())
    with pytest.raises(RideshareError):
        await client.fetch_user()


@pytest.mark.asyncio
async def test_resolve_navigation_redirects_when_unauthenticated() -> None:
    client = _client(FakeTransport(status=401, body=None))
    assert await client.resolve_navigation("/history") == "/login"
    assert await client.resolve_navigation("/login") == "/login"


@pytest.mark.asyncio
async def test_resolve_navigation_allows_authenticated() -> None:
    transport = FakeTransport()
    client = _client(transport)
    assert await client.resolve_navigation("/history") == "/history"
    assert await client.resolve_navigation("/login") == "/login"
    # Every navigation re-checks the session.
    assert len(transport.calls) == 2


@pytest.mark.asyncio
async def test_context_manager_keeps_external_transport() -> None:
    transport = FakeTransport()
    async with RideshareClient(RideshareConfig(), transport=transport) as client:
        await client.refresh_session()
    assert await client.refresh_session() is True


def test_logout_resets_state() -> None:
    client = _client(FakeTransport())
    client.state.session.set_user(UserData.model_validate(USER_PAYLOAD))
    client.logout()
    assert client.state.session.user is None


class TestParseUserResponse:
    def test_non_object_body(self) -> None:
        with pytest.raises(RideshareApiError):
            parse_user_response(200, ["not", "a", "dict"], endpoint="/auth")

    def test_authentication_error_is_api_error(self) -> None:
        with pytest.raises(RideshareApiError):
            parse_user_response(500, None, endpoint="/auth")

    def test_valid(self) -> None:
        user = parse_user_response(200, USER_PAYLOAD, endpoint="/auth")
        assert user.display_name == "Linus Torvalds"
