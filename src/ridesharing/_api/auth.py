"""Auth endpoint.

Endpoint:
  - GET /api/v1/auth/

Answers 200 with the logged-in user's record, anything else when the
browser session is not authenticated.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ridesharing._redact import redact_for_log
from ridesharing._transport import Transport
from ridesharing.exceptions import RideshareApiError, RideshareAuthenticationError
from ridesharing.models.user import UserData

_logger = logging.getLogger(__name__)


def parse_user_response(status: int, body: Any, *, endpoint: str) -> UserData:
    """Turn the auth endpoint's answer into a :class:`UserData`.

    Raises
    ------
    RideshareAuthenticationError
        On any non-200 status.
    RideshareApiError
        When a 200 answer does not carry a user record.
    """
    if status != 200:
        raise RideshareAuthenticationError(
            f"Not authenticated: HTTP {status}",
            status_code=status,
            endpoint=endpoint,
        )
    if not isinstance(body, dict):
        raise RideshareApiError("Auth response is not a JSON object", status_code=status, endpoint=endpoint)

    _logger.debug("Auth response parsed=%s", redact_for_log(body))
    try:
        return UserData.model_validate(body)
    except ValidationError as exc:
        raise RideshareApiError(
            f"Auth response is not a user record: {exc.error_count()} error(s)",
            status_code=status,
            endpoint=endpoint,
        ) from exc


async def fetch_current_user(transport: Transport, auth_path: str) -> UserData:
    """Ask the server who is logged in."""
    status, body = await transport.get_json(auth_path)
    return parse_user_response(status, body, endpoint=auth_path)
