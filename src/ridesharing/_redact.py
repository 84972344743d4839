"""Helpers for safe debug logging.

User records carry personal data (e-mail, avatar URL) and the auth layer
handles cookies.  ``redact_for_log`` masks those before anything is logged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "email",
        "picture",
        "token",
        "authorization",
        "cookie",
        "set-cookie",
        "session",
    }
)

_MAX_DEPTH = 16


def redact_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a copy of *value* with personal fields replaced by ``<redacted>``.

    Pydantic models are dumped first, so a ``UserData`` can be passed as-is.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if isinstance(value, Mapping):
        return {
            str(key): "<redacted>"
            if str(key).lower() in _SENSITIVE_KEYS
            else redact_for_log(item, max_string=max_string, _depth=_depth + 1)
            for key, item in value.items()
        }

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]

    return repr(value)
