from __future__ import annotations

from ridesharing._redact import redact_for_log
from ridesharing.models import AuthType, UserData


def test_redact_for_log_masks_personal_fields() -> None:
    payload = {
        "id": "u1",
        "email": "someone@example.com",
        "nested": [{"Picture": "https://example.com/a.png", "name": "x"}],
        "Cookie": "session=abc",
    }

    redacted = redact_for_log(payload)

    assert redacted["id"] == "u1"
    assert redacted["email"] == "<redacted>"
    assert redacted["Cookie"] == "<redacted>"
    assert redacted["nested"][0] == {"Picture": "<redacted>", "name": "x"}


def test_redact_for_log_dumps_models() -> None:
    user = UserData(
        type=AuthType.GOOGLE,
        id="g-1",
        given_name="Ada",
        family_name="Lovelace",
        email="ada@example.com",
    )
    redacted = redact_for_log(user)
    assert redacted["email"] == "<redacted>"
    assert redacted["given_name"] == "Ada"


def test_redact_for_log_truncates_long_strings() -> None:
    redacted = redact_for_log({"value": "x" * 600}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]
