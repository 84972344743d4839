"""Base model and timestamp handling shared by the domain models.

Every domain model inherits from :class:`RideshareModel` which provides:

* ``alias_generator=to_camel`` so both the server's snake_case keys and
  camelCase keys (``startTime``) populate the same field.
* ``extra="ignore"`` so additional server fields never break parsing.

Timestamps are declared as :data:`Timestamp`, which coerces ISO-8601
strings and epoch numbers (seconds **or** milliseconds) to timezone-aware
UTC datetimes.  Naive values are taken as UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def parse_timestamp(value: Any) -> Any:
    """Coerce *value* to an aware UTC datetime.

    Values that are neither datetimes, numbers nor strings are passed
    through untouched so pydantic reports the validation error.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        seconds = value / 1000 if value >= _MS_THRESHOLD else value
        return datetime.fromtimestamp(seconds, tz=UTC)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        value = datetime.fromisoformat(text)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return value


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces ISO strings and epoch numbers to UTC datetimes."""


class RideshareModel(BaseModel):
    """Base for all domain models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
