"""Validation engine for proposed events and cars.

Both functions are pure: they never raise and never mutate their inputs.
Each returns the list of human-readable violations in check order; an
empty list means the caller may go ahead with the store mutation.

Time inputs are the raw strings of a form (ISO 8601) or datetimes.  They go
through the same ``parse_timestamp`` as the models, so a naive value is
UTC.  A value that cannot be parsed compares as neither earlier nor later than anything,
so every ordering check that depends on it is vacuously false and only the
"fill in" check reports it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from typing import Protocol

from ridesharing.models._base import parse_timestamp
from ridesharing.models.event import Car
from ridesharing.models.user import UserStub

MSG_EVENT_FIELDS_MISSING = "Please fill in all fields."
MSG_EVENT_START_AFTER_END = "Start date cannot be after end."
MSG_EVENT_IN_PAST = "Event cannot be in the past."

MSG_CAR_TIMES_MISSING = "All times must be filled in."
MSG_CAR_RETURN_BEFORE_DEPARTURE = "Return time cannot be before departure."
MSG_CAR_DEPARTS_IN_PAST = "Car cannot leave in the past."
MSG_CAR_NEGATIVE_CAPACITY = "Capacity must be greater than or equal to 0."
MSG_CAR_OVER_CAPACITY = "You have too many riders for your capacity."
MSG_CAR_DRIVER_IS_RIDER = "You cannot be a rider in your own car."
MSG_CAR_RIDER_TAKEN = "{name} is already in another car or is a driver."


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


TimeInput = str | datetime


def _now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(UTC)
    return parse_timestamp(now)


def _is_empty(value: TimeInput | None) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and len(value) == 0


def parse_time(value: TimeInput | None) -> datetime | None:
    """Parse a form value, or return ``None`` when it is not a valid time.

    Uses the same rule as the models' ``Timestamp`` fields, so a naive
    value means UTC in both places.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        parsed = parse_timestamp(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return parsed if isinstance(parsed, datetime) else None


def _before(left: datetime | None, right: datetime | None) -> bool:
    """``left < right``; false whenever either side is unparseable."""
    if left is None or right is None:
        return False
    return left < right


def validate_event(
    name: str,
    location: str,
    start: TimeInput,
    end: TimeInput,
    *,
    now: datetime | None = None,
) -> list[str]:
    """Check a proposed event and return its violations."""
    current = _now(now)
    out: list[str] = []

    if not name or not location or _is_empty(start) or _is_empty(end):
        out.append(MSG_EVENT_FIELDS_MISSING)

    start_at = parse_time(start)
    end_at = parse_time(end)

    if _before(end_at, start_at):
        out.append(MSG_EVENT_START_AFTER_END)
    if _before(end_at, current):
        out.append(MSG_EVENT_IN_PAST)
    return out


def _member_ids(cars: Iterable[Car]) -> set[str]:
    return {member.id for car in cars for member in car.members()}


def validate_car(
    user: _HasId,
    departure_time: TimeInput,
    return_time: TimeInput,
    max_capacity: int,
    riders: Sequence[UserStub],
    other_cars: Iterable[Car],
    *,
    now: datetime | None = None,
) -> list[str]:
    """Check a proposed car driven by *user* and return its violations.

    *other_cars* are the remaining cars of the same event; the car being
    edited must not be part of it.
    """
    current = _now(now)
    out: list[str] = []

    if _is_empty(departure_time) or _is_empty(return_time):
        out.append(MSG_CAR_TIMES_MISSING)

    departs_at = parse_time(departure_time)
    returns_at = parse_time(return_time)

    if _before(returns_at, departs_at):
        out.append(MSG_CAR_RETURN_BEFORE_DEPARTURE)
    if _before(departs_at, current):
        out.append(MSG_CAR_DEPARTS_IN_PAST)
    if max_capacity < 0:
        out.append(MSG_CAR_NEGATIVE_CAPACITY)
    if len(riders) > max_capacity:
        out.append(MSG_CAR_OVER_CAPACITY)
    if any(rider.id == user.id for rider in riders):
        out.append(MSG_CAR_DRIVER_IS_RIDER)

    taken = _member_ids(other_cars)
    for rider in riders:
        if rider.id in taken:
            out.append(MSG_CAR_RIDER_TAKEN.format(name=rider.name))
    return out
