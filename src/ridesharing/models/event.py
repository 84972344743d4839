"""Event and car models.

Both models are mutable: the event store resets ``Event.cars`` when an
event is selected, and cars are appended to the selected event in place.
Stores compare these objects by identity, never by value.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from ridesharing.models._base import RideshareModel, Timestamp
from ridesharing.models.user import UserStub


class Car(RideshareModel):
    """A ride with one driver, bounded capacity and its own travel window."""

    id: int
    driver: UserStub
    riders: list[UserStub] = Field(default_factory=list)
    max_capacity: int = Field(default=0, ge=0)
    departure_time: Timestamp
    return_time: Timestamp
    comment: str = ""

    @field_validator("comment", mode="before")
    @classmethod
    def _none_comment(cls, value: object) -> object:
        return "" if value is None else value

    def members(self) -> list[UserStub]:
        """Driver first, then riders in order."""
        return [self.driver, *self.riders]

    @property
    def seats_left(self) -> int:
        """Free seats; never negative, even when riders exceed capacity."""
        return max(self.max_capacity - len(self.riders), 0)


class Event(RideshareModel):
    """A scheduled occasion with a time window that owns zero or more cars."""

    id: int
    name: str
    location: str
    start_time: Timestamp
    end_time: Timestamp
    creator: UserStub
    cars: list[Car] = Field(default_factory=list)
