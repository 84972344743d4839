"""Domain models."""

from ridesharing.models._base import RideshareModel, Timestamp, parse_timestamp
from ridesharing.models.event import Car, Event
from ridesharing.models.popup import PopupMessage, PopupType
from ridesharing.models.user import AuthType, UserData, UserStub

__all__ = [
    "AuthType",
    "Car",
    "Event",
    "PopupMessage",
    "PopupType",
    "RideshareModel",
    "Timestamp",
    "UserData",
    "UserStub",
    "parse_timestamp",
]
