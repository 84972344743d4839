"""ridesharing - client-side core for coordinating shared rides to events."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ridesharing")
except PackageNotFoundError:
    __version__ = "0+local"
from ridesharing.client import RideshareClient
from ridesharing.config import RideshareConfig
from ridesharing.exceptions import (
    RideshareApiError,
    RideshareAuthenticationError,
    RideshareConfigError,
    RideshareError,
    RideshareTransportError,
)
from ridesharing.models import (
    AuthType,
    Car,
    Event,
    PopupMessage,
    PopupType,
    UserData,
    UserStub,
)
from ridesharing.routing import guard_route
from ridesharing.state import AppState, EventStore, PopupStore, SessionStore
from ridesharing.validators import validate_car, validate_event

__all__ = [
    "__version__",
    "AppState",
    "AuthType",
    "Car",
    "Event",
    "EventStore",
    "PopupMessage",
    "PopupStore",
    "PopupType",
    "RideshareApiError",
    "RideshareAuthenticationError",
    "RideshareClient",
    "RideshareConfig",
    "RideshareConfigError",
    "RideshareError",
    "RideshareTransportError",
    "SessionStore",
    "UserData",
    "UserStub",
    "guard_route",
    "validate_car",
    "validate_event",
]
