"""State/store layer.

The stores are plain owned objects.  An application builds one
:class:`AppState` at start-up and hands it (or the individual stores) to
whatever needs them; nothing here is a module-level singleton.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ridesharing.config import RideshareConfig
from ridesharing.state.events import EventStore
from ridesharing.state.popups import PopupStore, Scheduler
from ridesharing.state.session import SessionStore


@dataclass
class AppState:
    """The three stores of one client instance."""

    events: EventStore = field(default_factory=EventStore)
    popups: PopupStore = field(default_factory=PopupStore)
    session: SessionStore = field(default_factory=SessionStore)

    @classmethod
    def create(cls, config: RideshareConfig, *, scheduler: Scheduler | None = None) -> AppState:
        return cls(popups=PopupStore(ttl=config.popup_ttl, scheduler=scheduler))

    def reset(self) -> None:
        """Forget everything tied to the logged-in user."""
        self.session.reset()
        self.events.reset()
        self.popups.reset()


__all__ = ["AppState", "EventStore", "PopupStore", "Scheduler", "SessionStore"]
