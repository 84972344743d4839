"""Notification queue of short-lived, self-expiring popups."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ridesharing.config import DEFAULT_POPUP_TTL
from ridesharing.models.popup import PopupMessage, PopupType
from ridesharing.state._observable import Observable

_logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Structural interface for deferred callbacks.

    ``asyncio.AbstractEventLoop`` satisfies it; tests pass a fake clock.
    """

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


@dataclass(slots=True)
class _PendingPopup:
    message: PopupMessage
    expiry: TimerHandle


def _new_uuid() -> str:
    return str(uuid.uuid4())


class PopupStore(Observable["PopupStore"]):
    """Popups keyed by a generated uuid, kept in insertion order.

    Every popup is removed exactly once: by its expiry timer or by
    :meth:`delete_popup`, whichever runs first.  A manual delete cancels the
    pending timer.
    """

    def __init__(
        self,
        *,
        ttl: float = DEFAULT_POPUP_TTL,
        scheduler: Scheduler | None = None,
        id_factory: Callable[[], str] = _new_uuid,
    ) -> None:
        super().__init__()
        self._ttl = ttl
        self._scheduler = scheduler
        self._id_factory = id_factory
        self._entries: OrderedDict[str, _PendingPopup] = OrderedDict()

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def popups(self) -> list[PopupMessage]:
        """Current messages, oldest first."""
        return [entry.message for entry in self._entries.values()]

    def __contains__(self, popup_id: object) -> bool:
        return popup_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _get_scheduler(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        # Raises RuntimeError outside a running loop.
        return asyncio.get_running_loop()

    def add_popup(self, alert_type: PopupType | str, text: str) -> PopupMessage:
        """Show a popup that removes itself after ``ttl`` seconds."""
        popup_id = self._id_factory()
        while popup_id in self._entries:
            popup_id = self._id_factory()

        message = PopupMessage(uuid=popup_id, alert_type=PopupType(alert_type), text=text)
        expiry = self._get_scheduler().call_later(self._ttl, self._expire, popup_id)
        self._entries[popup_id] = _PendingPopup(message=message, expiry=expiry)
        _logger.debug("Popup %s added (%s)", popup_id, message.alert_type)
        self._notify()
        return message

    def delete_popup(self, popup_id: str) -> bool:
        """Remove a popup and cancel its timer.

        Returns ``False`` when the popup is already gone; that is not an
        error since the timer and a manual dismissal may race.
        """
        entry = self._entries.pop(popup_id, None)
        if entry is None:
            return False
        entry.expiry.cancel()
        _logger.debug("Popup %s dismissed", popup_id)
        self._notify()
        return True

    def _expire(self, popup_id: str) -> None:
        if self._entries.pop(popup_id, None) is None:
            return
        _logger.debug("Popup %s expired", popup_id)
        self._notify()

    def clear(self) -> None:
        """Remove every popup and cancel all pending timers."""
        if not self._entries:
            return
        for entry in self._entries.values():
            entry.expiry.cancel()
        self._entries.clear()
        self._notify()

    reset = clear
