"""Synchronous change notification shared by the stores."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Observable")


class Observable(Generic[S]):
    """Base class for stores whose consumers re-render on change.

    Listeners run synchronously, after the store has re-established its
    invariants, and always in subscription order.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[S], None]] = []

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register *listener* and return a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            # Unsubscribing twice is harmless.
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)  # type: ignore[arg-type]
            except Exception:
                _logger.exception("%s listener %r failed", type(self).__name__, listener)
