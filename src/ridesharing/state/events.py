"""Event collection: the sorted event list plus the selected event's cars.

Mutators never validate; callers run :mod:`ridesharing.validators` first
and only mutate on an empty violation list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ridesharing.models.event import Car, Event
from ridesharing.state._observable import Observable
from ridesharing.state._ordered import EventTimeline

_logger = logging.getLogger(__name__)


def _index_by_identity(cars: list[Car], car: Car) -> int:
    for index, item in enumerate(cars):
        if item is car:
            return index
    return -1


class EventStore(Observable["EventStore"]):
    """Owns the authoritative, always-sorted list of events."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        super().__init__()
        self._timeline = EventTimeline(events)
        self._selected: Event | None = None

    @property
    def events(self) -> tuple[Event, ...]:
        """Events ascending by start time (ties in insertion order)."""
        return self._timeline.snapshot()

    @property
    def selected_event(self) -> Event | None:
        return self._selected

    def __iter__(self) -> Iterator[Event]:
        return iter(self._timeline)

    def __len__(self) -> int:
        return len(self._timeline)

    def add_event(self, event: Event) -> None:
        """Insert *event* in start-time order. Duplicates are allowed."""
        self._timeline.insert(event)
        _logger.debug("Added event id=%s (%d events)", event.id, len(self._timeline))
        self._notify()

    def set_events(self, events: Iterable[Event]) -> None:
        """Replace every event, then sort."""
        self._timeline.replace(events)
        _logger.debug("Loaded %d events", len(self._timeline))
        self._notify()

    def remove_event(self, event: Event | None) -> None:
        """Remove *event* by identity; absent or ``None`` is a no-op.

        The selection is left alone even when it points at the removed
        event.
        """
        if event is None:
            return
        if self._timeline.remove(event):
            _logger.debug("Removed event id=%s", event.id)
            self._notify()

    def select_event(self, event: Event | None) -> None:
        """Make *event* the selection and drop whatever cars it carried.

        Re-selecting the very same object is a no-op.  An equal but distinct
        object counts as a new selection and has its cars cleared.
        """
        if event is self._selected:
            return
        self._selected = event
        if event is not None:
            event.cars = []
            _logger.debug("Selected event id=%s", event.id)
        self._notify()

    def add_car(self, car: Car) -> None:
        """Append *car* to the selected event; no-op without a selection."""
        if self._selected is None:
            return
        self._selected.cars.append(car)
        self._notify()

    def remove_car(self, car: Car) -> None:
        """Remove *car* from the selected event by identity; absent is a no-op."""
        if self._selected is None:
            return
        index = _index_by_identity(self._selected.cars, car)
        if index < 0:
            return
        del self._selected.cars[index]
        self._notify()

    def other_cars(self, car: Car | None = None) -> list[Car]:
        """Cars of the selected event except *car* (by identity).

        This is the ``other_cars`` argument :func:`validate_car` expects when
        creating (``car=None``) or editing a car.
        """
        if self._selected is None:
            return []
        return [item for item in self._selected.cars if item is not car]

    def reset(self) -> None:
        """Drop all events and the selection (used on logout)."""
        self._timeline.clear()
        self._selected = None
        self._notify()
