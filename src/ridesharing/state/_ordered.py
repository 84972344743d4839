"""Ordered container that keeps events sorted by start time.

Events are mutable, so a start time may change in place after insertion.
Every insert therefore appends and re-sorts the whole list with Python's
stable sort, which keeps equal start times in insertion order and repairs
any order broken by such an edit.  On an already sorted list this is close
to O(n).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime

from ridesharing.models.event import Event


def _start_key(event: Event) -> datetime:
    return event.start_time


class EventTimeline:
    """Sequence of events, always ascending by ``start_time``.

    Membership and removal are by object identity; two distinct events
    with equal fields are different entries.
    """

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._items: list[Event] = sorted(events, key=_start_key)

    def insert(self, event: Event) -> None:
        self._items.append(event)
        self._items.sort(key=_start_key)

    def replace(self, events: Iterable[Event]) -> None:
        self._items = sorted(events, key=_start_key)

    def index_of(self, event: Event) -> int:
        """Position of *event* by identity, or ``-1``."""
        for index, item in enumerate(self._items):
            if item is event:
                return index
        return -1

    def remove(self, event: Event) -> bool:
        index = self.index_of(event)
        if index < 0:
            return False
        del self._items[index]
        return True

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> tuple[Event, ...]:
        return tuple(self._items)

    def __contains__(self, event: object) -> bool:
        return any(item is event for item in self._items)

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Event:
        return self._items[index]
