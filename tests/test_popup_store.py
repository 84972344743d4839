from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from ridesharing.models import PopupType
from ridesharing.state.popups import PopupStore


@dataclass
class _FakeHandle:
    when: float
    callback: Callable[..., Any]
    args: tuple[Any, ...]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Virtual clock: callbacks only run when the test advances time."""

    now: float = 0.0
    handles: list[_FakeHandle] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _FakeHandle:
        handle = _FakeHandle(when=self.now + delay, callback=callback, args=args)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in sorted(self.handles, key=lambda h: h.when):
            if handle.cancelled or handle.fired or handle.when > self.now:
                continue
            handle.fired = True
            handle.callback(*handle.args)


def _store(scheduler: FakeScheduler, **kwargs: Any) -> PopupStore:
    return PopupStore(scheduler=scheduler, **kwargs)


def test_popup_expires_after_ttl() -> None:
    clock = FakeScheduler()
    store = _store(clock)

    message = store.add_popup(PopupType.SUCCESS, "Car created")

    assert store.popups == [message]
    assert clock.handles[0].when == 5.0
    clock.advance(4.9)
    assert message.uuid in store
    clock.advance(0.1)
    assert store.popups == []


def test_popups_keep_insertion_order() -> None:
    store = _store(FakeScheduler())
    texts = ["first", "second", "third"]
    for text in texts:
        store.add_popup("Default", text)
    assert [popup.text for popup in store.popups] == texts


def test_each_popup_gets_unique_id() -> None:
    ids = iter(["a", "a", "b"])
    store = _store(FakeScheduler(), id_factory=lambda: next(ids))
    first = store.add_popup(PopupType.WARNING, "one")
    second = store.add_popup(PopupType.WARNING, "two")
    assert (first.uuid, second.uuid) == ("a", "b")


def test_double_delete_is_harmless() -> None:
    store = _store(FakeScheduler())
    message = store.add_popup(PopupType.DANGER, "Oops")

    assert store.delete_popup(message.uuid) is True
    assert store.delete_popup(message.uuid) is False
    assert store.delete_popup("never-existed") is False


def test_manual_delete_cancels_timer() -> None:
    clock = FakeScheduler()
    store = _store(clock)
    notifications: list[int] = []
    store.subscribe(lambda s: notifications.append(len(s)))

    message = store.add_popup(PopupType.DANGER, "Oops")
    store.delete_popup(message.uuid)
    clock.advance(10)

    assert clock.handles[0].cancelled
    assert not clock.handles[0].fired
    assert notifications == [1, 0]


def test_timer_after_manual_delete_is_noop() -> None:
    clock = FakeScheduler()
    store = _store(clock)
    keep = store.add_popup(PopupType.DEFAULT, "keep")
    gone = store.add_popup(PopupType.DEFAULT, "gone")
    store.delete_popup(gone.uuid)

    # Simulate the race where the timer fires anyway.
    handle = clock.handles[1]
    handle.callback(*handle.args)

    assert store.popups == [keep]


def test_custom_ttl() -> None:
    clock = FakeScheduler()
    store = _store(clock, ttl=1.5)
    store.add_popup(PopupType.DEFAULT, "short")
    clock.advance(1.5)
    assert len(store) == 0


def test_clear_cancels_all_timers() -> None:
    clock = FakeScheduler()
    store = _store(clock)
    store.add_popup(PopupType.DEFAULT, "a")
    store.add_popup(PopupType.DEFAULT, "b")

    store.clear()

    assert store.popups == []
    assert all(handle.cancelled for handle in clock.handles)


def test_requires_running_loop_without_scheduler() -> None:
    store = PopupStore()
    with pytest.raises(RuntimeError):
        store.add_popup(PopupType.DEFAULT, "no loop")
    assert store.popups == []


@pytest.mark.asyncio
async def test_expires_on_real_event_loop() -> None:
    store = PopupStore(ttl=0.01)
    message = store.add_popup(PopupType.SUCCESS, "saved")
    assert message.uuid in store

    await asyncio.sleep(0.05)

    assert store.popups == []
    assert store.delete_popup(message.uuid) is False
