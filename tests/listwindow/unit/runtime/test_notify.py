from __future__ import annotations

from itertools import count

from listwindow.api.types import RenderWindow
from listwindow.runtime.notify import MemoizedNotifier


def _notifier() -> MemoizedNotifier[RenderWindow]:
    ids = count(1)
    return MemoizedNotifier(lambda: next(ids))


def test_repeated_structurally_equal_values_are_delivered_once() -> None:
    notifier = _notifier()
    seen: list[RenderWindow] = []
    notifier.subscribe(seen.append)

    assert notifier.publish(RenderWindow(0, 5, 0, 3)) == 1
    assert notifier.publish(RenderWindow(0, 5, 0, 3)) == 0
    assert notifier.publish(RenderWindow(1, 6, 1, 4)) == 1
    assert notifier.publish(RenderWindow(0, 5, 0, 3)) == 1
    assert [window.as_tuple() for window in seen] == [(0, 5, 0, 3), (1, 6, 1, 4), (0, 5, 0, 3)]


def test_each_listener_tracks_its_own_last_value() -> None:
    notifier = _notifier()
    first: list[RenderWindow] = []
    second: list[RenderWindow] = []
    notifier.subscribe(first.append)
    notifier.publish(RenderWindow(0, 1, 0, 1))
    notifier.subscribe(second.append)

    assert notifier.publish(RenderWindow(0, 1, 0, 1)) == 1
    assert len(first) == 1
    assert len(second) == 1


def test_unsubscribe_stops_delivery() -> None:
    notifier = _notifier()
    seen: list[RenderWindow] = []
    subscription = notifier.subscribe(seen.append)
    assert notifier.unsubscribe(subscription)
    assert not notifier.unsubscribe(subscription)
    assert notifier.publish(RenderWindow(0, 1, 0, 1)) == 0
    assert seen == []


def test_publish_stops_once_value_goes_stale() -> None:
    notifier = _notifier()
    seen: list[str] = []
    current = {"value": True}

    def first(window: RenderWindow) -> None:
        seen.append("first")
        current["value"] = False

    notifier.subscribe(first)
    notifier.subscribe(lambda window: seen.append("second"))

    notifier.publish(RenderWindow(0, 1, 0, 1), still_current=lambda: current["value"])
    assert seen == ["first"]
