"""Change listeners guarded by their last delivered value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from listwindow.api.types import Subscription

_UNSET = object()


@dataclass(slots=True)
class _Listener[TValue]:
    handler: Callable[[TValue], None]
    last_delivered: object = _UNSET


class MemoizedNotifier[TValue]:
    """Fan-out that never hands a listener the same value twice in a row.

    Values are compared structurally (`==`), so frozen dataclasses built from
    the same scalars count as repeats.
    """

    def __init__(self, id_source: Callable[[], int]) -> None:
        self._id_source = id_source
        self._listeners: dict[int, _Listener[TValue]] = {}

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, handler: Callable[[TValue], None]) -> Subscription:
        sub_id = self._id_source()
        self._listeners[sub_id] = _Listener(handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> bool:
        return self._listeners.pop(subscription.id, None) is not None

    def publish(self, value: TValue, *, still_current: Callable[[], bool] | None = None) -> int:
        """Deliver `value` to every listener that has not seen it yet.

        `still_current` is checked after each delivery; once it returns False
        a newer value has already been published from inside a handler and
        the remaining listeners must not receive this stale one.
        """
        invoked = 0
        for sub_id, listener in tuple(self._listeners.items()):
            if sub_id not in self._listeners or listener.last_delivered == value:
                continue
            listener.last_delivered = value
            listener.handler(value)
            invoked += 1
            if still_current is not None and not still_current():
                break
        return invoked


__all__ = ["MemoizedNotifier"]
