"""PyQt6 implementations of the engine timer and scroll-target ports."""

from __future__ import annotations

from collections.abc import Callable

from listwindow.api.host import TimerCallback
from listwindow.api.types import ScrollObservation

try:
    from PyQt6.QtCore import QTimer
    from PyQt6.QtWidgets import QAbstractScrollArea, QScrollBar
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt adapters. Install dependency 'PyQt6'.") from exc


class QtTimerPort:
    """One-shot QTimer per scheduled callback; requires a running Qt event loop."""

    def __init__(self) -> None:
        self._next_handle = 1
        self._timers: dict[int, QTimer] = {}

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def schedule(self, callback: TimerCallback, delay_ms: float) -> int:
        handle = self._next_handle
        self._next_handle += 1
        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(handle, callback))
        self._timers[handle] = timer
        timer.start(max(0, int(round(delay_ms))))
        return handle

    def cancel(self, handle: object) -> None:
        if not isinstance(handle, int):
            return
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _fire(self, handle: int, callback: TimerCallback) -> None:
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        timer.deleteLater()
        callback()


def _scroll_bar(area: QAbstractScrollArea, layout: str) -> QScrollBar:
    if layout == "horizontal":
        return area.horizontalScrollBar()
    return area.verticalScrollBar()


class QtScrollTarget:
    """Scroll target backed by a QAbstractScrollArea's scroll bars.

    Scroll bars hold integers, so a fractional committed offset is written
    rounded. While the bar still shows that rounded value, observations
    report the committed float so the engine recognizes its own write.
    """

    def __init__(self, area: QAbstractScrollArea) -> None:
        self._area = area
        self._written: dict[str, tuple[int, float]] = {}

    def write_offset(self, layout: str, offset: float) -> None:
        value = int(round(offset))
        self._written[layout] = (value, float(offset))
        _scroll_bar(self._area, layout).setValue(value)

    def content_extent(self, layout: str) -> float | None:
        bar = _scroll_bar(self._area, layout)
        # Qt documents content length as range plus one page.
        return float(bar.maximum() - bar.minimum() + bar.pageStep())

    def observation(self, layout: str) -> ScrollObservation:
        bar = _scroll_bar(self._area, layout)
        return ScrollObservation(
            raw_offset=self._raw_offset(layout, bar.value()),
            viewport_extent=float(bar.pageStep()),
            content_extent=float(bar.maximum() - bar.minimum() + bar.pageStep()),
        )

    def connect(self, layout: str, on_scroll: Callable[[ScrollObservation], None]) -> None:
        """Forward every scroll-bar value change as an observation."""
        _scroll_bar(self._area, layout).valueChanged.connect(
            lambda _value: on_scroll(self.observation(layout))
        )

    def _raw_offset(self, layout: str, value: int) -> float:
        written = self._written.get(layout)
        if written is not None and written[0] == value:
            return written[1]
        self._written.pop(layout, None)
        return float(value)


__all__ = ["QtScrollTarget", "QtTimerPort"]
