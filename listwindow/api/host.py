"""Host collaborator ports consumed by the windowing engine."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Protocol

from listwindow.api.types import Geometry

type TimerCallback = Callable[[], None]
type RealizeFn = Callable[[int, Geometry, bool | None], object]


class TimerPort(Protocol):
    """Schedule/cancel primitive used for the is-scrolling debounce."""

    def schedule(self, callback: TimerCallback, delay_ms: float) -> Hashable:
        """Run `callback` once after `delay_ms` and return a cancel handle."""

    def cancel(self, handle: Hashable) -> None:
        """Cancel a pending callback; unknown or fired handles are ignored."""


class ScrollTarget(Protocol):
    """Native scroll surface the engine writes committed offsets back to."""

    def write_offset(self, layout: str, offset: float) -> None:
        """Force the native scroll position along the primary axis."""

    def content_extent(self, layout: str) -> float | None:
        """Return the rendered content extent, or None when not yet known."""


__all__ = ["RealizeFn", "ScrollTarget", "TimerCallback", "TimerPort"]
