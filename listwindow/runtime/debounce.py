"""Single-timer debounce for leaving the in-motion state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

from listwindow.api.host import TimerPort

logger = logging.getLogger(__name__)


class DebounceController:
    """Owns at most one pending timer; arming always cancels the previous one."""

    def __init__(self, timer: TimerPort, interval_ms: float, on_elapsed: Callable[[], None]) -> None:
        self._timer = timer
        self._interval_ms = float(interval_ms)
        self._on_elapsed = on_elapsed
        self._handle: Hashable | None = None

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arm(self) -> None:
        """Restart the debounce interval."""
        self.cancel()
        self._handle = self._timer.schedule(self._fire, self._interval_ms)

    def cancel(self) -> None:
        """Cancel the pending timer, if any."""
        handle = self._handle
        if handle is None:
            return
        self._handle = None
        self._timer.cancel(handle)

    def _fire(self) -> None:
        self._handle = None
        logger.debug("debounce_elapsed interval_ms=%s", self._interval_ms)
        self._on_elapsed()


__all__ = ["DebounceController"]
