"""Manual-clock one-shot timer implementing the engine timer port."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush

from listwindow.api.host import TimerCallback


@dataclass(slots=True)
class _Task:
    task_id: int
    due_ms: float
    callback: TimerCallback
    cancelled: bool = False


class ManualTimer:
    """Deterministic timer whose clock only moves when the host advances it.

    Headless hosts drive it from their own frame loop; tests drive it
    directly with `advance`.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def pending_count(self) -> int:
        """Return count of scheduled callbacks that have neither fired nor been cancelled."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def schedule(self, callback: TimerCallback, delay_ms: float) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_ms = self._now_ms + delay_ms
        self._tasks[task_id] = _Task(task_id=task_id, due_ms=due_ms, callback=callback)
        heappush(self._queue, (due_ms, task_id))
        return task_id

    def cancel(self, handle: object) -> None:
        """Cancel a scheduled callback if it is still pending."""
        if not isinstance(handle, int):
            return
        task = self._tasks.get(handle)
        if task is not None:
            task.cancelled = True

    def advance(self, delta_ms: float) -> int:
        """Advance the clock and run due callbacks."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: float) -> int:
        """Run callbacks due at or before `now_ms`."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed


__all__ = ["ManualTimer"]
