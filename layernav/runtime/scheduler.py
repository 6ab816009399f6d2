"""Deferred one-shot callback scheduler for settle delays."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Protocol

DeferredCallback = Callable[[], None]


class Deferrer(Protocol):
    """Minimal deferral surface used by the layer controller."""

    def call_later(self, delay_seconds: float, callback: DeferredCallback) -> int:
        """Run `callback` once after `delay_seconds`; return a task id."""

    def cancel(self, task_id: int) -> None:
        """Drop a task that has not run yet; unknown ids are ignored."""


@dataclass(slots=True)
class _Pending:
    task_id: int
    due_seconds: float
    callback: DeferredCallback
    cancelled: bool = False


class Scheduler:
    """Manually advanced clock that runs deferred callbacks when due."""

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_task_id = 1
        self._pending: dict[int, _Pending] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def pending_count(self) -> int:
        """Return count of callbacks still waiting to run."""
        return sum(1 for task in self._pending.values() if not task.cancelled)

    def call_later(self, delay_seconds: float, callback: DeferredCallback) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_seconds = self._now_seconds + delay_seconds
        self._pending[task_id] = _Pending(task_id=task_id, due_seconds=due_seconds, callback=callback)
        heappush(self._queue, (due_seconds, task_id))
        return task_id

    def cancel(self, task_id: int) -> None:
        """Cancel a scheduled callback if it is still pending."""
        task = self._pending.get(task_id)
        if task is not None:
            task.cancelled = True

    def advance(self, delta_seconds: float) -> int:
        """Advance the clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds` in due order."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, task_id = heappop(self._queue)
            task = self._pending.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed
