from __future__ import annotations

import pytest

from layernav.runtime.scheduler import Scheduler


def test_call_later_runs_when_due() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.2, lambda: calls.append("once"))

    assert scheduler.advance(0.1) == 0
    assert calls == []
    assert scheduler.advance(0.1) == 1
    assert calls == ["once"]
    assert scheduler.advance(1.0) == 0


def test_callbacks_run_in_due_order() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.3, lambda: calls.append("late"))
    scheduler.call_later(0.1, lambda: calls.append("early"))
    scheduler.advance(0.5)
    assert calls == ["early", "late"]


def test_cancel_prevents_execution() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    task_id = scheduler.call_later(0.1, lambda: calls.append("never"))
    scheduler.cancel(task_id)
    assert scheduler.pending_count == 0
    assert scheduler.advance(0.2) == 0
    assert calls == []


def test_validates_time_arguments() -> None:
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.1)
    scheduler.advance(1.0)
    with pytest.raises(ValueError):
        scheduler.run_due(0.5)


def test_pending_count_tracks_queue() -> None:
    scheduler = Scheduler()
    scheduler.call_later(0.1, lambda: None)
    scheduler.call_later(0.2, lambda: None)
    assert scheduler.pending_count == 2
    scheduler.advance(0.1)
    assert scheduler.pending_count == 1
    assert scheduler.now_seconds == pytest.approx(0.1)
