"""
Tests for cancellable scheduled tasks.

Run with: pytest tests/test_scheduling.py -v
"""

from unittest.mock import Mock

from cabinet.scheduling import TaskScheduler


class TestTaskScheduler:

    def test_runs_when_due(self):
        scheduler = TaskScheduler()
        callback = Mock()
        scheduler.call_later(100, callback)

        assert scheduler.run_due(99.0) == 0
        callback.assert_not_called()
        assert scheduler.run_due(100.0) == 1
        callback.assert_called_once()

    def test_runs_once(self):
        scheduler = TaskScheduler()
        callback = Mock()
        task = scheduler.call_later(10, callback)
        scheduler.run_due(20.0)
        scheduler.run_due(30.0)
        callback.assert_called_once()
        assert task.done
        assert not task.pending

    def test_delay_is_relative_to_clock(self):
        scheduler = TaskScheduler()
        scheduler.run_due(1000.0)
        task = scheduler.call_later(50, Mock())
        assert task.due_ms == 1050.0

    def test_clock_never_goes_backwards(self):
        scheduler = TaskScheduler()
        scheduler.run_due(500.0)
        scheduler.run_due(100.0)
        assert scheduler.now_ms == 500.0

    def test_due_order(self):
        scheduler = TaskScheduler()
        order = []
        scheduler.call_later(30, lambda: order.append('late'))
        scheduler.call_later(10, lambda: order.append('early'))
        scheduler.run_due(50.0)
        assert order == ['early', 'late']

    def test_cancelled_task_never_runs(self):
        scheduler = TaskScheduler()
        callback = Mock()
        task = scheduler.call_later(10, callback)
        assert task.cancel() is True
        assert task.cancel() is False
        scheduler.run_due(100.0)
        callback.assert_not_called()

    def test_callback_can_cancel_later_task(self):
        scheduler = TaskScheduler()
        second = Mock()
        task2 = scheduler.call_later(20, second)
        scheduler.call_later(10, task2.cancel)
        assert scheduler.run_due(50.0) == 1
        second.assert_not_called()

    def test_tasks_scheduled_by_callbacks_wait(self):
        scheduler = TaskScheduler()
        inner = Mock()
        scheduler.call_later(0, lambda: scheduler.call_later(0, inner))
        scheduler.run_due(10.0)
        inner.assert_not_called()
        scheduler.run_due(10.0)
        inner.assert_called_once()

    def test_cancel_all(self):
        scheduler = TaskScheduler()
        callbacks = [Mock(), Mock()]
        for cb in callbacks:
            scheduler.call_later(10, cb)
        assert scheduler.pending_count == 2
        assert scheduler.cancel_all() == 2
        assert scheduler.pending_count == 0
        scheduler.run_due(100.0)
        for cb in callbacks:
            cb.assert_not_called()
