"""Cancellable deferred callbacks for reload and cooldown windows.

The loop driver calls run_due() once per frame with the frame timestamp, so
callbacks only ever run between simulation steps on the loop's thread.
Whoever schedules a task keeps the ScheduledTask handle and cancels it when
the state it would mutate goes away (a session reset, a weapon swap).
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from cabinet.logging import get_logger

log = get_logger('scheduler')


@dataclass
class ScheduledTask:
    """Handle for one pending callback."""
    due_ms: float
    callback: Callable[[], None]
    name: str = ""
    cancelled: bool = False
    done: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self) -> bool:
        """Cancel if still pending. Returns True if this call cancelled it."""
        if not self.pending:
            return False
        self.cancelled = True
        log.debug("Cancelled task %s", self.name or id(self))
        return True


@dataclass
class TaskScheduler:
    """Fire-once timers on the loop's clock."""
    now_ms: float = 0.0
    _tasks: List[ScheduledTask] = field(default_factory=list)

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
        name: str = "",
    ) -> ScheduledTask:
        """Schedule callback to run on the first frame at or after now + delay."""
        task = ScheduledTask(due_ms=self.now_ms + max(0.0, delay_ms), callback=callback, name=name)
        self._tasks.append(task)
        log.debug("Scheduled %s in %.0f ms", name or 'task', delay_ms)
        return task

    def run_due(self, now_ms: Optional[float] = None) -> int:
        """Advance the clock and run every pending task that is due.

        Tasks run in due-time order. Callbacks may schedule new tasks; those
        wait for a later call even if already due.

        Returns:
            Number of callbacks that ran
        """
        if now_ms is not None:
            self.now_ms = max(self.now_ms, now_ms)

        due = sorted(
            (t for t in self._tasks if t.pending and t.due_ms <= self.now_ms),
            key=lambda t: t.due_ms,
        )
        ran = 0
        for task in due:
            # An earlier callback in this batch may have cancelled it
            if not task.pending:
                continue
            task.done = True
            task.callback()
            ran += 1

        self._tasks = [t for t in self._tasks if t.pending]
        return ran

    def cancel_all(self) -> int:
        """Cancel every pending task. Returns how many were cancelled."""
        count = sum(1 for t in self._tasks if t.cancel())
        self._tasks.clear()
        return count

    @property
    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if t.pending)
