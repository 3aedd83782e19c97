"""
Manual (virtual time) scheduler.

Time only moves when advance() or advance_to() is called. Due callbacks
then run in due order, ties in scheduling order. A callback that schedules
another callback inside the window being advanced sees it run in the same
call.

Used by the tests, and by the Streamlit page which catches up with wall
time on every rerun.
"""

import heapq
import itertools
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from bankist.services.scheduling.interface import (
    Clock,
    ScheduledTask,
    Scheduler,
)


class ManualScheduler(Clock, Scheduler):
    """Scheduler and clock sharing one virtual timeline."""

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime.now(timezone.utc)
        self._queue: list[tuple[datetime, int, ScheduledTask]] = []
        self._sequence = itertools.count()

    def now(self) -> datetime:
        return self._now

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        self._check_delay(delay_seconds)
        due = self._now + timedelta(seconds=delay_seconds)
        task = ScheduledTask(callback, due=due)
        heapq.heappush(self._queue, (due, next(self._sequence), task))
        return task

    def advance(self, seconds: float) -> int:
        """Move time forward by seconds. Returns how many callbacks ran."""
        return self.advance_to(self._now + timedelta(seconds=seconds))

    def advance_to(self, target: datetime) -> int:
        """Move time forward to target. Returns how many callbacks ran."""
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            if not task.active:
                continue
            self._now = max(self._now, due)
            task.run()
            ran += 1
        if target > self._now:
            self._now = target
        return ran

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for _, _, task in self._queue if task.active)
