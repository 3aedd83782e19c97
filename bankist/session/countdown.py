"""
Idle-timeout countdown.

The countdown owns exactly one scheduled task at a time. start() always
cancels the previous task before scheduling a new one, so restarting on
activity can never leave two countdowns ticking.

Timeline for a 300 second countdown:
    start()      -> shows 05:00
    1s later     -> shows 04:59
    ...
    300s later   -> shows 00:00, then on_expired fires
"""

from typing import Callable, Optional

from bankist.services.scheduling import ScheduledTask, Scheduler


def format_countdown(seconds: int) -> str:
    """Render remaining seconds as MM:SS."""
    seconds = max(seconds, 0)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Countdown:
    """A restartable countdown driven by a Scheduler."""

    def __init__(
        self,
        scheduler: Scheduler,
        duration_seconds: int = 300,
        tick_interval_seconds: float = 1.0,
        on_tick: Optional[Callable[[str], None]] = None,
        on_expired: Optional[Callable[[], None]] = None,
    ):
        self._scheduler = scheduler
        self._duration = duration_seconds
        self._interval = tick_interval_seconds
        self._on_tick = on_tick
        self._on_expired = on_expired

        self._remaining = 0
        self._task: Optional[ScheduledTask] = None
        self._generation = 0

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._task is not None and self._task.active

    @property
    def display(self) -> str:
        return format_countdown(self._remaining)

    def start(self) -> None:
        """(Re)start from the full duration."""
        self.cancel()
        self._remaining = self._duration
        generation = self._generation
        self._emit()
        if generation == self._generation:
            self._schedule_next()

    def cancel(self) -> None:
        self._generation += 1
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _schedule_next(self) -> None:
        self._task = self._scheduler.call_later(self._interval, self._tick)

    def _tick(self) -> None:
        self._task = None
        self._remaining -= 1
        generation = self._generation
        self._emit()

        # Restarted or cancelled from inside a listener
        if generation != self._generation:
            return

        if self._remaining <= 0:
            self._remaining = 0
            if self._on_expired is not None:
                self._on_expired()
            return

        self._schedule_next()

    def _emit(self) -> None:
        if self._on_tick is not None:
            self._on_tick(self.display)
