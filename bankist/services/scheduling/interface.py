"""
Clock and Scheduler Interfaces

DESIGN DECISION: Nothing in the session or ledger code reads the wall
clock or starts a timer directly. Both go through these interfaces so
that tests can drive time explicitly and the UI can choose an event loop.

Execution model: callbacks run one at a time, each to completion, on the
caller's thread. There is never more than one callback running.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional


class SchedulingError(Exception):
    """Invalid use of a scheduler (e.g. a negative delay)."""
    pass


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Current timestamp, timezone-aware (UTC)."""
        pass


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ScheduledTask:
    """
    Handle to a callback scheduled for later.

    Cancelling is idempotent. A cancelled task never runs; a task that has
    already run ignores cancel().
    """

    def __init__(
        self,
        callback: Callable[[], None],
        due: Optional[datetime] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        self._callback = callback
        self._on_cancel = on_cancel
        self.due = due
        self._cancelled = False
        self._done = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    @property
    def active(self) -> bool:
        return not (self._cancelled or self._done)

    def cancel(self) -> None:
        if not self.active:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()

    def run(self) -> None:
        """Run the callback once, unless cancelled."""
        if not self.active:
            return
        self._done = True
        self._callback()


class Scheduler(ABC):
    """Runs callbacks after a delay without blocking the caller."""

    @abstractmethod
    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        """
        Schedule callback to run once after delay_seconds.

        Raises:
            SchedulingError: If delay_seconds is negative
        """
        pass

    @staticmethod
    def _check_delay(delay_seconds: float) -> None:
        if delay_seconds < 0:
            raise SchedulingError(f"Delay must not be negative, got {delay_seconds}")
