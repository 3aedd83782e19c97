"""
asyncio-backed scheduler.

Callbacks are handed to the running event loop with call_later, so they
interleave with other loop work but never run in parallel with it.
"""

import asyncio
from typing import Callable, Optional

from bankist.services.scheduling.interface import ScheduledTask, Scheduler


class AsyncioScheduler(Scheduler):
    """Schedules callbacks on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        """Get the configured loop, or the running one."""
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        self._check_delay(delay_seconds)
        loop = self._get_loop()

        handle: Optional[asyncio.TimerHandle] = None

        def _cancel() -> None:
            if handle is not None:
                handle.cancel()

        task = ScheduledTask(callback, on_cancel=_cancel)
        handle = loop.call_later(delay_seconds, task.run)
        return task
