"""Clock and scheduler services."""

from bankist.services.scheduling.interface import (
    Clock,
    ScheduledTask,
    Scheduler,
    SchedulingError,
    SystemClock,
)
from bankist.services.scheduling.manual import ManualScheduler
from bankist.services.scheduling.asyncio_scheduler import AsyncioScheduler

__all__ = [
    "AsyncioScheduler",
    "Clock",
    "ManualScheduler",
    "ScheduledTask",
    "Scheduler",
    "SchedulingError",
    "SystemClock",
]
