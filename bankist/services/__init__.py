"""Services package."""

from bankist.services.formatting import Formatter, SimpleFormatter
from bankist.services.scheduling import (
    AsyncioScheduler,
    Clock,
    ManualScheduler,
    ScheduledTask,
    Scheduler,
    SchedulingError,
    SystemClock,
)
from bankist.services.storage import (
    AccountRegistryInterface,
    AuditStorageInterface,
    DuplicateError,
    InMemoryAccountRegistry,
    InMemoryAuditStorage,
    NotFoundError,
    StorageError,
    create_demo_registry,
    load_demo_accounts,
)

__all__ = [
    # Formatting
    "Formatter",
    "SimpleFormatter",
    # Scheduling
    "AsyncioScheduler",
    "Clock",
    "ManualScheduler",
    "ScheduledTask",
    "Scheduler",
    "SchedulingError",
    "SystemClock",
    # Storage
    "AccountRegistryInterface",
    "AuditStorageInterface",
    "DuplicateError",
    "InMemoryAccountRegistry",
    "InMemoryAuditStorage",
    "NotFoundError",
    "StorageError",
    "create_demo_registry",
    "load_demo_accounts",
]
