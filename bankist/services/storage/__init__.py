"""
Storage Services Package

Provides abstract interfaces and in-memory implementations for the
account registry and the audit log.
"""

from bankist.services.storage.interface import (
    AccountRegistryInterface,
    AuditStorageInterface,
    DuplicateError,
    NotFoundError,
    StorageError,
)
from bankist.services.storage.memory import (
    InMemoryAccountRegistry,
    InMemoryAuditStorage,
)
from bankist.services.storage.seed import (
    DEMO_ACCOUNTS,
    create_demo_registry,
    load_demo_accounts,
)

__all__ = [
    # Interfaces
    "AccountRegistryInterface",
    "AuditStorageInterface",
    # Exceptions
    "DuplicateError",
    "NotFoundError",
    "StorageError",
    # In-memory implementation
    "InMemoryAccountRegistry",
    "InMemoryAuditStorage",
    # Seed data
    "DEMO_ACCOUNTS",
    "create_demo_registry",
    "load_demo_accounts",
]
