"""
Abstract Storage Interface

DESIGN DECISION: Account lookup and audit persistence go through abstract
interfaces. This allows us to:
1. Keep the session and ledger code ignorant of where accounts come from
2. Use simple in-memory storage for the demo and for tests
3. Swap in something else later without touching business logic

The interface is intentionally small - only the operations the banking
flows actually need.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bankist.models.account import Account
from bankist.models.audit import AuditEvent


class AccountRegistryInterface(ABC):
    """
    Abstract interface for the set of active accounts.

    Accounts are keyed by their user handle, which must be unique among
    active accounts.
    """

    @abstractmethod
    def add(self, account: Account) -> None:
        """
        Register an account.

        Raises:
            DuplicateError: If an account with the same handle is active
        """
        pass

    @abstractmethod
    def find_by_handle(self, handle: str) -> Optional[Account]:
        """
        Look up an active account by handle.

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    def remove(self, handle: str) -> Account:
        """
        Remove an account from the active set. Removal is terminal.

        Returns:
            The removed account

        Raises:
            NotFoundError: If no active account has this handle
        """
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List active accounts in registration order."""
        pass

    def get(self, handle: str) -> Account:
        """
        Look up an account that must exist.

        Raises:
            NotFoundError: If no active account has this handle
        """
        account = self.find_by_handle(handle)
        if account is None:
            raise NotFoundError(f"No active account with handle '{handle}'")
        return account

    def is_active(self, account: Account) -> bool:
        """Check that this exact account object is still registered."""
        return self.find_by_handle(account.user_handle) is account

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, str) and self.find_by_handle(handle) is not None

    def __len__(self) -> int:
        return len(self.list_accounts())


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """Get all events for a correlation ID, oldest first."""
        pass

    @abstractmethod
    def get_events_by_account(self, handle: str) -> list[AuditEvent]:
        """Get all events for one account, oldest first."""
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """Get the most recent audit events (newest first)."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class DuplicateError(StorageError):
    """Attempted to insert a duplicate entity."""
    pass
