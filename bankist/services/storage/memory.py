"""
In-Memory Storage

Accounts and audit events live only for the lifetime of the process.
"""

from typing import Iterable, Optional
from uuid import UUID

from bankist.models.account import Account
from bankist.models.audit import AuditEvent
from bankist.services.storage.interface import (
    AccountRegistryInterface,
    AuditStorageInterface,
    DuplicateError,
    NotFoundError,
)


class InMemoryAccountRegistry(AccountRegistryInterface):
    """Active accounts keyed by user handle, kept in registration order."""

    def __init__(self, accounts: Optional[Iterable[Account]] = None):
        self._accounts: dict[str, Account] = {}
        for account in accounts or ():
            self.add(account)

    def add(self, account: Account) -> None:
        if account.user_handle in self._accounts:
            raise DuplicateError(
                f"An active account already uses the handle '{account.user_handle}'"
            )
        self._accounts[account.user_handle] = account

    def find_by_handle(self, handle: str) -> Optional[Account]:
        return self._accounts.get(handle)

    def remove(self, handle: str) -> Account:
        try:
            return self._accounts.pop(handle)
        except KeyError:
            raise NotFoundError(f"No active account with handle '{handle}'") from None

    def list_accounts(self) -> list[Account]:
        return list(self._accounts.values())


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only list of audit events."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    def get_events_by_account(self, handle: str) -> list[AuditEvent]:
        return [e for e in self._events if e.account_handle == handle]

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events[-limit:])) if limit > 0 else []
