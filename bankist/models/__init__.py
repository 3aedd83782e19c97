"""
Data Models Package

This package contains all Pydantic models used in Bankist.
All data flowing through the system must conform to these schemas.
"""

from bankist.models.account import Account, derive_user_handle
from bankist.models.session import (
    ActionOutcome,
    ActionResult,
    LogoutReason,
    SessionState,
)
from bankist.models.view import (
    DashboardView,
    LedgerView,
    MovementKind,
    MovementRow,
)
from bankist.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Account
    "Account",
    "derive_user_handle",
    # Session
    "ActionOutcome",
    "ActionResult",
    "LogoutReason",
    "SessionState",
    # Views
    "DashboardView",
    "LedgerView",
    "MovementKind",
    "MovementRow",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
