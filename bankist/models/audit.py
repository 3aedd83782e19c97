"""
Audit Models for Bankist

Every session transition and every money movement is logged for audit
purposes. This provides:
1. Traceability of who moved what, and when
2. Debugging information for timer-driven behaviour
3. A record of rejected attempts

DESIGN DECISION: Audit logs are append-only. PINs never appear in them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    LOGIN_SUCCEEDED = "login_succeeded"
    LOGIN_FAILED = "login_failed"
    SESSION_EXPIRED = "session_expired"
    COUNTDOWN_RESTARTED = "countdown_restarted"
    NO_ACTIVE_SESSION = "no_active_session"

    # Transfers
    TRANSFER_COMPLETED = "transfer_completed"
    TRANSFER_REJECTED = "transfer_rejected"

    # Loans
    LOAN_APPROVED = "loan_approved"
    LOAN_CREDITED = "loan_credited"
    LOAN_REJECTED = "loan_rejected"
    LOAN_DISCARDED = "loan_discarded"

    # Account lifecycle
    ACCOUNT_CLOSED = "account_closed"
    CLOSE_REJECTED = "close_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which account is this about?
    account_handle: Optional[str] = Field(
        default=None,
        description="Handle of the account the event relates to"
    )

    # Correlation - ties a loan approval to its later credit
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action (as opposed to a timer)?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "account_handle": self.account_handle,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.login_succeeded("js")
        event = AuditEventBuilder.transfer_completed("js", "jd", amount)
    """

    @staticmethod
    def login_succeeded(handle: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_SUCCEEDED,
            account_handle=handle,
            description=f"User '{handle}' logged in",
            is_user_action=True,
        )

    @staticmethod
    def login_failed(handle: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_FAILED,
            severity=AuditSeverity.WARNING,
            account_handle=handle or None,
            description="Wrong username and/or PIN",
            is_user_action=True,
        )

    @staticmethod
    def session_expired(handle: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_EXPIRED,
            account_handle=handle,
            description=f"Session for '{handle}' expired after inactivity",
        )

    @staticmethod
    def countdown_restarted(handle: str, seconds: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COUNTDOWN_RESTARTED,
            severity=AuditSeverity.DEBUG,
            account_handle=handle,
            description=f"Countdown restarted at {seconds}s",
            details={"seconds": seconds},
        )

    @staticmethod
    def no_active_session(action: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.NO_ACTIVE_SESSION,
            severity=AuditSeverity.WARNING,
            description=f"'{action}' attempted without an active session",
            details={"action": action},
            is_user_action=True,
        )

    @staticmethod
    def transfer_completed(
        sender: str,
        receiver: str,
        amount: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_COMPLETED,
            account_handle=sender,
            description=f"Transferred {amount} from '{sender}' to '{receiver}'",
            details={
                "receiver": receiver,
                "amount": str(amount),
            },
            is_user_action=True,
        )

    @staticmethod
    def transfer_rejected(
        sender: str,
        receiver: str,
        amount: Decimal,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_REJECTED,
            severity=AuditSeverity.WARNING,
            account_handle=sender,
            description=f"Transfer not approved: {reason}",
            details={
                "receiver": receiver,
                "amount": str(amount),
                "reason": reason,
            },
            is_user_action=True,
        )

    @staticmethod
    def loan_approved(
        handle: str,
        amount: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_APPROVED,
            account_handle=handle,
            correlation_id=correlation_id,
            description=f"Loan of {amount} approved for '{handle}'",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def loan_credited(
        handle: str,
        amount: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_CREDITED,
            account_handle=handle,
            correlation_id=correlation_id,
            description=f"Loan of {amount} credited to '{handle}'",
            details={"amount": amount},
        )

    @staticmethod
    def loan_rejected(handle: str, amount: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_REJECTED,
            severity=AuditSeverity.WARNING,
            account_handle=handle,
            description=f"Loan of {amount} not approved for '{handle}'",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def loan_discarded(
        handle: str,
        amount: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_DISCARDED,
            severity=AuditSeverity.WARNING,
            account_handle=handle,
            correlation_id=correlation_id,
            description=f"Loan of {amount} dropped: account '{handle}' no longer exists",
            details={"amount": amount},
        )

    @staticmethod
    def account_closed(handle: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_CLOSED,
            account_handle=handle,
            description=f"Account '{handle}' closed",
            is_user_action=True,
        )

    @staticmethod
    def close_rejected(handle: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CLOSE_REJECTED,
            severity=AuditSeverity.WARNING,
            account_handle=handle,
            description="Wrong username and/or PIN",
            is_user_action=True,
        )
