"""
Audit Logger

DESIGN DECISION: Every session transition and money movement is logged.
This provides:
1. Traceability of transfers, loans and closures
2. Visibility into timer-driven logouts
3. A record of rejected attempts

The audit logger:
- Is synchronous, matching the single-threaded event model
- Gracefully handles storage failures (never crashes the caller)
- Supports correlation IDs to tie a loan approval to its credit
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

import structlog

from bankist.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from bankist.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage, when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the audit trail.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("bankist.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_login_succeeded(self, handle: str) -> None:
        self.log(AuditEventBuilder.login_succeeded(handle))

    def log_login_failed(self, handle: str) -> None:
        self.log(AuditEventBuilder.login_failed(handle))

    def log_session_expired(self, handle: str) -> None:
        self.log(AuditEventBuilder.session_expired(handle))

    def log_countdown_restarted(self, handle: str, seconds: int) -> None:
        self.log(AuditEventBuilder.countdown_restarted(handle, seconds))

    def log_no_active_session(self, action: str) -> None:
        self.log(AuditEventBuilder.no_active_session(action))

    def log_transfer_completed(
        self,
        sender: str,
        receiver: str,
        amount: Decimal,
    ) -> None:
        self.log(AuditEventBuilder.transfer_completed(sender, receiver, amount))

    def log_transfer_rejected(
        self,
        sender: str,
        receiver: str,
        amount: Decimal,
        reason: str,
    ) -> None:
        self.log(AuditEventBuilder.transfer_rejected(sender, receiver, amount, reason))

    def log_loan_approved(self, handle: str, amount: int, correlation_id: UUID) -> None:
        self.log(AuditEventBuilder.loan_approved(handle, amount, correlation_id))

    def log_loan_credited(self, handle: str, amount: int, correlation_id: UUID) -> None:
        self.log(AuditEventBuilder.loan_credited(handle, amount, correlation_id))

    def log_loan_rejected(self, handle: str, amount: int) -> None:
        self.log(AuditEventBuilder.loan_rejected(handle, amount))

    def log_loan_discarded(self, handle: str, amount: int, correlation_id: UUID) -> None:
        self.log(AuditEventBuilder.loan_discarded(handle, amount, correlation_id))

    def log_account_closed(self, handle: str) -> None:
        self.log(AuditEventBuilder.account_closed(handle))

    def log_close_rejected(self, handle: str) -> None:
        self.log(AuditEventBuilder.close_rejected(handle))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Used when a loan is approved so the later credit (or discard) can be
    traced back to the request.
    """
    return uuid4()
