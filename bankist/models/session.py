"""
Session and Action Result Models

DESIGN DECISION: Rejected user actions (wrong PIN, transfer not approved,
loan not approved) are normal outcomes, not errors. Every operation that
a UI trigger can invoke returns an ActionResult and the UI decides how
to show it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SessionState(str, Enum):
    """Whether somebody is currently logged in."""
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class LogoutReason(str, Enum):
    """Why a session ended."""
    EXPIRED = "expired"
    ACCOUNT_CLOSED = "account_closed"


class ActionOutcome(str, Enum):
    """
    Outcome of a user-triggered operation.

    LOAN_PENDING means the loan was approved and will be credited
    after the approval delay.
    """
    SUCCESS = "success"
    LOAN_PENDING = "loan_pending"
    INVALID_CREDENTIALS = "invalid_credentials"
    TRANSFER_REJECTED = "transfer_rejected"
    LOAN_REJECTED = "loan_rejected"
    NO_ACTIVE_SESSION = "no_active_session"


class ActionResult(BaseModel):
    """Result of a user-triggered operation."""

    outcome: ActionOutcome = Field(
        ...,
        description="What happened"
    )
    message: str = Field(
        ...,
        description="Human-readable summary for the UI"
    )
    account_handle: Optional[str] = Field(
        default=None,
        description="Handle of the account the action applied to"
    )

    @property
    def ok(self) -> bool:
        return self.outcome in (ActionOutcome.SUCCESS, ActionOutcome.LOAN_PENDING)

    @classmethod
    def success(cls, message: str, account_handle: Optional[str] = None) -> "ActionResult":
        return cls(
            outcome=ActionOutcome.SUCCESS,
            message=message,
            account_handle=account_handle,
        )

    @classmethod
    def no_active_session(cls) -> "ActionResult":
        return cls(
            outcome=ActionOutcome.NO_ACTIVE_SESSION,
            message="Log in to get started",
        )
