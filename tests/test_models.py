"""
Tests for Bankist models

Test strategy:
1. Unit tests for models, the ledger engine and the services
2. Session and orchestration tests driven by a ManualScheduler
3. No wall-clock waits except the single asyncio scheduler test
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from bankist.models.account import Account, derive_user_handle
from bankist.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from bankist.models.session import ActionOutcome, ActionResult

from tests.conftest import NOW, make_account


class TestUserHandle:
    """Tests for handle derivation."""

    def test_two_word_name(self):
        """Test initials of a two word name."""
        assert derive_user_handle("Jessica Davis") == "jd"

    def test_three_word_name(self):
        """Test every word contributes an initial."""
        assert derive_user_handle("Steven Thomas Williams") == "stw"

    def test_extra_whitespace_is_ignored(self):
        """Test repeated spaces do not produce empty initials."""
        assert derive_user_handle("  Sarah   Smith ") == "ss"


class TestAccountModel:
    """Tests for the Account model."""

    def test_account_creation_derives_handle(self):
        """Test the handle is derived on construction."""
        account = make_account("Jonas Schmedtmann")
        assert account.user_handle == "js"

    def test_handle_cannot_be_overridden(self):
        """Test a passed-in handle is replaced by the derived one."""
        account = Account(
            owner_name="Jessica Davis",
            pin=2222,
            interest_rate=Decimal("1.5"),
            user_handle="admin",
        )
        assert account.user_handle == "jd"

    def test_balance_is_sum_of_movements(self):
        """Test balance is derived from movements."""
        account = make_account(movements=["200", "455.23", "-306.5"])
        assert account.balance == Decimal("348.73")

    def test_empty_account_balance_is_zero(self):
        """Test an account without movements has zero balance."""
        account = make_account(movements=[])
        assert account.balance == Decimal("0")

    def test_mismatched_dates_rejected(self):
        """Test movements and dates must have the same length."""
        with pytest.raises(ValueError, match="same length"):
            Account(
                owner_name="Alice Smith",
                pin=1111,
                movements=[Decimal("100"), Decimal("-5")],
                movement_dates=[NOW],
                interest_rate=Decimal("1"),
            )

    def test_empty_owner_rejected(self):
        """Test an empty owner name is rejected."""
        with pytest.raises(ValueError):
            Account(owner_name="   ", pin=1, interest_rate=Decimal("1"))

    def test_record_movement_keeps_sequences_parallel(self):
        """Test record_movement appends to both sequences."""
        account = make_account(movements=[100])
        account.record_movement(Decimal("-40"), NOW)
        assert account.movements == [Decimal("100"), Decimal("-40")]
        assert len(account.movements) == len(account.movement_dates)
        assert account.balance == Decimal("60")

    def test_iso_dates_are_parsed(self):
        """Test ISO strings with Z suffix become aware datetimes."""
        account = Account.model_validate({
            "owner_name": "Jessica Davis",
            "pin": 2222,
            "movements": ["5000"],
            "movement_dates": ["2019-11-01T13:15:33.035Z"],
            "interest_rate": "1.5",
        })
        assert account.movement_dates[0].tzinfo is not None
        assert account.movement_dates[0].astimezone(timezone.utc) == datetime(
            2019, 11, 1, 13, 15, 33, 35000, tzinfo=timezone.utc
        )

    def test_currency_is_uppercased(self):
        """Test currency codes are normalized."""
        account = make_account(currency="eur")
        assert account.currency == "EUR"

    def test_matches_credentials(self):
        """Test handle and PIN must both match."""
        account = make_account("Alice Smith", pin=1111)
        assert account.matches_credentials("as", 1111) is True
        assert account.matches_credentials("as", 2222) is False
        assert account.matches_credentials("bj", 1111) is False

    def test_first_name(self):
        """Test first_name is the first word of the owner name."""
        assert make_account("Jonas Schmedtmann").first_name == "Jonas"


class TestActionResult:
    """Tests for ActionResult."""

    def test_success_is_ok(self):
        """Test success outcome reports ok."""
        assert ActionResult.success("done").ok is True

    def test_loan_pending_is_ok(self):
        """Test an approved loan counts as ok."""
        result = ActionResult(outcome=ActionOutcome.LOAN_PENDING, message="approved")
        assert result.ok is True

    def test_rejections_are_not_ok(self):
        """Test every rejection outcome reports not ok."""
        for outcome in (
            ActionOutcome.INVALID_CREDENTIALS,
            ActionOutcome.TRANSFER_REJECTED,
            ActionOutcome.LOAN_REJECTED,
            ActionOutcome.NO_ACTIVE_SESSION,
        ):
            assert ActionResult(outcome=outcome, message="no").ok is False

    def test_no_active_session_message(self):
        """Test the no-session result asks the user to log in."""
        result = ActionResult.no_active_session()
        assert result.outcome == ActionOutcome.NO_ACTIVE_SESSION
        assert result.message == "Log in to get started"


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent defaults."""
        event = AuditEvent(
            event_type=AuditEventType.LOGIN_SUCCEEDED,
            description="User logged in",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.transfer_completed("as", "bj", Decimal("30"))
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "transfer_completed"
        assert log_dict["account_handle"] == "as"
        assert log_dict["details"] == {"receiver": "bj", "amount": "30"}

    def test_login_events_never_carry_pin(self):
        """Test login events do not include credentials."""
        for event in (
            AuditEventBuilder.login_succeeded("as"),
            AuditEventBuilder.login_failed("as"),
        ):
            assert "pin" not in event.details

    def test_loan_events_share_correlation_id(self):
        """Test approval and credit can be correlated."""
        correlation_id = uuid4()
        approved = AuditEventBuilder.loan_approved("as", 300, correlation_id)
        credited = AuditEventBuilder.loan_credited("as", 300, correlation_id)
        assert approved.correlation_id == credited.correlation_id
        assert approved.is_user_action is True
        assert credited.is_user_action is False

    def test_rejections_are_warnings(self):
        """Test rejected attempts are logged at warning level."""
        assert AuditEventBuilder.login_failed("x").severity == AuditSeverity.WARNING
        assert AuditEventBuilder.loan_rejected("as", 400).severity == AuditSeverity.WARNING
        assert AuditEventBuilder.transfer_rejected(
            "as", "zz", Decimal("1"), "unknown receiver"
        ).severity == AuditSeverity.WARNING


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
