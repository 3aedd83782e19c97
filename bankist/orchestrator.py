"""
Main Orchestrator for Bankist

This module ties together the session manager, the ledger view engine,
the account registry and the scheduler, and defines the operations the
UI triggers:
1. Login
2. Transfer (debit sender, credit receiver)
3. Loan request (approved now, credited after a delay)
4. Account closure
5. Sort toggle

DESIGN DECISION: After every action the orchestrator recomputes the
dashboard view and pushes it to the registered view listeners. The
presentation surface never reads accounts itself.

Rejections are returned as ActionResult outcomes. Transfer and loan
attempts restart the idle countdown whether or not they succeed.
"""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Callable, Optional, Union
from uuid import UUID

from bankist.audit import AuditLogger, create_correlation_id
from bankist.config import AppSettings, LoanSettings, SessionSettings, get_settings
from bankist.ledger import LedgerViewEngine
from bankist.models.account import Account
from bankist.models.session import ActionOutcome, ActionResult, LogoutReason
from bankist.models.view import DashboardView
from bankist.services.scheduling import (
    Clock,
    ManualScheduler,
    ScheduledTask,
    Scheduler,
    SystemClock,
)
from bankist.services.storage import (
    AccountRegistryInterface,
    AuditStorageInterface,
    InMemoryAuditStorage,
    create_demo_registry,
)
from bankist.session import SessionManager

Amount = Union[Decimal, int, float, str]
ViewListener = Callable[[DashboardView], None]

LOGGED_OUT_WELCOME = "Log in to get started"


def to_amount(value: Amount) -> Optional[Decimal]:
    """Parse a user-entered amount; None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def floor_loan_amount(value: Amount) -> int:
    """Loan requests are floored to a whole number; unparseable input is 0."""
    amount = to_amount(value)
    if amount is None:
        return 0
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))


class BankingApp:
    """
    Orchestrates the banking operations for one browser session.

    Flow for every mutating action:
    1. Guard: somebody must be logged in
    2. Check preconditions, mutate accounts if they hold
    3. Restart the idle countdown
    4. Recompute and publish the dashboard view
    """

    def __init__(
        self,
        registry: AccountRegistryInterface,
        scheduler: Scheduler,
        clock: Optional[Clock] = None,
        ledger_engine: Optional[LedgerViewEngine] = None,
        audit_logger: Optional[AuditLogger] = None,
        session_settings: Optional[SessionSettings] = None,
        loan_settings: Optional[LoanSettings] = None,
        app_settings: Optional[AppSettings] = None,
    ):
        self._registry = registry
        self._scheduler = scheduler
        self._clock = clock or (scheduler if isinstance(scheduler, Clock) else SystemClock())
        self._ledger = ledger_engine or LedgerViewEngine()
        self._audit_logger = audit_logger
        self._loan_settings = loan_settings or get_settings().loan
        self._app_settings = app_settings or get_settings().app

        self._session = SessionManager(
            registry,
            scheduler,
            audit_logger=audit_logger,
            settings=session_settings,
        )
        self._session.add_tick_listener(self._on_tick)
        self._session.add_logout_listener(self._on_logout)

        self._sorted = False
        self._pending_loans: list[ScheduledTask] = []
        self._view_listeners: list[ViewListener] = []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def session(self) -> SessionManager:
        return self._session

    @property
    def registry(self) -> AccountRegistryInterface:
        return self._registry

    @property
    def current_account(self) -> Optional[Account]:
        return self._session.current_account

    @property
    def sorted_by_amount(self) -> bool:
        return self._sorted

    @property
    def pending_loans(self) -> int:
        """Approved loans that have not been credited yet."""
        return len(self._pending_loans)

    def add_view_listener(self, listener: ViewListener) -> None:
        """Register the presentation surface."""
        self._view_listeners.append(listener)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def login(self, handle: str, pin: Union[int, str]) -> ActionResult:
        result = self._session.login(handle, pin)
        if result.ok:
            self._sorted = False
            self._publish()
        return result

    def transfer(self, receiver_handle: str, amount: Amount) -> ActionResult:
        """
        Move money from the current account to another account.

        Requires amount > 0, enough balance, an existing receiver and a
        receiver other than the sender. Both sides are updated in one
        step or neither is.
        """
        sender = self._session.current_account
        if sender is None:
            return self._no_active_session("transfer")

        parsed = to_amount(amount)
        receiver = self._registry.find_by_handle(receiver_handle)
        reason = self._transfer_rejection_reason(sender, receiver, parsed)

        if reason is not None:
            if self._audit_logger:
                self._audit_logger.log_transfer_rejected(
                    sender.user_handle,
                    receiver_handle,
                    parsed if parsed is not None else Decimal("0"),
                    reason,
                )
            self._session.record_activity()
            self._publish()
            return ActionResult(
                outcome=ActionOutcome.TRANSFER_REJECTED,
                message="Transfer not approved",
                account_handle=sender.user_handle,
            )

        sender.record_movement(-parsed, self._clock.now())
        receiver.record_movement(parsed, self._clock.now())

        if self._audit_logger:
            self._audit_logger.log_transfer_completed(
                sender.user_handle,
                receiver.user_handle,
                parsed,
            )
        self._session.record_activity()
        self._publish()
        return ActionResult.success(
            f"Transferred to {receiver.user_handle}",
            account_handle=sender.user_handle,
        )

    def request_loan(self, amount: Amount) -> ActionResult:
        """
        Request a loan for the current account.

        The amount is floored to a whole number. Approved when it is
        positive and some movement is at least min_deposit_ratio of it;
        the credit then lands after approval_delay_seconds.
        """
        account = self._session.current_account
        if account is None:
            return self._no_active_session("request_loan")

        loan = floor_loan_amount(amount)
        minimum = loan * self._loan_settings.min_deposit_ratio
        approved = loan > 0 and any(m >= minimum for m in account.movements)

        if not approved:
            if self._audit_logger:
                self._audit_logger.log_loan_rejected(account.user_handle, loan)
            self._session.record_activity()
            self._publish()
            return ActionResult(
                outcome=ActionOutcome.LOAN_REJECTED,
                message="Loan not approved",
                account_handle=account.user_handle,
            )

        correlation_id = create_correlation_id()
        if self._audit_logger:
            self._audit_logger.log_loan_approved(account.user_handle, loan, correlation_id)

        task = self._scheduler.call_later(
            self._loan_settings.approval_delay_seconds,
            lambda: self._complete_loan(account, loan, correlation_id),
        )
        self._pending_loans.append(task)

        self._session.record_activity()
        self._publish()
        return ActionResult(
            outcome=ActionOutcome.LOAN_PENDING,
            message=f"Loan of {loan} approved",
            account_handle=account.user_handle,
        )

    def close_account(self, handle: str, pin: Union[int, str]) -> ActionResult:
        result = self._session.close_account(handle, pin)
        if result.outcome != ActionOutcome.NO_ACTIVE_SESSION:
            self._publish()
        return result

    def toggle_sort(self) -> ActionResult:
        """Flip between chronological and by-amount display order."""
        account = self._session.current_account
        if account is None:
            return self._no_active_session("toggle_sort")

        self._sorted = not self._sorted
        self._publish()
        return ActionResult.success(
            "Sorted by amount" if self._sorted else "Chronological order",
            account_handle=account.user_handle,
        )

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def dashboard(self) -> DashboardView:
        """Compute what the page should show right now."""
        account = self._session.current_account
        if account is None:
            return DashboardView(
                visible=False,
                welcome_text=LOGGED_OUT_WELCOME,
                countdown_display=self._session.countdown_display,
            )

        now = self._clock.now()
        return DashboardView(
            visible=True,
            welcome_text=f"Hello, {account.first_name}",
            countdown_display=self._session.countdown_display,
            as_of_label=self._ledger.formatter.format_datetime(now, account.locale),
            ledger=self._ledger.build_view(account, now, self._sorted),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _transfer_rejection_reason(
        sender: Account,
        receiver: Optional[Account],
        amount: Optional[Decimal],
    ) -> Optional[str]:
        if amount is None or amount <= 0:
            return "amount must be positive"
        if sender.balance < amount:
            return "insufficient balance"
        if receiver is None:
            return "unknown receiver"
        if receiver.user_handle == sender.user_handle:
            return "cannot transfer to the same account"
        return None

    def _complete_loan(self, account: Account, loan: int, correlation_id: UUID) -> None:
        """
        Credit an approved loan to the account it was requested for.

        Dropped if that account has been closed in the meantime. The
        countdown and view are only touched if it is still logged in.
        """
        self._pending_loans = [task for task in self._pending_loans if task.active]

        if not self._registry.is_active(account):
            if self._audit_logger:
                self._audit_logger.log_loan_discarded(account.user_handle, loan, correlation_id)
            return

        account.record_movement(Decimal(loan), self._clock.now())
        if self._audit_logger:
            self._audit_logger.log_loan_credited(account.user_handle, loan, correlation_id)

        if self._session.is_current(account):
            self._session.record_activity()
            self._publish()

    def _no_active_session(self, action: str) -> ActionResult:
        if self._audit_logger:
            self._audit_logger.log_no_active_session(action)
        return ActionResult.no_active_session()

    def _on_tick(self, display: str) -> None:
        self._publish()

    def _on_logout(self, account: Account, reason: LogoutReason) -> None:
        self._sorted = False
        self._publish()

    def _publish(self) -> None:
        if not self._view_listeners:
            return
        view = self.dashboard()
        for listener in list(self._view_listeners):
            listener(view)


def create_app_components(
    registry: Optional[AccountRegistryInterface] = None,
    scheduler: Optional[Scheduler] = None,
    clock: Optional[Clock] = None,
    audit_storage: Optional[AuditStorageInterface] = None,
) -> BankingApp:
    """
    Factory function to create a fully wired BankingApp.

    Args:
        registry: Active accounts. Defaults to the demo accounts.
        scheduler: Timer source. Defaults to a ManualScheduler, which
                   the caller advances (tests, Streamlit reruns).
        clock: Time source. Defaults to the scheduler when it is also
               a clock, the system clock otherwise.
        audit_storage: Where audit events go. Defaults to in-memory.
    """
    registry = registry if registry is not None else create_demo_registry()
    scheduler = scheduler or ManualScheduler()
    audit_logger = AuditLogger(audit_storage or InMemoryAuditStorage())

    return BankingApp(
        registry=registry,
        scheduler=scheduler,
        clock=clock,
        audit_logger=audit_logger,
    )
