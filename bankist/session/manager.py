"""
Session Manager

Owns the "current account" and the idle-timeout countdown.

State machine:
    LOGGED_OUT --login(handle, pin) ok--> LOGGED_IN(account, 300)
    LOGGED_IN  --record_activity()-----> LOGGED_IN(account, 300)
    LOGGED_IN  --tick------------------> LOGGED_IN(account, n - 1)
    LOGGED_IN  --tick reaching 0-------> LOGGED_OUT  (after showing 00:00)
    LOGGED_IN  --close_account ok------> LOGGED_OUT  (account removed)

A failed login leaves the state untouched, including an open session.
There is no manual logout; sessions end by expiry or account closure.
"""

from typing import Callable, Optional, Union

from bankist.audit import AuditLogger
from bankist.config import SessionSettings, get_settings
from bankist.models.account import Account
from bankist.models.session import (
    ActionOutcome,
    ActionResult,
    LogoutReason,
    SessionState,
)
from bankist.services.scheduling import Scheduler
from bankist.services.storage import AccountRegistryInterface
from bankist.session.countdown import Countdown, format_countdown

TickListener = Callable[[str], None]
LogoutListener = Callable[[Account, LogoutReason], None]


def parse_pin(pin: Union[int, str, None]) -> Optional[int]:
    """Accept a PIN as typed into a form; None if it is not a number."""
    if isinstance(pin, bool) or pin is None:
        return None
    if isinstance(pin, int):
        return pin
    try:
        return int(str(pin).strip())
    except ValueError:
        return None


class SessionManager:
    """
    Tracks who is logged in and logs them out after inactivity.

    Only one countdown exists per manager; logging in again or recording
    activity restarts it rather than adding another.
    """

    def __init__(
        self,
        registry: AccountRegistryInterface,
        scheduler: Scheduler,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[SessionSettings] = None,
    ):
        self._registry = registry
        self._audit_logger = audit_logger
        self._settings = settings or get_settings().session

        self._current: Optional[Account] = None
        self._tick_listeners: list[TickListener] = []
        self._logout_listeners: list[LogoutListener] = []

        self._countdown = Countdown(
            scheduler,
            duration_seconds=self._settings.timeout_seconds,
            tick_interval_seconds=self._settings.tick_interval_seconds,
            on_tick=self._handle_tick,
            on_expired=self._handle_expired,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        if self._current is None:
            return SessionState.LOGGED_OUT
        return SessionState.LOGGED_IN

    @property
    def is_logged_in(self) -> bool:
        return self._current is not None

    @property
    def current_account(self) -> Optional[Account]:
        return self._current

    @property
    def remaining_seconds(self) -> int:
        return self._countdown.remaining if self._current is not None else 0

    @property
    def countdown_display(self) -> str:
        return format_countdown(self.remaining_seconds)

    @property
    def countdown_running(self) -> bool:
        return self._countdown.running

    def is_current(self, account: Account) -> bool:
        return self._current is account

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_tick_listener(self, listener: TickListener) -> None:
        """Called with the MM:SS display on every countdown update."""
        self._tick_listeners.append(listener)

    def add_logout_listener(self, listener: LogoutListener) -> None:
        """Called with the account and reason when a session ends."""
        self._logout_listeners.append(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def login(self, handle: str, pin: Union[int, str]) -> ActionResult:
        """
        Log in with handle and PIN.

        On success the countdown (re)starts from the full timeout.
        """
        account = self._registry.find_by_handle(handle)
        parsed_pin = parse_pin(pin)

        if account is None or parsed_pin is None or account.pin != parsed_pin:
            if self._audit_logger:
                self._audit_logger.log_login_failed(handle)
            return ActionResult(
                outcome=ActionOutcome.INVALID_CREDENTIALS,
                message="Wrong username and/or PIN.",
            )

        self._current = account
        self._countdown.start()

        if self._audit_logger:
            self._audit_logger.log_login_succeeded(account.user_handle)

        return ActionResult.success(
            f"Hello, {account.first_name}",
            account_handle=account.user_handle,
        )

    def record_activity(self) -> bool:
        """
        Restart the countdown after a qualifying action.

        Returns False (and does nothing) when nobody is logged in.
        """
        if self._current is None:
            return False

        self._countdown.start()
        if self._audit_logger:
            self._audit_logger.log_countdown_restarted(
                self._current.user_handle,
                self._settings.timeout_seconds,
            )
        return True

    def close_account(self, handle: str, pin: Union[int, str]) -> ActionResult:
        """
        Close the current account if handle and PIN match it exactly.

        The account is removed from the registry and the session ends.
        """
        account = self._current
        if account is None:
            if self._audit_logger:
                self._audit_logger.log_no_active_session("close_account")
            return ActionResult.no_active_session()

        parsed_pin = parse_pin(pin)
        if parsed_pin is None or not account.matches_credentials(handle, parsed_pin):
            if self._audit_logger:
                self._audit_logger.log_close_rejected(account.user_handle)
            return ActionResult(
                outcome=ActionOutcome.INVALID_CREDENTIALS,
                message="Wrong username and/or PIN",
                account_handle=account.user_handle,
            )

        self._registry.remove(account.user_handle)
        if self._audit_logger:
            self._audit_logger.log_account_closed(account.user_handle)

        self.logout(LogoutReason.ACCOUNT_CLOSED)
        return ActionResult.success(
            "Account closed",
            account_handle=account.user_handle,
        )

    def logout(self, reason: LogoutReason) -> None:
        """End the session and cancel the countdown. No-op if logged out."""
        account = self._current
        self._countdown.cancel()
        if account is None:
            return

        self._current = None
        for listener in list(self._logout_listeners):
            listener(account, reason)

    # ------------------------------------------------------------------
    # Countdown callbacks
    # ------------------------------------------------------------------

    def _handle_tick(self, display: str) -> None:
        for listener in list(self._tick_listeners):
            listener(display)

    def _handle_expired(self) -> None:
        account = self._current
        if account is not None and self._audit_logger:
            self._audit_logger.log_session_expired(account.user_handle)
        self.logout(LogoutReason.EXPIRED)
