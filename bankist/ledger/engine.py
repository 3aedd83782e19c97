"""
Ledger View Engine

Derives everything the user sees about an account from its movement list:
balance, money in, money out, interest earned, and the order movements
are displayed in.

DESIGN DECISION: These are pure functions of an Account. Nothing here is
cached or stored, so the figures can never disagree with the movements.
Recompute after every change instead.

Interest rule: the bank pays interest on each deposit, but only when the
interest on that single deposit reaches the threshold (1 unit by default).
Deposits below that still take part in the calculation; they just
contribute 0.
"""

import math
from datetime import datetime
from decimal import Decimal
from typing import Optional

from bankist.config import LedgerSettings, get_settings
from bankist.models.account import Account
from bankist.models.view import LedgerView, MovementKind, MovementRow
from bankist.services.formatting import Formatter, SimpleFormatter

ZERO = Decimal("0")
SECONDS_PER_DAY = 24 * 60 * 60


def balance(account: Account) -> Decimal:
    """Sum of all movements."""
    return sum(account.movements, ZERO)


def total_in(account: Account) -> Decimal:
    """Sum of deposits, 0 if there are none."""
    return sum((m for m in account.movements if m > 0), ZERO)


def total_out(account: Account) -> Decimal:
    """Absolute sum of withdrawals, 0 if there are none."""
    return abs(sum((m for m in account.movements if m < 0), ZERO))


def interest(account: Account, threshold: Decimal = Decimal("1")) -> Decimal:
    """
    Interest earned on deposits.

    Each deposit earns deposit * rate / 100; an individual amount below
    threshold counts as 0.
    """
    earned = ZERO
    for deposit in (m for m in account.movements if m > 0):
        contribution = deposit * account.interest_rate / 100
        earned += contribution if contribution >= threshold else ZERO
    return earned


def ordered_movements(account: Account, sort_by_amount: bool = False) -> list[Decimal]:
    """
    Movements in display order.

    Sorting works on a copy; account.movements is never reordered.
    """
    if sort_by_amount:
        return sorted(account.movements)
    return list(account.movements)


def days_passed(earlier: datetime, later: datetime) -> int:
    """Whole days between two timestamps, symmetric, rounded half up."""
    seconds = abs((later - earlier).total_seconds())
    return math.floor(seconds / SECONDS_PER_DAY + 0.5)


class LedgerViewEngine:
    """
    Builds LedgerView models for the presentation surface.

    Holds only its collaborators (formatter) and settings, no account state.
    """

    def __init__(
        self,
        formatter: Optional[Formatter] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        self._formatter = formatter or SimpleFormatter()
        self._settings = settings or get_settings().ledger

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def interest(self, account: Account) -> Decimal:
        return interest(account, self._settings.interest_threshold)

    def relative_date_label(
        self,
        movement_date: datetime,
        now: datetime,
        locale: str = "en-US",
    ) -> str:
        """
        'Today', 'Yesterday', 'N days ago' for recent dates, otherwise the
        locale-formatted date.
        """
        days = days_passed(movement_date, now)
        if days == 0:
            return "Today"
        if days == 1:
            return "Yesterday"
        if days <= self._settings.recent_days_window:
            return f"{days} days ago"
        return self._formatter.format_date(movement_date, locale)

    def build_rows(
        self,
        account: Account,
        now: datetime,
        sort_by_amount: bool = False,
    ) -> list[MovementRow]:
        """
        One row per movement, in display order.

        Each row keeps the date of its own movement, also when sorted.
        """
        entries = list(enumerate(zip(account.movements, account.movement_dates), start=1))
        if sort_by_amount:
            entries.sort(key=lambda entry: entry[1][0])

        rows = []
        for position, (amount, when) in entries:
            rows.append(MovementRow(
                position=position,
                kind=MovementKind.DEPOSIT if amount > 0 else MovementKind.WITHDRAWAL,
                amount=amount,
                date=when,
                date_label=self.relative_date_label(when, now, account.locale),
                formatted_amount=self._money(amount, account),
            ))
        return rows

    def build_view(
        self,
        account: Account,
        now: datetime,
        sort_by_amount: bool = False,
    ) -> LedgerView:
        """Recompute every derived figure for account."""
        current_balance = balance(account)
        money_in = total_in(account)
        money_out = total_out(account)
        earned = self.interest(account)

        return LedgerView(
            rows=self.build_rows(account, now, sort_by_amount),
            sorted_by_amount=sort_by_amount,
            balance=current_balance,
            total_in=money_in,
            total_out=money_out,
            interest=earned,
            formatted_balance=self._money(current_balance, account),
            formatted_total_in=self._money(money_in, account),
            formatted_total_out=self._money(money_out, account),
            formatted_interest=self._money(earned, account),
        )

    def _money(self, amount: Decimal, account: Account) -> str:
        return self._formatter.format_currency(amount, account.locale, account.currency)
