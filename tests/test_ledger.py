"""Tests for the ledger view engine."""

import pytest
from datetime import timedelta
from decimal import Decimal

from bankist.config import LedgerSettings
from bankist.ledger import (
    LedgerViewEngine,
    balance,
    days_passed,
    interest,
    ordered_movements,
    total_in,
    total_out,
)
from bankist.models.view import MovementKind
from bankist.services.formatting import SimpleFormatter
from bankist.services.storage import load_demo_accounts

from tests.conftest import NOW, make_account


@pytest.fixture
def engine() -> LedgerViewEngine:
    return LedgerViewEngine(
        formatter=SimpleFormatter(),
        settings=LedgerSettings(interest_threshold=Decimal("1"), recent_days_window=7),
    )


class TestDerivedFigures:
    """Tests for balance, totals and interest."""

    def test_balance(self):
        """Test balance is the sum of movements."""
        account = make_account(movements=[200, -50, 25])
        assert balance(account) == Decimal("175")

    def test_totals(self):
        """Test money in and money out."""
        account = make_account(movements=[200, -50, 25, -30])
        assert total_in(account) == Decimal("225")
        assert total_out(account) == Decimal("80")

    def test_totals_without_deposits_or_withdrawals(self):
        """Test empty reductions give zero instead of failing."""
        only_out = make_account(movements=[-10, -5])
        only_in = make_account(movements=[10])
        empty = make_account(movements=[])
        assert total_in(only_out) == Decimal("0")
        assert total_out(only_in) == Decimal("0")
        assert total_in(empty) == total_out(empty) == Decimal("0")

    def test_in_minus_out_equals_balance(self):
        """Test money in minus money out equals balance for the demo accounts."""
        for account in load_demo_accounts():
            assert total_in(account) - total_out(account) == balance(account)

    def test_interest_threshold_applies_per_deposit(self):
        """Test a deposit earning less than 1 contributes 0."""
        account = make_account(movements=["1000", "1.2"], interest_rate="1.2")
        assert interest(account) == Decimal("12")

    def test_interest_ignores_withdrawals(self):
        """Test withdrawals never earn interest."""
        account = make_account(movements=["1000", "-5000"], interest_rate="1.2")
        assert interest(account) == Decimal("12")

    def test_interest_without_deposits_is_zero(self):
        """Test interest on an account with no deposits."""
        assert interest(make_account(movements=[-100])) == Decimal("0")
        assert interest(make_account(movements=[])) == Decimal("0")

    def test_interest_for_demo_account(self):
        """Test interest for the first demo account."""
        account = load_demo_accounts()[0]
        # 79.97 earns less than 1 and is excluded
        assert interest(account) == Decimal("2.4") + Decimal("5.46276") + Decimal("300") + Decimal("15.6")

    def test_engine_uses_configured_threshold(self):
        """Test the engine passes its threshold through."""
        account = make_account(movements=["100"], interest_rate="1.5")
        strict = LedgerViewEngine(settings=LedgerSettings(interest_threshold=Decimal("2")))
        assert strict.interest(account) == Decimal("0")


class TestOrdering:
    """Tests for display ordering."""

    def test_chronological_order(self):
        """Test unsorted order is insertion order."""
        account = make_account(movements=[300, -100, 50])
        assert ordered_movements(account) == [Decimal("300"), Decimal("-100"), Decimal("50")]

    def test_sorted_order_is_ascending(self):
        """Test sorted order is ascending by amount."""
        account = make_account(movements=[300, -100, 50])
        assert ordered_movements(account, True) == [Decimal("-100"), Decimal("50"), Decimal("300")]

    def test_sorting_never_mutates_movements(self):
        """Test sorting then unsorting returns the original order."""
        account = make_account(movements=[300, -100, 50])
        original = list(account.movements)
        ordered_movements(account, True)
        assert ordered_movements(account, False) == original
        assert account.movements == original

    def test_sorted_rows_keep_their_dates(self, engine):
        """Test each sorted row carries its own movement date."""
        account = make_account(movements=[300, -100])
        account.movement_dates = [NOW - timedelta(days=10), NOW]
        rows = engine.build_rows(account, NOW, sort_by_amount=True)
        assert [row.amount for row in rows] == [Decimal("-100"), Decimal("300")]
        assert rows[0].position == 2
        assert rows[0].date_label == "Today"
        assert rows[1].position == 1
        assert rows[1].date == NOW - timedelta(days=10)


class TestRelativeDates:
    """Tests for date labels."""

    def test_days_passed_rounds_half_up(self):
        """Test 12 hours rounds to one day."""
        assert days_passed(NOW - timedelta(hours=12), NOW) == 1
        assert days_passed(NOW - timedelta(hours=11, minutes=59), NOW) == 0

    def test_days_passed_is_symmetric(self):
        """Test future dates count the same as past dates."""
        assert days_passed(NOW + timedelta(days=3), NOW) == 3

    @pytest.mark.parametrize(
        "delta, label",
        [
            (timedelta(0), "Today"),
            (timedelta(hours=5), "Today"),
            (timedelta(days=1), "Yesterday"),
            (timedelta(days=2), "2 days ago"),
            (timedelta(days=7), "7 days ago"),
        ],
    )
    def test_recent_labels(self, engine, delta, label):
        """Test Today / Yesterday / N days ago."""
        assert engine.relative_date_label(NOW - delta, NOW) == label

    def test_older_dates_use_locale_format(self, engine):
        """Test dates older than a week are formatted absolutely."""
        movement_date = NOW - timedelta(days=8)
        assert engine.relative_date_label(movement_date, NOW, "en-US") == "11/17/2020"
        assert engine.relative_date_label(movement_date, NOW, "pt-PT") == "17/11/2020"


class TestLedgerView:
    """Tests for the full LedgerView."""

    def test_build_view_figures(self, engine):
        """Test every figure of the view."""
        account = make_account(movements=["1000", "-250", "1.2"], interest_rate="1.2")
        view = engine.build_view(account, NOW)

        assert view.balance == Decimal("751.2")
        assert view.total_in == Decimal("1001.2")
        assert view.total_out == Decimal("250")
        assert view.interest == Decimal("12")
        assert view.formatted_balance == "$751.20"
        assert view.formatted_total_out == "$250.00"
        assert view.sorted_by_amount is False

    def test_row_kinds(self, engine):
        """Test deposits and withdrawals are labelled."""
        account = make_account(movements=[100, -40])
        rows = engine.build_view(account, NOW).rows
        assert [row.kind for row in rows] == [MovementKind.DEPOSIT, MovementKind.WITHDRAWAL]
        assert [row.position for row in rows] == [1, 2]
        assert rows[1].formatted_amount == "-$40.00"

    def test_view_uses_account_locale(self, engine):
        """Test amounts follow the account's locale and currency."""
        account = make_account(movements=["25000"], currency="EUR", locale="pt-PT")
        view = engine.build_view(account, NOW)
        assert view.formatted_balance == "25\u00a0000,00\u00a0€"

    def test_build_view_is_pure(self, engine):
        """Test building a view leaves the account untouched."""
        account = make_account(movements=[300, -100, 50])
        before = account.model_dump()
        engine.build_view(account, NOW, sort_by_amount=True)
        assert account.model_dump() == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
