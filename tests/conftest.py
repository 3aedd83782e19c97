"""Shared fixtures: fixed clock, small account registry, wired BankingApp."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from bankist.audit import AuditLogger
from bankist.config import (
    AppSettings,
    LedgerSettings,
    LoanSettings,
    SessionSettings,
)
from bankist.ledger import LedgerViewEngine
from bankist.models.account import Account
from bankist.orchestrator import BankingApp
from bankist.services.scheduling import ManualScheduler
from bankist.services.storage import InMemoryAccountRegistry, InMemoryAuditStorage

NOW = datetime(2020, 11, 25, 12, 0, tzinfo=timezone.utc)


def make_account(
    owner_name: str = "Alice Smith",
    movements=(100,),
    pin: int = 1111,
    interest_rate: str = "1.2",
    currency: str = "USD",
    locale: str = "en-US",
) -> Account:
    """Account whose movements are all dated NOW."""
    return Account(
        owner_name=owner_name,
        pin=pin,
        movements=[Decimal(str(m)) for m in movements],
        movement_dates=[NOW for _ in movements],
        interest_rate=Decimal(interest_rate),
        currency=currency,
        locale=locale,
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler(start=NOW)


@pytest.fixture
def alice() -> Account:
    return make_account("Alice Smith", movements=[100], pin=1111)


@pytest.fixture
def bob() -> Account:
    return make_account("Bob Jones", movements=[50, -20], pin=2222)


@pytest.fixture
def registry(alice, bob) -> InMemoryAccountRegistry:
    return InMemoryAccountRegistry([alice, bob])


@pytest.fixture
def audit_storage() -> InMemoryAuditStorage:
    return InMemoryAuditStorage()


@pytest.fixture
def session_settings() -> SessionSettings:
    return SessionSettings(timeout_seconds=300, tick_interval_seconds=1.0)


@pytest.fixture
def app(registry, scheduler, audit_storage, session_settings) -> BankingApp:
    return BankingApp(
        registry=registry,
        scheduler=scheduler,
        ledger_engine=LedgerViewEngine(
            settings=LedgerSettings(interest_threshold=Decimal("1"), recent_days_window=7),
        ),
        audit_logger=AuditLogger(audit_storage),
        session_settings=session_settings,
        loan_settings=LoanSettings(approval_delay_seconds=1.5, min_deposit_ratio=Decimal("0.1")),
        app_settings=AppSettings(),
    )
