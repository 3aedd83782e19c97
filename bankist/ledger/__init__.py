"""Ledger view package."""

from bankist.ledger.engine import (
    LedgerViewEngine,
    balance,
    days_passed,
    interest,
    ordered_movements,
    total_in,
    total_out,
)

__all__ = [
    "LedgerViewEngine",
    "balance",
    "days_passed",
    "interest",
    "ordered_movements",
    "total_in",
    "total_out",
]
