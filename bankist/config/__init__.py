"""Configuration package."""

from bankist.config.settings import (
    AppSettings,
    LedgerSettings,
    LoanSettings,
    SessionSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "LedgerSettings",
    "LoanSettings",
    "SessionSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
