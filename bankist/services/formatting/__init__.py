"""Formatting services."""

from bankist.services.formatting.formatter import (
    CURRENCY_SYMBOLS,
    LOCALE_CONVENTIONS,
    Formatter,
    LocaleConventions,
    SimpleFormatter,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "LOCALE_CONVENTIONS",
    "Formatter",
    "LocaleConventions",
    "SimpleFormatter",
]
