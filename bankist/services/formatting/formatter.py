"""
Currency and Date Formatting

The core treats formatting as an opaque collaborator: it hands over an
amount (or a date) plus the account's locale and currency and gets a
display string back.

SimpleFormatter covers the handful of locales the demo accounts use.
Unknown locales fall back to en-US conventions, unknown currencies are
shown by their ISO code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal


class Formatter(ABC):
    """Turns amounts and dates into locale-specific display strings."""

    @abstractmethod
    def format_currency(self, amount: Decimal, locale: str, currency: str) -> str:
        pass

    @abstractmethod
    def format_date(self, value: date, locale: str) -> str:
        pass

    @abstractmethod
    def format_datetime(self, value: datetime, locale: str) -> str:
        pass


NBSP = "\u00a0"


@dataclass(frozen=True)
class LocaleConventions:
    thousands_sep: str
    decimal_sep: str
    symbol_first: bool
    date_pattern: str


LOCALE_CONVENTIONS = {
    "en-US": LocaleConventions(",", ".", True, "%m/%d/%Y"),
    "en-GB": LocaleConventions(",", ".", True, "%d/%m/%Y"),
    "pt-PT": LocaleConventions(NBSP, ",", False, "%d/%m/%Y"),
    "de-DE": LocaleConventions(".", ",", False, "%d.%m.%Y"),
    "en-IN": LocaleConventions(",", ".", True, "%d/%m/%Y"),
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
}

CENTS = Decimal("0.01")


class SimpleFormatter(Formatter):
    """Table-driven formatter for the demo locales."""

    def __init__(self, fallback_locale: str = "en-US"):
        self._fallback = LOCALE_CONVENTIONS.get(fallback_locale, LOCALE_CONVENTIONS["en-US"])

    def _conventions(self, locale: str) -> LocaleConventions:
        return LOCALE_CONVENTIONS.get(locale, self._fallback)

    def format_currency(self, amount: Decimal, locale: str, currency: str) -> str:
        conv = self._conventions(locale)
        value = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)

        digits = f"{abs(value):,.2f}".translate(
            str.maketrans({",": conv.thousands_sep, ".": conv.decimal_sep})
        )
        sign = "-" if value < 0 else ""
        symbol = CURRENCY_SYMBOLS.get(currency.upper())

        if symbol is None:
            return f"{sign}{currency.upper()}{NBSP}{digits}"
        if conv.symbol_first:
            return f"{sign}{symbol}{digits}"
        return f"{sign}{digits}{NBSP}{symbol}"

    def format_date(self, value: date, locale: str) -> str:
        return value.strftime(self._conventions(locale).date_pattern)

    def format_datetime(self, value: datetime, locale: str) -> str:
        return f"{self.format_date(value, locale)}, {value:%H:%M}"
