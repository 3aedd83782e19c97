"""
Configuration Management for Bankist

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All tunables (timeout, loan rules, interest threshold)
live here instead of being scattered as literals through the session and
ledger code.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SessionSettings(BaseSettings):
    """Idle-timeout countdown configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BANKIST_SESSION_",
        extra="ignore"
    )

    timeout_seconds: int = Field(
        default=300,
        ge=1,
        description="Seconds of inactivity before the session is logged out"
    )
    tick_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Interval between countdown ticks"
    )


class LoanSettings(BaseSettings):
    """Loan approval rules."""

    model_config = SettingsConfigDict(
        env_prefix="BANKIST_LOAN_",
        extra="ignore"
    )

    approval_delay_seconds: float = Field(
        default=1.5,
        ge=0,
        description="Delay between approval and the loan being credited"
    )
    min_deposit_ratio: Decimal = Field(
        default=Decimal("0.1"),
        gt=0,
        le=1,
        description="A movement of at least this share of the loan must exist"
    )


class LedgerSettings(BaseSettings):
    """Ledger view computation settings."""

    model_config = SettingsConfigDict(
        env_prefix="BANKIST_LEDGER_",
        extra="ignore"
    )

    interest_threshold: Decimal = Field(
        default=Decimal("1"),
        ge=0,
        description="Interest earned on a deposit only counts from this amount"
    )
    recent_days_window: int = Field(
        default=7,
        ge=1,
        description="Up to this many days old, dates are shown as 'N days ago'"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Formatting fallbacks
    default_locale: str = Field(
        default="en-US",
        description="Locale used when nobody is logged in"
    )
    default_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="ISO currency code used when nobody is logged in"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def session(self) -> SessionSettings:
        return SessionSettings()

    @property
    def loan(self) -> LoanSettings:
        return LoanSettings()

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for each failure.
    """
    results = {}
    settings = get_settings()

    for name in ("session", "loan", "ledger", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
