"""
Configuration Management for Finance Dashboard

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The remote service location, the display conventions and the
load behaviour are each grouped under their own environment prefix.
"""

from functools import cached_property, lru_cache
from typing import Optional

from babel import Locale, UnknownLocaleError
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Remote transaction service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_API_",
        extra="ignore"
    )

    base_url: str = Field(
        default="http://localhost:3333",
        description="Base URL of the transactions service"
    )
    search_path: str = Field(
        default="transactions/search",
        description="Path of the period-scoped query"
    )
    summary_path: str = Field(
        default="transactions",
        description="Path of the all-time query"
    )

    # No timeout unless one is configured
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (unset = wait indefinitely)"
    )
    max_attempts: int = Field(
        default=1,
        ge=1,
        le=5,
        description="Attempts per request (1 = no retry)"
    )
    retry_wait_seconds: float = Field(
        default=1.0,
        ge=0.0,
        le=30.0,
        description="Base wait between attempts"
    )

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class LocaleSettings(BaseSettings):
    """Display conventions for money and dates."""

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_LOCALE_",
        extra="ignore"
    )

    locale: str = Field(
        default="pt_BR",
        description="Babel locale identifier"
    )
    currency: str = Field(
        default="BRL",
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code"
    )
    date_pattern: str = Field(
        default="dd/MM/yyyy",
        description="Babel date pattern for transaction dates"
    )
    description_placeholder: str = Field(
        default="-",
        min_length=1,
        description="Shown when a transaction has no description"
    )
    expense_marker: str = Field(
        default="-",
        min_length=1,
        description="Prefix for expense values"
    )

    @field_validator('locale')
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Reject locales Babel does not know."""
        try:
            Locale.parse(v)
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"Unknown locale: {v}") from e
        return v

    @field_validator('currency')
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


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

    # Load behaviour
    fetch_mode: str = Field(
        default="period",
        pattern="^(period|summary)$",
        description="Which query the dashboard issues: 'period' or 'summary'"
    )
    clear_on_failure: bool = Field(
        default=False,
        description="Drop the last good data when a load fails"
    )
    event_history_size: int = Field(
        default=200,
        ge=1,
        le=10000,
        description="How many load events to keep in memory"
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

    # Sub-settings are loaded on first access so that a bad value in
    # one group doesn't prevent the others from loading

    @cached_property
    def api(self) -> ApiSettings:
        return ApiSettings()

    @cached_property
    def locale(self) -> LocaleSettings:
        return LocaleSettings()

    @cached_property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for each group that failed.
    Useful for startup checks.
    """
    results = {}

    groups = {
        "api": ApiSettings,
        "locale": LocaleSettings,
        "app": AppSettings,
    }

    for name, settings_class in groups.items():
        try:
            settings_class()
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
