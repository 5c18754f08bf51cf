"""Configuration package."""

from finance_dashboard.config.settings import (
    ApiSettings,
    AppSettings,
    LocaleSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "LocaleSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
