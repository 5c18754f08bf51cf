"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from finance_dashboard.config import (
    ApiSettings,
    AppSettings,
    LocaleSettings,
    get_settings,
    validate_all_settings,
)


class TestDefaults:

    def test_api_defaults(self):
        api = ApiSettings()
        assert api.base_url == "http://localhost:3333"
        assert api.search_path == "transactions/search"
        assert api.summary_path == "transactions"
        assert api.timeout_seconds is None
        assert api.max_attempts == 1

    def test_locale_defaults(self):
        locale = LocaleSettings()
        assert locale.locale == "pt_BR"
        assert locale.currency == "BRL"
        assert locale.description_placeholder == "-"
        assert locale.expense_marker == "-"

    def test_app_defaults(self):
        app = AppSettings()
        assert app.fetch_mode == "period"
        assert app.clear_on_failure is False


class TestEnvironment:

    def test_api_prefix(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_API_BASE_URL", "https://api.example.com/")
        monkeypatch.setenv("DASHBOARD_API_MAX_ATTEMPTS", "3")
        monkeypatch.setenv("DASHBOARD_API_TIMEOUT_SECONDS", "2.5")
        api = ApiSettings()
        assert api.base_url == "https://api.example.com"
        assert api.max_attempts == 3
        assert api.timeout_seconds == 2.5

    def test_rejects_too_many_attempts(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_API_MAX_ATTEMPTS", "10")
        with pytest.raises(ValidationError):
            ApiSettings()

    def test_rejects_unknown_locale(self):
        with pytest.raises(ValidationError):
            LocaleSettings(locale="xx_XX")

    def test_rejects_unknown_fetch_mode(self):
        with pytest.raises(ValidationError):
            AppSettings(fetch_mode="weekly")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
        assert get_settings().locale is get_settings().locale

    def test_cache_clear_reloads(self, monkeypatch):
        before = get_settings().locale.currency
        monkeypatch.setenv("DASHBOARD_LOCALE_CURRENCY", "eur")
        get_settings.cache_clear()
        assert before == "BRL"
        assert get_settings().locale.currency == "EUR"


class TestValidateAllSettings:

    def test_all_valid_by_default(self):
        results = validate_all_settings()
        assert results == {"api": True, "locale": True, "app": True}

    def test_reports_broken_group(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_LOCALE_LOCALE", "not_a_locale")
        results = validate_all_settings()
        assert results["locale"] is False
        assert "locale_error" in results
        assert results["api"] is True
