"""
Tests for locale formatting.

Babel separates the currency symbol with a no-break space; the tests
normalize it so the expectations stay readable.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from finance_dashboard.config import get_settings
from finance_dashboard.formatting import (
    FormatError,
    format_currency,
    format_date,
    format_month_label,
    to_decimal,
)
from finance_dashboard.models import PeriodCursor


def plain(text: str) -> str:
    return text.replace("\xa0", " ").replace("\u202f", " ")


class TestFormatCurrency:
    """Tests for currency formatting (pt_BR / BRL by default)."""

    def test_formats_decimal(self):
        assert plain(format_currency(Decimal("500.00"))) == "R$ 500,00"

    def test_groups_thousands(self):
        assert plain(format_currency(Decimal("1234.5"))) == "R$ 1.234,50"

    def test_accepts_int_and_float(self):
        assert plain(format_currency(0)) == "R$ 0,00"
        assert plain(format_currency(0.1)) == "R$ 0,10"

    def test_negative_amount_carries_minus_sign(self):
        formatted = plain(format_currency(Decimal("-300")))
        assert formatted.startswith("-")
        assert formatted.endswith("300,00")

    def test_is_deterministic(self):
        assert format_currency(Decimal("99.99")) == format_currency(Decimal("99.99"))

    def test_locale_and_currency_overrides(self):
        assert format_currency(Decimal("1234.5"), locale="en_US", currency="USD") == "$1,234.50"

    @pytest.mark.parametrize("bad", [
        float("nan"),
        float("inf"),
        Decimal("NaN"),
        Decimal("-Infinity"),
        "100",
        None,
        True,
    ])
    def test_rejects_invalid_amounts(self, bad):
        """Test that no 'NaN' text is ever produced."""
        with pytest.raises(FormatError):
            format_currency(bad)

    def test_rejects_unknown_currency(self):
        with pytest.raises(FormatError, match="Unknown currency"):
            format_currency(1, currency="QQQ")

    def test_rejects_unknown_locale(self):
        with pytest.raises(FormatError, match="Unknown locale"):
            format_currency(1, locale="xx_XX")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            format_currency(float("nan"))

    def test_uses_configured_locale(self, monkeypatch):
        """Test that DASHBOARD_LOCALE_* settings change the default."""
        monkeypatch.setenv("DASHBOARD_LOCALE_LOCALE", "en_US")
        monkeypatch.setenv("DASHBOARD_LOCALE_CURRENCY", "usd")
        get_settings.cache_clear()
        assert format_currency(Decimal("10")) == "$10.00"


class TestToDecimal:

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passes_through(self):
        value = Decimal("1.005")
        assert to_decimal(value) is value


class TestFormatDate:
    """Tests for date formatting."""

    def test_formats_datetime(self):
        assert format_date(datetime(2024, 1, 15, 23, 59)) == "15/01/2024"

    def test_formats_date(self):
        assert format_date(date(2023, 12, 1)) == "01/12/2023"

    def test_keeps_the_calendar_date_of_aware_datetimes(self):
        """Test that no timezone conversion happens."""
        late_evening = datetime(2024, 1, 15, 23, 30, tzinfo=timezone(timedelta(hours=-3)))
        assert format_date(late_evening) == "15/01/2024"

    def test_pattern_override(self):
        assert format_date(date(2024, 1, 5), pattern="yyyy-MM-dd") == "2024-01-05"

    @pytest.mark.parametrize("bad", ["2024-01-15", None, 1705312800])
    def test_rejects_non_dates(self, bad):
        """Test that no 'Invalid Date' text is ever produced."""
        with pytest.raises(FormatError):
            format_date(bad)


class TestFormatMonthLabel:
    """Tests for the period header label."""

    def test_portuguese_label(self):
        assert format_month_label(PeriodCursor(year=2024, month=1)) == "janeiro - 2024"
        assert format_month_label(PeriodCursor(year=2023, month=12)) == "dezembro - 2023"

    def test_locale_override(self):
        label = format_month_label(PeriodCursor(year=2024, month=3), locale="en_US")
        assert label == "March - 2024"

    def test_period_label_shortcut(self):
        assert PeriodCursor(year=2024, month=2).label() == "fevereiro - 2024"

    def test_out_of_calendar_range(self):
        with pytest.raises(FormatError):
            format_month_label(PeriodCursor(year=0, month=1))
