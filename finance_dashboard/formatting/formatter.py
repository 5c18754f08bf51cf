"""
Locale Formatting using Babel

Turns amounts and dates into the strings the dashboard shows.

DESIGN DECISION: Bad input is an error, not a string.
Formatting a NaN amount or a value that isn't a date raises
FormatError instead of producing "NaN" or "Invalid Date" for the user.

Locale, currency and date pattern default to the configured
LocaleSettings; each function accepts explicit overrides.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Optional, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_date as babel_format_date
from babel.numbers import (
    UnknownCurrencyError,
    format_currency as babel_format_currency,
    is_currency,
)

from finance_dashboard.config import get_settings

if TYPE_CHECKING:
    from finance_dashboard.models.period import PeriodCursor


Amount = Union[Decimal, int, float]


class FormatError(ValueError):
    """A value could not be rendered for display."""

    def __init__(self, value: object, message: str):
        self.value = value
        super().__init__(message)


def _locale(locale: Optional[str]) -> Locale:
    code = locale or get_settings().locale.locale
    try:
        return Locale.parse(code)
    except (UnknownLocaleError, ValueError) as e:
        raise FormatError(code, f"Unknown locale: {code}") from e


def to_decimal(amount: object) -> Decimal:
    """
    Convert an amount to a finite Decimal.

    Floats go through str() so that 0.1 stays 0.1.
    bool is rejected even though it is an int subclass.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float)):
        raise FormatError(
            amount,
            f"Cannot format {type(amount).__name__} as an amount"
        )

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as e:
        raise FormatError(amount, f"Invalid amount: {amount!r}") from e

    if not value.is_finite():
        raise FormatError(amount, f"Amount is not finite: {amount!r}")

    return value


def format_currency(
    amount: Amount,
    *,
    locale: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """
    Format an amount as money, e.g. Decimal("1234.5") -> "R$ 1.234,50".

    Negative amounts carry the locale's own minus sign.

    Raises:
        FormatError: non-numeric or non-finite amount, unknown
            locale or currency
    """
    value = to_decimal(amount)
    locale_obj = _locale(locale)
    currency_code = (currency or get_settings().locale.currency).upper()

    if not is_currency(currency_code):
        raise FormatError(currency_code, f"Unknown currency: {currency_code}")

    try:
        return babel_format_currency(value, currency_code, locale=locale_obj)
    except UnknownCurrencyError as e:
        raise FormatError(currency_code, f"Unknown currency: {currency_code}") from e


def format_date(
    value: Union[date, datetime],
    *,
    locale: Optional[str] = None,
    pattern: Optional[str] = None,
) -> str:
    """
    Format a date as day/month/year, e.g. "15/01/2024".

    Datetimes are reduced to the calendar date they already carry;
    no timezone conversion happens here.

    Raises:
        FormatError: value is not a date/datetime
    """
    if not isinstance(value, date):
        raise FormatError(
            value,
            f"Cannot format {type(value).__name__} as a date"
        )

    if isinstance(value, datetime):
        value = value.date()

    return babel_format_date(
        value,
        format=pattern or get_settings().locale.date_pattern,
        locale=_locale(locale),
    )


def format_month_label(
    period: "PeriodCursor",
    *,
    locale: Optional[str] = None,
) -> str:
    """
    Month name and year for the period header, e.g. "janeiro - 2024".
    """
    try:
        first_day = date(period.year, period.month, 1)
    except ValueError as e:
        raise FormatError(period, f"Period out of calendar range: {period}") from e

    month_name = babel_format_date(first_day, format="LLLL", locale=_locale(locale))
    return f"{month_name} - {period.year}"
