"""Locale formatting package."""

from finance_dashboard.formatting.formatter import (
    FormatError,
    format_currency,
    format_date,
    format_month_label,
    to_decimal,
)

__all__ = [
    "FormatError",
    "format_currency",
    "format_date",
    "format_month_label",
    "to_decimal",
]
