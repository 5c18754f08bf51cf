"""
Period Cursor

The month currently shown on the dashboard. It is the only piece of
user-driven state in the core: navigation replaces it with a new value,
and every replacement triggers a fresh load.
"""

from datetime import date
from functools import total_ordering
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


@total_ordering
class PeriodCursor(BaseModel):
    """
    A calendar month.

    Months are unbounded in both directions: next() and previous()
    always produce a valid cursor, rolling the year over at the
    December/January boundary.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)

    @classmethod
    def current(cls, today: Optional[date] = None) -> "PeriodCursor":
        """The month containing today (or the given date)."""
        return cls.from_date(today or date.today())

    @classmethod
    def from_date(cls, value: date) -> "PeriodCursor":
        return cls(year=value.year, month=value.month)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "PeriodCursor":
        year, month_index = divmod(ordinal, 12)
        return cls(year=year, month=month_index + 1)

    @property
    def ordinal(self) -> int:
        """Months since year 0; consecutive months differ by one."""
        return self.year * 12 + (self.month - 1)

    def shift(self, months: int) -> "PeriodCursor":
        return PeriodCursor.from_ordinal(self.ordinal + months)

    def next(self) -> "PeriodCursor":
        if self.month == 12:
            return PeriodCursor(year=self.year + 1, month=1)
        return PeriodCursor(year=self.year, month=self.month + 1)

    def previous(self) -> "PeriodCursor":
        if self.month == 1:
            return PeriodCursor(year=self.year - 1, month=12)
        return PeriodCursor(year=self.year, month=self.month - 1)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def query_params(self) -> dict[str, int]:
        """The representation sent to the transactions service."""
        return {"month": self.month, "year": self.year}

    def label(self, locale: Optional[str] = None) -> str:
        """Human-readable month name and year, e.g. 'janeiro - 2024'."""
        # Imported here: formatting depends on the models package
        from finance_dashboard.formatting import format_month_label

        return format_month_label(self, locale=locale)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PeriodCursor):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
