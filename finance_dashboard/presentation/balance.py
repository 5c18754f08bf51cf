"""
Balance Presenter

Formats the totals computed by the service. The service is the source
of truth: nothing is summed or recomputed here.
"""

from finance_dashboard.formatting import format_currency
from finance_dashboard.models.transaction import PresentedBalance, RawBalance


def present_balance(raw: RawBalance) -> PresentedBalance:
    """
    Attach currency strings to the three balance figures.

    A negative total is rendered with the formatter's minus sign,
    the same convention used for any signed amount.
    """
    return PresentedBalance(
        **raw.model_dump(),
        formatted_income=format_currency(raw.total_income),
        formatted_outcome=format_currency(raw.total_expense),
        formatted_total=format_currency(raw.total),
    )
