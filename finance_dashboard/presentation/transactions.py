"""
Transaction Presenter

Maps each raw transaction to its display form:
- empty description -> placeholder
- value -> currency string, prefixed with the expense marker for EXPENSE
- created_at -> localized date

One output per input, in the same order. Nothing is filtered.
"""

from typing import Iterable, Optional

from finance_dashboard.config import get_settings
from finance_dashboard.formatting import FormatError, format_currency, format_date
from finance_dashboard.models.transaction import (
    PresentedTransaction,
    RawTransaction,
)


def present_transaction(
    raw: RawTransaction,
    *,
    placeholder: Optional[str] = None,
    expense_marker: Optional[str] = None,
) -> PresentedTransaction:
    """
    Build the presented form of a single transaction.

    Raises:
        FormatError: if the value or date cannot be formatted, or a
            blank description would be replaced by a blank placeholder
    """
    locale_settings = get_settings().locale
    if placeholder is None:
        placeholder = locale_settings.description_placeholder
    if expense_marker is None:
        expense_marker = locale_settings.expense_marker

    if raw.description.strip():
        description = raw.description
    elif placeholder.strip():
        description = placeholder
    else:
        raise FormatError(placeholder, "Description placeholder must not be blank")

    formatted_value = format_currency(raw.value)
    # An empty marker leaves expense values unprefixed
    if raw.is_expense and expense_marker:
        formatted_value = f"{expense_marker} {formatted_value}"

    return PresentedTransaction(
        **raw.model_dump(exclude={"description"}),
        description=description,
        formatted_value=formatted_value,
        formatted_date=format_date(raw.created_at),
    )


def present_transactions(
    raws: Iterable[RawTransaction],
    *,
    placeholder: Optional[str] = None,
    expense_marker: Optional[str] = None,
) -> list[PresentedTransaction]:
    """Present every transaction, preserving order and length."""
    return [
        present_transaction(
            raw,
            placeholder=placeholder,
            expense_marker=expense_marker,
        )
        for raw in raws
    ]
