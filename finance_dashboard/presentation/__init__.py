"""Presentation package: raw service records to display records."""

from finance_dashboard.presentation.balance import present_balance
from finance_dashboard.presentation.transactions import (
    present_transaction,
    present_transactions,
)

__all__ = [
    "present_balance",
    "present_transaction",
    "present_transactions",
]
