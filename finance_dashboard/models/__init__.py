"""
Data Models Package

This package contains all Pydantic models used by the dashboard.
Everything received from the service or handed to the view
conforms to these schemas.
"""

from finance_dashboard.models.transaction import (
    Category,
    PresentedBalance,
    PresentedTransaction,
    RawBalance,
    RawTransaction,
    TransactionType,
    TransactionsResponse,
)
from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.dashboard import (
    FetchMode,
    LoadOutcome,
    LoadResult,
    LoadStatus,
    PresentationState,
)
from finance_dashboard.models.audit import (
    EventSeverity,
    LoadEvent,
    LoadEventBuilder,
    LoadEventType,
)

__all__ = [
    # Transaction models
    "Category",
    "PresentedBalance",
    "PresentedTransaction",
    "RawBalance",
    "RawTransaction",
    "TransactionType",
    "TransactionsResponse",
    # Period
    "PeriodCursor",
    # Dashboard state
    "FetchMode",
    "LoadOutcome",
    "LoadResult",
    "LoadStatus",
    "PresentationState",
    # Load events
    "EventSeverity",
    "LoadEvent",
    "LoadEventBuilder",
    "LoadEventType",
]
