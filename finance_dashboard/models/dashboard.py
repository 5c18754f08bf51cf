"""
Dashboard State Models

The presentation state is what the view reads. It is replaced as a whole
on every transition of the load state machine:

    IDLE -> LOADING -> LOADED
                    -> FAILED

Any new load moves the state back to LOADING, whatever it was before.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.transaction import (
    PresentedBalance,
    PresentedTransaction,
)


class LoadStatus(str, Enum):
    """Where the load state machine currently is."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class LoadOutcome(str, Enum):
    """How a single load() call ended."""
    LOADED = "loaded"
    FAILED = "failed"
    SUPERSEDED = "superseded"  # A newer load started; result discarded


class FetchMode(str, Enum):
    """
    Which service query the dashboard issues.

    PERIOD asks for one month; SUMMARY asks for all-time data.
    """
    PERIOD = "period"
    SUMMARY = "summary"


class PresentationState(BaseModel):
    """
    Everything the view needs to render the dashboard.

    On FAILED the previous transactions and balance are kept
    (unless the orchestrator was told to clear them), so the
    view can keep showing the last good data next to the error.
    """
    model_config = ConfigDict(frozen=True)

    status: LoadStatus = LoadStatus.IDLE
    mode: FetchMode = FetchMode.PERIOD
    period: Optional[PeriodCursor] = None
    request_id: Optional[UUID] = None

    transactions: tuple[PresentedTransaction, ...] = ()
    balance: Optional[PresentedBalance] = None

    error_type: Optional[str] = None
    error_message: Optional[str] = None

    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    @property
    def has_data(self) -> bool:
        return self.balance is not None


class LoadResult(BaseModel):
    """
    The outcome of one load() call, returned to whoever awaited it.

    For SUPERSEDED results transactions/balance are empty: the data
    belonged to a period the user already navigated away from.
    """
    model_config = ConfigDict(frozen=True)

    request_id: UUID
    mode: FetchMode
    period: Optional[PeriodCursor] = None
    outcome: LoadOutcome

    transactions: tuple[PresentedTransaction, ...] = ()
    balance: Optional[PresentedBalance] = None

    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == LoadOutcome.LOADED
