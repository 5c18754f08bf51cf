"""
Abstract Transaction Source Interface

DESIGN DECISION: The dashboard only talks to this interface.
This allows us to:
1. Swap the HTTP service for another backend
2. Use in-memory sources for testing
3. Keep the load pipeline decoupled from transport details

The service answers two questions, both with the same payload shape:
the transactions and balance of one month, or of all time.
"""

from abc import ABC, abstractmethod
from typing import Optional

from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.transaction import TransactionsResponse


class TransactionSourceInterface(ABC):
    """
    Abstract interface for the remote transactions service.

    Implementations must raise FetchError (or a subclass) for every
    failure, so callers only need to handle one exception family.
    """

    @abstractmethod
    async def fetch_by_period(self, period: PeriodCursor) -> TransactionsResponse:
        """
        Fetch the transactions and balance of a single month.

        Args:
            period: The month to query

        Returns:
            The parsed service payload

        Raises:
            FetchError: Transport failure or non-success response
            MalformedResponseError: Response missing expected fields
        """
        pass

    @abstractmethod
    async def fetch_summary(self) -> TransactionsResponse:
        """
        Fetch all transactions and the all-time balance.

        Raises:
            FetchError: Transport failure or non-success response
            MalformedResponseError: Response missing expected fields
        """
        pass

    async def aclose(self) -> None:
        """Release any underlying resources."""
        pass


class FetchError(Exception):
    """Base exception for failures talking to the transactions service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(FetchError):
    """The service answered, but not with the expected payload."""
    pass
