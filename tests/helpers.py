"""
Test helpers: payload builders and an in-memory transaction source.
"""

import asyncio
from typing import Optional, Union

from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.transaction import TransactionsResponse
from finance_dashboard.services.api import TransactionSourceInterface


JANUARY = PeriodCursor(year=2024, month=1)
FEBRUARY = PeriodCursor(year=2024, month=2)


def make_payload(
    prefix: str = "t",
    count: int = 2,
    total_income: str = "500.00",
    total_expense: str = "200.00",
    total: str = "300.00",
) -> dict:
    """A service payload in wire format (camelCase, string/float values)."""
    transactions = []
    for i in range(count):
        transactions.append({
            "id": f"{prefix}{i + 1}",
            "description": f"Item {i + 1}" if i % 2 == 0 else "",
            "value": 100.5 + i,
            "type": "INCOME" if i % 2 == 0 else "EXPENSE",
            "category": {"id": "c1", "name": "Food"},
            "createdAt": f"2024-01-{i + 10:02d}T12:00:00.000Z",
        })
    return {
        "transactions": transactions,
        "balance": {
            "totalIncome": total_income,
            "totalExpense": total_expense,
            "total": total,
        },
    }


def make_response(prefix: str = "t", count: int = 2, **balance) -> TransactionsResponse:
    return TransactionsResponse.model_validate(make_payload(prefix, count, **balance))


Answer = Union[TransactionsResponse, Exception]


class FakeTransactionSource(TransactionSourceInterface):
    """
    In-memory source.

    hold(period) makes the next fetch of that period wait until the
    returned event is set, so tests control response arrival order.
    """

    def __init__(
        self,
        by_period: Optional[dict[PeriodCursor, Answer]] = None,
        summary: Optional[Answer] = None,
    ):
        self.by_period = dict(by_period or {})
        self.summary = summary
        self.calls: list[Optional[PeriodCursor]] = []
        self._gates: dict[Optional[PeriodCursor], asyncio.Event] = {}

    def hold(self, period: Optional[PeriodCursor] = None) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[period] = gate
        return gate

    async def _answer(self, key: Optional[PeriodCursor], answer: Optional[Answer]):
        self.calls.append(key)
        gate = self._gates.pop(key, None)
        if gate is not None:
            await gate.wait()
        if answer is None:
            raise KeyError(f"No fake answer for {key}")
        if isinstance(answer, Exception):
            raise answer
        return answer

    async def fetch_by_period(self, period: PeriodCursor) -> TransactionsResponse:
        return await self._answer(period, self.by_period.get(period))

    async def fetch_summary(self) -> TransactionsResponse:
        return await self._answer(None, self.summary)


def fake_source() -> FakeTransactionSource:
    return FakeTransactionSource(
        by_period={
            JANUARY: make_response("jan"),
            FEBRUARY: make_response("feb", count=3),
        },
        summary=make_response("all", count=4),
    )
