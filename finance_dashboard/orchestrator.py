"""
Main Orchestrator for Finance Dashboard

This module ties together all the components and defines the
end-to-end flow of the dashboard:

    period change -> fetch -> present -> publish

DESIGN DECISION: The orchestrator enforces the boundaries:
- Only the most recently requested load may change the state
- Service and formatting failures become a FAILED state, never a crash
- Presented data is replaced as a whole, never patched

LoadOrchestrator runs one load at a time from the caller's point of view,
but loads may overlap while they wait on the network. Each load is tagged
with a generation number; when a response comes back for a generation
that is no longer current, it is dropped.

DashboardController owns the period cursor and re-runs the orchestrator
whenever the cursor changes.
"""

import asyncio
from typing import Callable, Optional
from uuid import UUID

from finance_dashboard.audit import AuditLogger, create_request_id
from finance_dashboard.config import get_settings
from finance_dashboard.formatting import FormatError
from finance_dashboard.models.audit import LoadEventBuilder
from finance_dashboard.models.dashboard import (
    FetchMode,
    LoadOutcome,
    LoadResult,
    LoadStatus,
    PresentationState,
)
from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.transaction import TransactionsResponse
from finance_dashboard.presentation import present_balance, present_transactions
from finance_dashboard.services.api import (
    FetchError,
    HttpTransactionSource,
    TransactionSourceInterface,
)


StateListener = Callable[[PresentationState], None]


class LoadOrchestrator:
    """
    Orchestrates loading the dashboard data.

    Flow:
    1. Mark state LOADING (previous data stays visible)
    2. Fetch from the source (the only suspension point)
    3. Drop the response if a newer load has started
    4. Present transactions and balance
    5. Publish LOADED, or FAILED with the error

    Errors from the source or the formatter are reported through the
    state and the returned LoadResult. They are never raised.
    """

    def __init__(
        self,
        source: Optional[TransactionSourceInterface] = None,
        mode: Optional[FetchMode] = None,
        audit_logger: Optional[AuditLogger] = None,
        clear_on_failure: Optional[bool] = None,
    ):
        app_settings = get_settings().app

        self._source = source or HttpTransactionSource()
        self._mode = mode or FetchMode(app_settings.fetch_mode)
        self._audit_logger = audit_logger or AuditLogger(app_settings.event_history_size)
        self._clear_on_failure = (
            app_settings.clear_on_failure if clear_on_failure is None else clear_on_failure
        )

        self._state = PresentationState(mode=self._mode)
        self._generation = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def mode(self) -> FetchMode:
        return self._mode

    @property
    def source(self) -> TransactionSourceInterface:
        return self._source

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every new state.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def aclose(self) -> None:
        """Release the source's resources (e.g. its HTTP client)."""
        await self._source.aclose()

    async def load(self, period: Optional[PeriodCursor] = None) -> LoadResult:
        """
        Load and present the data for a period.

        In SUMMARY mode the period is ignored and all-time data is loaded.

        Returns:
            LoadResult with outcome LOADED, FAILED or SUPERSEDED

        Raises:
            ValueError: PERIOD mode without a period
        """
        if self._mode == FetchMode.PERIOD and period is None:
            raise ValueError("A period is required when loading in period mode")
        if self._mode == FetchMode.SUMMARY:
            period = None

        self._generation += 1
        generation = self._generation
        request_id = create_request_id()

        self._audit_logger.log(
            LoadEventBuilder.load_started(
                request_id=request_id,
                mode=self._mode.value,
                period=_period_key(period),
            )
        )
        self._publish(
            PresentationState(
                status=LoadStatus.LOADING,
                mode=self._mode,
                period=period,
                request_id=request_id,
                transactions=self._state.transactions,
                balance=self._state.balance,
            )
        )

        try:
            response = await self._fetch(period)
        except FetchError as e:
            if generation != self._generation:
                return self._drop(request_id, period, LoadOutcome.FAILED)
            return self._fail(request_id, period, e)

        if generation != self._generation:
            return self._drop(request_id, period, LoadOutcome.LOADED)

        try:
            transactions = tuple(present_transactions(response.transactions))
            balance = present_balance(response.balance)
        except FormatError as e:
            return self._fail(request_id, period, e)

        self._audit_logger.log(
            LoadEventBuilder.load_succeeded(
                request_id=request_id,
                mode=self._mode.value,
                period=_period_key(period),
                transaction_count=len(transactions),
            )
        )
        self._publish(
            PresentationState(
                status=LoadStatus.LOADED,
                mode=self._mode,
                period=period,
                request_id=request_id,
                transactions=transactions,
                balance=balance,
            )
        )

        return LoadResult(
            request_id=request_id,
            mode=self._mode,
            period=period,
            outcome=LoadOutcome.LOADED,
            transactions=transactions,
            balance=balance,
        )

    async def _fetch(self, period: Optional[PeriodCursor]) -> TransactionsResponse:
        """Query the source; every failure surfaces as FetchError."""
        try:
            if period is None:
                return await self._source.fetch_summary()
            return await self._source.fetch_by_period(period)
        except FetchError:
            raise
        except Exception as e:
            raise FetchError(f"Transaction source failed: {type(e).__name__}: {e}") from e

    def _fail(
        self,
        request_id: UUID,
        period: Optional[PeriodCursor],
        error: Exception,
    ) -> LoadResult:
        error_type = type(error).__name__
        details = {}
        if isinstance(error, FetchError) and error.status_code is not None:
            details["status_code"] = error.status_code

        self._audit_logger.log(
            LoadEventBuilder.load_failed(
                request_id=request_id,
                mode=self._mode.value,
                period=_period_key(period),
                error_type=error_type,
                error_message=str(error),
                details=details,
            )
        )

        # Keep the last good data on screen unless told otherwise
        if self._clear_on_failure:
            transactions, balance = (), None
        else:
            transactions, balance = self._state.transactions, self._state.balance

        self._publish(
            PresentationState(
                status=LoadStatus.FAILED,
                mode=self._mode,
                period=period,
                request_id=request_id,
                transactions=transactions,
                balance=balance,
                error_type=error_type,
                error_message=str(error),
            )
        )

        return LoadResult(
            request_id=request_id,
            mode=self._mode,
            period=period,
            outcome=LoadOutcome.FAILED,
            error_type=error_type,
            error_message=str(error),
        )

    def _drop(
        self,
        request_id: UUID,
        period: Optional[PeriodCursor],
        response_outcome: LoadOutcome,
    ) -> LoadResult:
        self._audit_logger.log(
            LoadEventBuilder.stale_response_dropped(
                request_id=request_id,
                mode=self._mode.value,
                period=_period_key(period),
                outcome=response_outcome.value,
            )
        )
        return LoadResult(
            request_id=request_id,
            mode=self._mode,
            period=period,
            outcome=LoadOutcome.SUPERSEDED,
        )

    def _publish(self, state: PresentationState) -> None:
        self._state = state

        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                # A broken view must not stop the others from updating
                self._audit_logger.log(
                    LoadEventBuilder.listener_failed(
                        listener=getattr(listener, "__qualname__", repr(listener)),
                        error_message=str(e),
                    )
                )


class DashboardController:
    """
    Binds the period cursor to the orchestrator.

    Every cursor change schedules exactly one load as an asyncio task.
    Navigation methods must be called from inside a running event loop.
    The view reads month_label and the orchestrator state, and calls
    next_month() / previous_month() on user action.
    """

    def __init__(
        self,
        orchestrator: LoadOrchestrator,
        period: Optional[PeriodCursor] = None,
    ):
        self._orchestrator = orchestrator
        self._period = period or PeriodCursor.current()
        self._pending: set[asyncio.Task] = set()

    @property
    def period(self) -> PeriodCursor:
        return self._period

    @property
    def state(self) -> PresentationState:
        return self._orchestrator.state

    @property
    def month_label(self) -> str:
        return self._period.label()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        return self._orchestrator.subscribe(listener)

    async def start(self) -> LoadResult:
        """Initial load of the current period."""
        return await self._orchestrator.load(self._period)

    def next_month(self) -> asyncio.Task:
        return self._navigate(self._period.next())

    def previous_month(self) -> asyncio.Task:
        return self._navigate(self._period.previous())

    def go_to(self, period: PeriodCursor) -> Optional[asyncio.Task]:
        """Jump to a period. Returns None if it is already selected."""
        if period == self._period:
            return None
        return self._navigate(period)

    def reload(self) -> asyncio.Task:
        """Fetch the current period again (e.g. after a failure)."""
        return self._schedule(self._period)

    async def wait_idle(self) -> list[LoadResult]:
        """Wait for every scheduled load to finish."""
        results = []
        while self._pending:
            tasks = list(self._pending)
            results.extend(await asyncio.gather(*tasks))
            self._pending.difference_update(tasks)
        return results

    def _navigate(self, period: PeriodCursor) -> asyncio.Task:
        previous = self._period
        self._period = period
        self._orchestrator.audit_logger.log(
            LoadEventBuilder.period_changed(
                previous=str(previous),
                current=str(period),
            )
        )
        return self._schedule(period)

    def _schedule(self, period: PeriodCursor) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self._orchestrator.load(period))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task


def _period_key(period: Optional[PeriodCursor]) -> Optional[str]:
    return str(period) if period is not None else None


def create_app_components(
    source: Optional[TransactionSourceInterface] = None,
    period: Optional[PeriodCursor] = None,
) -> tuple[DashboardController, LoadOrchestrator]:
    """
    Factory function to create all application components.

    Args:
        source: Transaction source to use. Defaults to the HTTP
                service configured through DASHBOARD_API_* variables.
        period: Initial period. Defaults to the current month.

    Returns:
        (dashboard_controller, load_orchestrator)

    Call ``await load_orchestrator.aclose()`` when done to release the
    source. An injected source that does not own its client is left open.
    """
    orchestrator = LoadOrchestrator(source=source)
    controller = DashboardController(orchestrator, period=period)
    return controller, orchestrator
