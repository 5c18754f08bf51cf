"""
Transactions Service over HTTP

This service handles:
1. Issuing the period query (GET transactions/search?month=&year=)
2. Issuing the all-time query (GET transactions)
3. Turning every transport or protocol problem into FetchError
4. Validating the payload into TransactionsResponse

CRITICAL: There is no implicit retry. A request is attempted once unless
DASHBOARD_API_MAX_ATTEMPTS says otherwise, and then only transport
errors and 5xx responses are retried.
"""

from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from finance_dashboard.config import ApiSettings, get_settings
from finance_dashboard.models.period import PeriodCursor
from finance_dashboard.models.transaction import TransactionsResponse
from finance_dashboard.services.api.interface import (
    FetchError,
    MalformedResponseError,
    TransactionSourceInterface,
)


def _is_retryable(error: BaseException) -> bool:
    """Transport failures and server errors may succeed on a second try."""
    if not isinstance(error, FetchError) or isinstance(error, MalformedResponseError):
        return False
    return error.status_code is None or error.status_code >= 500


class HttpTransactionSource(TransactionSourceInterface):
    """
    Transaction source backed by the REST transactions service.

    Args:
        settings: API settings; defaults to the configured ones
        client: An httpx.AsyncClient to use instead of building one.
            The caller keeps ownership of an injected client.
    """

    def __init__(
        self,
        settings: Optional[ApiSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or get_settings().api
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=httpx.Timeout(self._settings.timeout_seconds),
        )
        self._logger = structlog.get_logger(__name__)

    async def __aenter__(self) -> "HttpTransactionSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_by_period(self, period: PeriodCursor) -> TransactionsResponse:
        return await self._get(self._settings.search_path, params=period.query_params())

    async def fetch_summary(self) -> TransactionsResponse:
        return await self._get(self._settings.summary_path)

    async def _get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> TransactionsResponse:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._settings.max_attempts),
            wait=wait_exponential(
                multiplier=self._settings.retry_wait_seconds,
                max=30,
            ),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                payload = await self._request(
                    path,
                    params,
                    attempt.retry_state.attempt_number,
                )

        try:
            return TransactionsResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected payload from {path}: {e.error_count()} invalid field(s)"
            ) from e

    async def _request(
        self,
        path: str,
        params: Optional[dict[str, Any]],
        attempt_number: int,
    ) -> Any:
        """One GET; returns the decoded JSON body."""
        self._logger.debug(
            "transactions_request",
            path=path,
            params=params,
            attempt=attempt_number,
        )

        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {path} failed: {e}") from e

        self._logger.debug(
            "transactions_response",
            path=path,
            status_code=response.status_code,
        )

        if response.is_error:
            raise FetchError(
                f"{path} answered {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"{path} did not return JSON",
                status_code=response.status_code,
            ) from e
