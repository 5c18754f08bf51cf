"""Services package."""

from finance_dashboard.services.api import (
    FetchError,
    HttpTransactionSource,
    MalformedResponseError,
    TransactionSourceInterface,
)

__all__ = [
    "FetchError",
    "HttpTransactionSource",
    "MalformedResponseError",
    "TransactionSourceInterface",
]
