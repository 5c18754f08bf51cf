"""
Transactions Service Package

Provides the abstract source interface and its HTTP implementation.
"""

from finance_dashboard.services.api.interface import (
    FetchError,
    MalformedResponseError,
    TransactionSourceInterface,
)
from finance_dashboard.services.api.http_source import HttpTransactionSource

__all__ = [
    # Interface
    "TransactionSourceInterface",
    # Exceptions
    "FetchError",
    "MalformedResponseError",
    # HTTP implementation
    "HttpTransactionSource",
]
