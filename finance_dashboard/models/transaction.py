"""
Transaction and Balance Models

These models define the schemas for everything the transactions
service sends us and everything we hand to the view. They are designed to:
1. Reject malformed service payloads at the boundary
2. Accept the service's camelCase field names
3. Be immutable, so derived data is replaced rather than patched

DESIGN DECISION: Raw models mirror the service contract exactly.
Presented models extend them with display strings only; they never
change a raw value.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class TransactionType(str, Enum):
    """Direction of a transaction as reported by the service."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


# Shared config: camelCase on the wire, snake_case in Python, frozen
_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


# =============================================================================
# RAW RECORDS - exactly what the service returns
# =============================================================================

class Category(BaseModel):
    """Category attached to a transaction. Only the name is used."""
    model_config = _WIRE_CONFIG

    name: str


class RawTransaction(BaseModel):
    """
    A transaction as received from the service.

    The description may be missing or empty; the presenter
    substitutes a placeholder for display.
    """
    model_config = _WIRE_CONFIG

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque identifier"
    )
    description: str = Field(
        default="",
        description="Free text title, possibly empty"
    )
    value: Decimal = Field(
        ...,
        ge=0,
        description="Magnitude of the transaction"
    )
    type: TransactionType
    category: Category
    created_at: datetime

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        """Some backends send numeric ids."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('description', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


class RawBalance(BaseModel):
    """
    Period totals computed by the service.

    CRITICAL: These are trusted as-is. We never recompute them
    from the transaction list.
    """
    model_config = _WIRE_CONFIG

    total_income: Decimal = Field(..., ge=0)
    total_expense: Decimal = Field(..., ge=0)
    total: Decimal = Field(
        ...,
        description="Net result, negative for a loss"
    )


class TransactionsResponse(BaseModel):
    """Payload returned by both the period and the summary query."""
    model_config = _WIRE_CONFIG

    transactions: list[RawTransaction]
    balance: RawBalance


# =============================================================================
# PRESENTED RECORDS - display-ready
# =============================================================================

class PresentedTransaction(RawTransaction):
    """
    A raw transaction plus its display strings.

    description is never empty here.
    """

    description: str = Field(..., min_length=1)
    formatted_value: str = Field(..., min_length=1)
    formatted_date: str = Field(..., min_length=1)


class PresentedBalance(RawBalance):
    """Balance totals plus their currency strings."""

    formatted_income: str = Field(..., min_length=1)
    formatted_outcome: str = Field(..., min_length=1)
    formatted_total: str = Field(..., min_length=1)
