"""
Load Event Models

Every load the dashboard performs leaves a trail of events:
when it started, how it ended, and whether its response was thrown
away because the user had already moved to another month.

DESIGN DECISION: Events are append-only records. The in-memory
history is bounded, but an event is never modified once created.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class LoadEventType(str, Enum):
    """Types of events the dashboard records."""
    # Navigation
    PERIOD_CHANGED = "period_changed"

    # Load lifecycle
    LOAD_STARTED = "load_started"
    LOAD_SUCCEEDED = "load_succeeded"
    LOAD_FAILED = "load_failed"
    STALE_RESPONSE_DROPPED = "stale_response_dropped"

    # Publishing
    LISTENER_FAILED = "listener_failed"


class EventSeverity(str, Enum):
    """Severity level for load events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LoadEvent(BaseModel):
    """A single entry of the load trail."""

    # Identity
    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    # Classification
    event_type: LoadEventType
    severity: EventSeverity = EventSeverity.INFO

    # Which load this is about
    request_id: Optional[UUID] = None
    mode: Optional[str] = None
    period: Optional[str] = Field(
        default=None,
        description="Period as YYYY-MM, None for summary loads"
    )

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    # Error information (if applicable)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "request_id": str(self.request_id) if self.request_id else None,
            "mode": self.mode,
            "period": self.period,
            "description": self.description,
            "details": self.details,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class LoadEventBuilder:
    """
    Helper class to build load events with common patterns.

    Usage:
        event = LoadEventBuilder.load_started(request_id, "period", "2024-01")
        event = LoadEventBuilder.period_changed("2024-01", "2024-02")
    """

    @staticmethod
    def period_changed(
        previous: Optional[str],
        current: str,
    ) -> LoadEvent:
        return LoadEvent(
            event_type=LoadEventType.PERIOD_CHANGED,
            period=current,
            description=f"Period changed to {current}",
            details={"previous_period": previous},
            is_user_action=True,
        )

    @staticmethod
    def load_started(
        request_id: UUID,
        mode: str,
        period: Optional[str],
    ) -> LoadEvent:
        target = period or "all time"
        return LoadEvent(
            event_type=LoadEventType.LOAD_STARTED,
            request_id=request_id,
            mode=mode,
            period=period,
            description=f"Loading transactions for {target}",
        )

    @staticmethod
    def load_succeeded(
        request_id: UUID,
        mode: str,
        period: Optional[str],
        transaction_count: int,
    ) -> LoadEvent:
        return LoadEvent(
            event_type=LoadEventType.LOAD_SUCCEEDED,
            request_id=request_id,
            mode=mode,
            period=period,
            description=f"Loaded {transaction_count} transactions",
            details={"transaction_count": transaction_count},
        )

    @staticmethod
    def load_failed(
        request_id: UUID,
        mode: str,
        period: Optional[str],
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> LoadEvent:
        return LoadEvent(
            event_type=LoadEventType.LOAD_FAILED,
            severity=EventSeverity.ERROR,
            request_id=request_id,
            mode=mode,
            period=period,
            description=f"Load failed: {error_type}",
            details=details or {},
            error_type=error_type,
            error_message=error_message[:1000],
        )

    @staticmethod
    def stale_response_dropped(
        request_id: UUID,
        mode: str,
        period: Optional[str],
        outcome: str,
    ) -> LoadEvent:
        return LoadEvent(
            event_type=LoadEventType.STALE_RESPONSE_DROPPED,
            severity=EventSeverity.DEBUG,
            request_id=request_id,
            mode=mode,
            period=period,
            description="Response discarded: a newer load has started",
            details={"response_outcome": outcome},
        )

    @staticmethod
    def listener_failed(
        listener: str,
        error_message: str,
    ) -> LoadEvent:
        return LoadEvent(
            event_type=LoadEventType.LISTENER_FAILED,
            severity=EventSeverity.WARNING,
            description=f"State listener {listener} raised",
            details={"listener": listener},
            error_message=error_message[:1000],
        )
