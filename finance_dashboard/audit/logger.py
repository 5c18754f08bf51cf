"""
Load Audit Logger

DESIGN DECISION: Every load the dashboard performs is recorded.
This provides:
1. Traceability of which month was requested and when
2. Debugging capability when the service misbehaves
3. Evidence that stale responses were dropped, not shown

The audit logger:
- Writes each event to the structured local log
- Keeps a bounded in-memory history the host application can inspect
"""

from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from finance_dashboard.models.audit import EventSeverity, LoadEvent


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central load event logger.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory history (for the host application and tests)
    """

    def __init__(self, history_size: int = 200):
        """
        Initialize audit logger.

        Args:
            history_size: How many events to keep. Oldest are dropped first.
        """
        self._history: deque[LoadEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger("finance_dashboard.audit")

    def log(self, event: LoadEvent) -> None:
        """Record an event locally and in the history."""
        self._history.append(event)

        log_dict = event.to_log_dict()

        if event.severity == EventSeverity.ERROR:
            self._logger.error("load_event", **log_dict)
        elif event.severity == EventSeverity.WARNING:
            self._logger.warning("load_event", **log_dict)
        elif event.severity == EventSeverity.DEBUG:
            self._logger.debug("load_event", **log_dict)
        else:
            self._logger.info("load_event", **log_dict)

    def recent_events(self, limit: Optional[int] = None) -> list[LoadEvent]:
        """
        Most recent events, newest first.
        """
        events = list(reversed(self._history))
        return events if limit is None else events[:limit]

    def events_for_request(self, request_id: UUID) -> list[LoadEvent]:
        """All events of one load, in chronological order."""
        return [e for e in self._history if e.request_id == request_id]

    def clear(self) -> None:
        self._history.clear()


def create_request_id() -> UUID:
    """
    Create a new identifier for one load.

    Every event produced while serving that load carries it.
    """
    return uuid4()
