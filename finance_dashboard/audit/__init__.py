"""Audit logging package."""

from finance_dashboard.audit.logger import AuditLogger, create_request_id

__all__ = ["AuditLogger", "create_request_id"]
