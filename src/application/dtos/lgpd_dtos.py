"""LGPD DTOs (export payload and audit trail)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.entities import AuditLogEntry


@dataclass(frozen=True, kw_only=True)
class UserDataExport:
    """Portable copy of the user's data.

    Attributes:
        profile: id, email, first_name, last_name, created_at.
        submissions: Submissions without internal identifiers.
        exported_at: Export timestamp.
        format: Always "json".
    """

    profile: dict[str, Any]
    submissions: list[dict[str, Any]] = field(default_factory=list)
    exported_at: datetime
    format: str = "json"


@dataclass(frozen=True, kw_only=True)
class AuditEntryResult:
    """Audit trail entry as returned by the API."""

    id: UUID
    action: str
    user_id: UUID | None
    organization_id: UUID | None
    performed_by: UUID | None
    resource_type: str | None
    ip_address: str | None
    user_agent: str | None
    context: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: AuditLogEntry) -> "AuditEntryResult":
        """Map a domain entry to the DTO."""
        return cls(
            id=entry.id,
            action=entry.action,
            user_id=entry.user_id,
            organization_id=entry.organization_id,
            performed_by=entry.performed_by,
            resource_type=entry.resource_type,
            ip_address=entry.ip_address,
            user_agent=entry.user_agent,
            context=dict(entry.context),
            created_at=entry.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuditTrailPage:
    """Audit entries with the total count."""

    data: list[AuditEntryResult]
    total: int


@dataclass(frozen=True, kw_only=True)
class LgpdActionResult:
    """Outcome of an anonymization or erasure request.

    Attributes:
        message: Human-readable confirmation.
        affected_records: Submissions touched by the action.
    """

    message: str
    affected_records: int = 0
