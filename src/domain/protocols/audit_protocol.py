"""Audit trail protocol (port) for LGPD compliance tracking.

Infrastructure adapters implement this protocol (PostgresAuditAdapter).
The application layer only sees the protocol.

Compliance:
    LGPD: every access to or change of personal data is recorded.
    Retention: 2 years, enforced by ``purge_older_than``.

Usage:
    from src.domain.protocols import AuditProtocol
    from src.domain.enums import AuditAction

    audit: AuditProtocol = Depends(get_audit)

    result = await audit.record(
        action=AuditAction.USER_DATA_EXPORTED,
        user_id=user_id,
        organization_id=organization_id,
        resource_type="user",
        context={"submissions_count": 12},
    )
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.audit_log_entry import AuditLogEntry
from src.domain.enums import AuditAction
from src.domain.errors import AuditError

MAX_QUERY_LIMIT = 1000


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditPage:
    """One page of audit entries.

    Attributes:
        entries: Entries in the page, newest first.
        total: Total entries matching the filters.
    """

    entries: list[AuditLogEntry]
    total: int


class AuditProtocol(Protocol):
    """Protocol for the append-only audit trail.

    Error Handling:
        All methods return Result types (Success or Failure).
        NEVER raise exceptions - wrap in Failure(AuditError(...)) instead.
    """

    async def record(
        self,
        *,
        action: AuditAction,
        user_id: UUID | None,
        organization_id: UUID | None = None,
        performed_by: UUID | None = None,
        resource_type: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        """Record an immutable audit entry.

        Committed immediately, independent of the caller's transaction, so
        the entry survives a later rollback of the business operation.

        Args:
            action: What happened.
            user_id: Subject of the action (None for system actions).
            organization_id: Organization context.
            performed_by: Actor when different from the subject.
            resource_type: Kind of resource touched.
            ip_address: Client IP address.
            user_agent: Client user agent.
            context: Additional metadata (stored as JSON).

        Returns:
            Success(None) when stored, Failure(AuditError) otherwise.
        """
        ...

    async def query(
        self,
        *,
        user_id: UUID | None = None,
        organization_id: UUID | None = None,
        action: AuditAction | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[AuditPage, AuditError]:
        """Query the audit trail, newest first.

        Args:
            user_id: Filter by subject.
            organization_id: Filter by organization.
            action: Filter by action.
            start_date: Inclusive lower bound on created_at.
            end_date: Inclusive upper bound on created_at.
            limit: Page size, capped at 1000.
            offset: Rows to skip.

        Returns:
            Success(AuditPage) or Failure(AuditError).
        """
        ...

    async def purge_older_than(self, cutoff: datetime) -> Result[int, AuditError]:
        """Delete entries created before ``cutoff`` (retention policy).

        This is the only operation that removes audit entries.

        Args:
            cutoff: Entries strictly older than this are deleted.

        Returns:
            Success(deleted_count) or Failure(AuditError).
        """
        ...
