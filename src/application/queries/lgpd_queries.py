"""LGPD queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AuditAction


@dataclass(frozen=True, kw_only=True)
class GetAuditTrail:
    """Read the audit trail of a user, newest first.

    Attributes:
        user_id: Subject of the entries.
        organization_id: Optional organization filter.
        action: Optional action filter.
        limit: Page size (1-1000).
        offset: Entries to skip.
    """

    user_id: UUID
    organization_id: UUID | None = None
    action: AuditAction | None = None
    limit: int = 100
    offset: int = 0
