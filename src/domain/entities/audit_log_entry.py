"""Audit log entry domain entity.

Read model for the append-only audit trail. Entries are written through
``AuditProtocol.record`` and never modified afterwards; only the retention
purge removes them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.enums import AuditAction


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditLogEntry:
    """Immutable audit trail entry.

    Attributes:
        id: Unique entry identifier.
        action: What happened (AuditAction value, stored as string).
        user_id: Subject of the action.
        organization_id: Organization context, if any.
        performed_by: Actor when different from the subject (e.g. admin).
        resource_type: Kind of resource touched ("user", "submission", ...).
        ip_address: Client IP address.
        user_agent: Client user agent.
        context: Additional action metadata.
        created_at: When the action was recorded.
    """

    id: UUID
    action: str
    user_id: UUID | None
    created_at: datetime
    organization_id: UUID | None = None
    performed_by: UUID | None = None
    resource_type: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def is_lgpd_action(self) -> bool:
        """Check if the entry records an LGPD data subject right."""
        try:
            return AuditAction(self.action).is_lgpd_action
        except ValueError:
            return False

    def is_security_event(self) -> bool:
        """Check if the entry records an authentication event."""
        return self.action in {AuditAction.USER_LOGIN.value, AuditAction.USER_LOGOUT.value}
