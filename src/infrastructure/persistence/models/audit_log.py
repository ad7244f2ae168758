"""Audit log database model for LGPD compliance tracking.

Append-only: the application never updates rows, and only the retention
purge (2 years) deletes them.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class AuditLog(BaseModel):
    """Audit log model (no updated_at).

    Fields:
        id, created_at: From BaseModel (created_at indexed for retention)
        action: What happened (e.g. user_login, user_data_exported)
        user_id: Subject of the action (no FK, survives user deletion)
        organization_id: Organization context
        performed_by: Actor when different from the subject
        resource_type: Kind of resource touched
        ip_address, user_agent: Client metadata
        context: JSON metadata

    Indexes:
        - ix_audit_user_action: (user_id, action) for audit trail queries
    """

    __tablename__ = "audit_logs"
    __table_args__ = (Index("ix_audit_user_action", "user_id", "action"),)

    action: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Audit action type (e.g., user_login, user_data_exported)",
    )
    user_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    organization_id: Mapped[UUID | None] = mapped_column(
        Uuid, nullable=True, index=True
    )
    performed_by: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    resource_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    context: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<AuditLog(id={self.id}, action={self.action!r}, "
            f"user_id={self.user_id})>"
        )
