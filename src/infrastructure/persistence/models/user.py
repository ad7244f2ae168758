"""User database model.

Identity lives in Supabase; this table holds the profile, the organization
membership and the role used for authorization.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        email: Unique address (lowercase, indexed)
        first_name, last_name, photo_url, bio: Profile
        preferences: JSON {language, theme, notifications, timezone}
        identity_provider_user_id: Supabase user id (unique, nullable)
        organization_id: Organization membership (indexed)
        role: colaborador, gestor or admin (indexed)
        is_active: Deactivated users cannot log in
        last_login_at: Last successful magic link verification
        deleted_at: Soft delete marker

    Relationships:
        - sessions: One-to-many (cascade delete at the database level)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )
    first_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferences: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="UI and notification preferences",
    )
    identity_provider_user_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        unique=True,
        index=True,
        comment="Supabase auth user id",
    )
    organization_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
        index=True,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="colaborador",
        index=True,
        comment="colaborador, gestor or admin",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Account active status (deactivated users cannot login)",
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
        comment="Soft delete timestamp",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<User(id={self.id}, email={self.email!r}, role={self.role!r}, "
            f"is_active={self.is_active})>"
        )
