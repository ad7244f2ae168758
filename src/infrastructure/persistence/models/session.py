"""Session database model (refresh token sessions)."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Session(BaseMutableModel):
    """Session model.

    Fields:
        user_id: Owner (FK users.id, ON DELETE CASCADE)
        refresh_token: Current refresh token (unique)
        expires_at: Refresh token expiry (indexed for cleanup)
        ip_address, user_agent: Client metadata at login
        is_valid: False once revoked
    """

    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    refresh_token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        comment="Current refresh token (rotated on use)",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_valid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
