"""Emociograma submission database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EmociogramaSubmission(BaseMutableModel):
    """Emotional check-in submission.

    Fields:
        organization_id: Organization scope (indexed)
        user_id: Author (FK users.id, SET NULL; NULL once anonymized)
        emotion_level: 1..10
        emotion_emoji: Emoji derived from the level
        category_id: Optional emotion category (FK emociograma_categories.id)
        is_anonymous: Author hidden from readers
        comment: Moderated text (NULL once anonymized)
        comment_flagged: Moderation flag
        submitted_at: Submission time
        department, team: Aggregation dimensions

    Indexes:
        - ix_submissions_org_user: (organization_id, user_id) for "my submissions"
    """

    __tablename__ = "emociograma_submissions"
    __table_args__ = (
        Index("ix_submissions_org_user", "organization_id", "user_id"),
    )

    organization_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    emotion_level: Mapped[int] = mapped_column(Integer, nullable=False)
    emotion_emoji: Mapped[str] = mapped_column(String(10), nullable=False)
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("emociograma_categories.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    is_anonymous: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    comment_flagged: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    team: Mapped[str | None] = mapped_column(String(100), nullable=True)
