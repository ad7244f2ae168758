"""Emociograma alert database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EmociogramaAlert(BaseMutableModel):
    """Manager alert for a submission at or above the alert threshold.

    Fields:
        organization_id: Organization scope
        submission_id: Triggering submission (FK, unique, CASCADE)
        alert_type: threshold_exceeded or pattern_detected
        severity: low, medium, high or critical
        message: Human readable description
        is_resolved, resolved_at, resolved_by, resolution_notes: Resolution
        notified_users: JSON list of manager ids (strings)
        notification_sent_at: When notifications were recorded

    Indexes:
        - ix_alerts_org_resolved: (organization_id, is_resolved) for dashboards
    """

    __tablename__ = "emociograma_alerts"
    __table_args__ = (
        Index("ix_alerts_org_resolved", "organization_id", "is_resolved"),
    )

    organization_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    submission_id: Mapped[UUID] = mapped_column(
        ForeignKey("emociograma_submissions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    alert_type: Mapped[str] = mapped_column(String(30), nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resolved_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    resolved_by: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    resolution_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    notified_users: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
    notification_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
