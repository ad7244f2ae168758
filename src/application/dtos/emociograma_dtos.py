"""Emociograma DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities import (
    EmociogramaAlert,
    EmociogramaCategory,
    EmociogramaSubmission,
)


@dataclass(frozen=True, kw_only=True)
class SubmissionResult:
    """Submission as returned to readers.

    ``user_id`` is the string "anonymous" for anonymous submissions.
    """

    id: UUID
    organization_id: UUID
    user_id: UUID | str | None
    emotion_level: int
    emotion_emoji: str
    category_id: UUID | None
    is_anonymous: bool
    comment: str | None
    comment_flagged: bool
    submitted_at: datetime
    department: str | None
    team: str | None

    @classmethod
    def from_entity(
        cls, submission: EmociogramaSubmission, *, reveal_author: bool = False
    ) -> "SubmissionResult":
        """Map a submission, masking the author when anonymous.

        Args:
            submission: Submission entity.
            reveal_author: Keep the real ``user_id`` (the author reading
                their own submission).
        """
        fields = submission.mask_identity()
        if reveal_author:
            fields["user_id"] = submission.user_id
        return cls(**fields)


@dataclass(frozen=True, kw_only=True)
class SubmissionPage:
    """Paginated submissions."""

    data: list[SubmissionResult]
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass(frozen=True, kw_only=True)
class AlertResult:
    """Alert as returned to managers."""

    id: UUID
    organization_id: UUID
    submission_id: UUID
    alert_type: str
    severity: str
    message: str
    is_resolved: bool
    resolved_at: datetime | None
    resolved_by: UUID | None
    resolution_notes: str | None
    notified_users: list[UUID]
    notification_sent_at: datetime | None
    created_at: datetime

    @classmethod
    def from_entity(cls, alert: EmociogramaAlert) -> "AlertResult":
        """Map an alert entity to the DTO."""
        return cls(
            id=alert.id,
            organization_id=alert.organization_id,
            submission_id=alert.submission_id,
            alert_type=alert.alert_type.value,
            severity=alert.severity.value,
            message=alert.message,
            is_resolved=alert.is_resolved,
            resolved_at=alert.resolved_at,
            resolved_by=alert.resolved_by,
            resolution_notes=alert.resolution_notes,
            notified_users=list(alert.notified_users),
            notification_sent_at=alert.notification_sent_at,
            created_at=alert.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class AlertPage:
    """Paginated alerts."""

    data: list[AlertResult]
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass(frozen=True, kw_only=True)
class AlertStatisticsResult:
    """Dashboard counters.

    ``by_severity`` always holds the four severities, most severe first.
    """

    total: int
    unresolved: int
    resolved_today: int
    by_severity: dict[str, int]


@dataclass(frozen=True, kw_only=True)
class AlertDashboard:
    """Alert dashboard of an organization.

    Attributes:
        statistics: Organization-wide counters.
        recent_alerts: Up to 10 pending alerts, most severe first.
    """

    statistics: AlertStatisticsResult
    recent_alerts: list[AlertResult]


@dataclass(frozen=True, kw_only=True)
class CategoryResult:
    """Emotion category."""

    id: UUID
    name: str
    slug: str
    description: str | None
    icon: str | None
    display_order: int
    is_active: bool

    @classmethod
    def from_entity(cls, category: EmociogramaCategory) -> "CategoryResult":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            icon=category.icon,
            display_order=category.display_order,
            is_active=category.is_active,
        )
