"""Emociograma alert domain entity.

Created when a submission reaches the alert threshold (level >= 6) and
routed to the organization's managers (gestor and admin roles).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.entities.emociograma_submission import EmociogramaSubmission
from src.domain.enums import AlertSeverity, AlertType
from src.domain.errors.emociograma_error import EmociogramaError

EMOTION_DESCRIPTIONS: dict[int, str] = {
    6: "Cansado 😫",
    7: "Triste 😢",
    8: "Estressado 😣",
    9: "Ansioso 😟",
    10: "Muito triste 😞",
}


def build_alert_message(submission: EmociogramaSubmission) -> str:
    """Build the human readable alert message for a submission.

    Format:
        "Colaborador reportou estado emocional {desc} (Nível N/10). {location}."

    Args:
        submission: Submission that triggered the alert.

    Returns:
        str: Alert message in Portuguese.
    """
    description = EMOTION_DESCRIPTIONS.get(submission.emotion_level, "Negativo")
    if submission.team:
        location = f"Equipe: {submission.team}"
    elif submission.department:
        location = f"Departamento: {submission.department}"
    else:
        location = "Localização não especificada"
    return (
        f"Colaborador reportou estado emocional {description} "
        f"(Nível {submission.emotion_level}/10). {location}."
    )


@dataclass(slots=True, kw_only=True)
class EmociogramaAlert:
    """Manager alert for a concerning submission.

    Business Rules:
        - Exactly one alert per submission
        - Severity is derived from the emotion level
        - An alert is resolved once, by an identified user
        - Notification is recorded only for at least one recipient

    Attributes:
        id: Unique alert identifier.
        organization_id: Organization of the submission.
        submission_id: Submission that triggered the alert.
        alert_type: threshold_exceeded or pattern_detected.
        severity: low, medium, high or critical.
        message: Human readable description.
        is_resolved: Resolution status.
        resolved_at: Resolution timestamp.
        resolved_by: User who resolved the alert.
        resolution_notes: Optional resolution notes.
        notified_users: Users that received the notification email.
        notification_sent_at: When notifications were recorded.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    organization_id: UUID
    submission_id: UUID
    alert_type: AlertType
    severity: AlertSeverity
    message: str
    is_resolved: bool = False
    resolved_at: datetime | None = None
    resolved_by: UUID | None = None
    resolution_notes: str | None = None
    notified_users: list[UUID] = field(default_factory=list)
    notification_sent_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate alert after initialization.

        Raises:
            ValueError: If the message is empty.
        """
        if not self.message or not self.message.strip():
            raise ValueError(EmociogramaError.EMPTY_ALERT_MESSAGE)

    @classmethod
    def from_submission(cls, submission: EmociogramaSubmission) -> "EmociogramaAlert":
        """Create a threshold alert for a submission.

        Args:
            submission: Persisted submission that reached the threshold.

        Returns:
            New EmociogramaAlert (not yet persisted).
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            organization_id=submission.organization_id,
            submission_id=submission.id,
            alert_type=AlertType.THRESHOLD_EXCEEDED,
            severity=AlertSeverity.from_emotion_level(submission.emotion_level),
            message=build_alert_message(submission),
            created_at=now,
            updated_at=now,
        )

    def is_pending(self) -> bool:
        """Check if the alert still awaits resolution."""
        return not self.is_resolved

    def was_notification_sent(self) -> bool:
        """Check if at least one manager was notified."""
        return bool(self.notified_users) and self.notification_sent_at is not None

    def resolve(
        self, *, resolved_by: UUID | None, notes: str | None = None
    ) -> Result[None, str]:
        """Mark the alert as resolved.

        Args:
            resolved_by: Manager resolving the alert.
            notes: Optional notes about the action taken.

        Returns:
            Success(None): Alert resolved.
            Failure(error): Missing resolver or already resolved.

        Side Effects (on success):
            - Sets is_resolved, resolved_at, resolved_by, resolution_notes
            - Updates updated_at timestamp
        """
        if resolved_by is None:
            return Failure(error=EmociogramaError.MISSING_RESOLVER)
        if self.is_resolved:
            return Failure(error=EmociogramaError.ALERT_ALREADY_RESOLVED)

        now = datetime.now(UTC)
        self.is_resolved = True
        self.resolved_at = now
        self.resolved_by = resolved_by
        self.resolution_notes = (notes or "").strip() or None
        self.updated_at = now
        return Success(value=None)

    def record_notification(self, user_ids: list[UUID]) -> Result[None, str]:
        """Record which managers received the alert email.

        Args:
            user_ids: Successfully notified managers.

        Returns:
            Success(None): Notification recorded.
            Failure(error): Empty recipient list.
        """
        if not user_ids:
            return Failure(error=EmociogramaError.NO_NOTIFIED_USERS)

        now = datetime.now(UTC)
        self.notified_users = list(user_ids)
        self.notification_sent_at = now
        self.updated_at = now
        return Success(value=None)
