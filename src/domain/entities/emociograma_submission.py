"""Emociograma submission domain entity.

One emotional check-in reported by an employee.

Emotion Scale:
    1-5: positive to neutral (no alert)
    6-10: negative, from tired to very sad (triggers a manager alert)

Anonymity:
    Anonymous submissions keep the user linkage internally (so the author can
    list, export and erase them) but expose ``user_id="anonymous"`` to
    everyone else. LGPD anonymization removes the linkage for good.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors.emociograma_error import EmociogramaError

MIN_EMOTION_LEVEL = 1
MAX_EMOTION_LEVEL = 10
ALERT_THRESHOLD = 6
MAX_COMMENT_LENGTH = 1000
DEFAULT_EMOJI = "😐"
ANONYMOUS_USER_ID = "anonymous"

EMOJI_BY_LEVEL: dict[int, str] = {
    1: "😄",  # very happy
    2: "🙂",
    3: "😌",
    4: "😐",  # neutral
    5: "😕",
    6: "😫",  # tired, alert threshold
    7: "😢",
    8: "😣",
    9: "😟",
    10: "😞",  # very sad
}


def emoji_for_level(level: int) -> str:
    """Map an emotion level to its emoji.

    Args:
        level: Emotion level (1-10).

    Returns:
        str: Emoji for the level, or the neutral face for unknown levels.
    """
    return EMOJI_BY_LEVEL.get(level, DEFAULT_EMOJI)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(slots=True, kw_only=True)
class EmociogramaSubmission:
    """Emotional check-in submission.

    Business Rules:
        - emotion_level is an integer in 1..10
        - comment is trimmed and at most 1000 characters
        - level >= 6 triggers a manager alert
        - Anonymous submissions never expose the author to readers

    Attributes:
        id: Unique submission identifier.
        organization_id: Organization the submission belongs to.
        user_id: Author (None once anonymized under LGPD).
        emotion_level: Reported level (1-10).
        emotion_emoji: Emoji derived from the level.
        category_id: Optional emotion category.
        is_anonymous: Whether the author asked to stay anonymous.
        comment: Moderated free text.
        comment_flagged: True when moderation flagged the comment.
        submitted_at: When the employee submitted.
        department: Optional department for aggregation.
        team: Optional team for aggregation.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    organization_id: UUID
    user_id: UUID | None
    emotion_level: int
    emotion_emoji: str = DEFAULT_EMOJI
    category_id: UUID | None = None
    is_anonymous: bool = False
    comment: str | None = None
    comment_flagged: bool = False
    submitted_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    department: str | None = None
    team: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate submission after initialization.

        Raises:
            ValueError: If emotion level or comment length is invalid.
        """
        if (
            isinstance(self.emotion_level, bool)
            or not isinstance(self.emotion_level, int)
            or not MIN_EMOTION_LEVEL <= self.emotion_level <= MAX_EMOTION_LEVEL
        ):
            raise ValueError(EmociogramaError.INVALID_EMOTION_LEVEL)

        if self.comment is not None and len(self.comment) > MAX_COMMENT_LENGTH:
            raise ValueError(EmociogramaError.COMMENT_TOO_LONG)

    @classmethod
    def create(
        cls,
        *,
        organization_id: UUID,
        user_id: UUID,
        emotion_level: int,
        category_id: UUID | None = None,
        is_anonymous: bool = False,
        comment: str | None = None,
        department: str | None = None,
        team: str | None = None,
    ) -> "EmociogramaSubmission":
        """Create a validated submission.

        Args:
            organization_id: Organization of the author.
            user_id: Author.
            emotion_level: Reported level (1-10).
            category_id: Optional emotion category.
            is_anonymous: Hide the author from readers.
            comment: Free text (already moderated by the caller).
            department: Optional department.
            team: Optional team.

        Returns:
            New EmociogramaSubmission (not yet persisted).

        Raises:
            ValueError: If emotion level or comment length is invalid.
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            organization_id=organization_id,
            user_id=user_id,
            emotion_level=emotion_level,
            emotion_emoji=emoji_for_level(emotion_level),
            category_id=category_id,
            is_anonymous=is_anonymous,
            comment=_clean(comment),
            submitted_at=now,
            department=_clean(department),
            team=_clean(team),
            created_at=now,
            updated_at=now,
        )

    def should_trigger_alert(self) -> bool:
        """Check if the level requires a manager alert (>= 6)."""
        return self.emotion_level >= ALERT_THRESHOLD

    def mask_identity(self) -> dict[str, Any]:
        """Return the submission as seen by readers.

        Anonymous submissions replace ``user_id`` with ``"anonymous"`` and
        keep department and team for aggregation.

        Returns:
            dict: Submission fields with the identity masked if anonymous.
        """
        user_id: UUID | str | None = self.user_id
        if self.is_anonymous:
            user_id = ANONYMOUS_USER_ID
        return {
            "id": self.id,
            "organization_id": self.organization_id,
            "user_id": user_id,
            "emotion_level": self.emotion_level,
            "emotion_emoji": self.emotion_emoji,
            "category_id": self.category_id,
            "is_anonymous": self.is_anonymous,
            "comment": self.comment,
            "comment_flagged": self.comment_flagged,
            "submitted_at": self.submitted_at,
            "department": self.department,
            "team": self.team,
        }

    def apply_moderation(self, sanitized_comment: str, *, flagged: bool) -> None:
        """Replace the comment with its moderated form.

        The length limit applies to what the employee typed; the escaped
        form may be longer.

        Args:
            sanitized_comment: Masked and escaped comment ("" clears it).
            flagged: Whether moderation asked for human review.
        """
        self.comment = sanitized_comment or None
        self.comment_flagged = flagged
        self.updated_at = datetime.now(UTC)

    def flag_comment(self) -> None:
        """Mark the comment for moderation review."""
        self.comment_flagged = True
        self.updated_at = datetime.now(UTC)

    def unflag_comment(self) -> None:
        """Clear the moderation flag after review."""
        self.comment_flagged = False
        self.updated_at = datetime.now(UTC)

    def anonymize(self) -> None:
        """Irreversibly detach the submission from its author.

        Level, emoji, category and timestamps are kept for aggregate
        reporting. The comment and the user linkage are dropped.
        """
        self.user_id = None
        self.is_anonymous = True
        self.comment = None
        self.comment_flagged = False
        self.updated_at = datetime.now(UTC)
