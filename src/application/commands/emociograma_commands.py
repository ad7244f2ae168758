"""Emociograma commands (check-in submission and alert resolution)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SubmitEmociograma:
    """Record an emotional check-in.

    Attributes:
        user_id: Author.
        organization_id: Organization of the author.
        emotion_level: Level 1 (very happy) to 10 (very sad).
        category_id: Optional emotion category.
        is_anonymous: Hide the author from readers.
        comment: Optional free text (moderated before storage).
        department: Optional department.
        team: Optional team.
    """

    user_id: UUID
    organization_id: UUID
    emotion_level: int
    category_id: UUID | None = None
    is_anonymous: bool = False
    comment: str | None = None
    department: str | None = None
    team: str | None = None


@dataclass(frozen=True, kw_only=True)
class ResolveAlert:
    """Mark a manager alert as handled.

    Attributes:
        alert_id: Alert to resolve.
        organization_id: Organization of the manager.
        resolved_by: Manager resolving the alert.
        notes: Optional notes (up to 500 characters).
    """

    alert_id: UUID
    organization_id: UUID
    resolved_by: UUID
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateCategory:
    """Add an emotion category (admin).

    Attributes:
        name: Display name, 2-50 characters. Its slug must be unused.
        display_order: Position in pickers (>= 0).
        description: Optional description.
        icon: Optional icon name or emoji.
    """

    name: str
    display_order: int = 0
    description: str | None = None
    icon: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateCategory:
    """Partially update a category. ``None`` fields are left unchanged."""

    category_id: UUID
    name: str | None = None
    description: str | None = None
    icon: str | None = None
    display_order: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeactivateCategory:
    """Hide a category from new submissions."""

    category_id: UUID
