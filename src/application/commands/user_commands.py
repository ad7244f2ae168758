"""User management commands (CQRS write operations)."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a user on behalf of a manager.

    Attributes:
        email: Unique email address.
        first_name: First name (2-50 characters).
        last_name: Last name (up to 50 characters).
        bio: Optional bio (up to 500 characters).
        organization_id: Organization the user joins.
        role: Initial role.
        created_by: Manager performing the action.
    """

    email: str
    first_name: str
    last_name: str | None = None
    bio: str | None = None
    organization_id: UUID | None = None
    role: UserRole = UserRole.COLABORADOR
    created_by: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Update profile fields and preferences.

    Only non-None fields are applied.

    Attributes:
        user_id: User to update.
        first_name: New first name.
        last_name: New last name.
        bio: New bio.
        photo_url: New photo URL.
        preferences: Partial preferences (language, theme, notifications, timezone).
        updated_by: User performing the change.
    """

    user_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    photo_url: str | None = None
    preferences: dict[str, Any] | None = None
    updated_by: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a user account.

    Attributes:
        user_id: User to delete.
        hard_delete: Remove the row instead of soft deleting.
        deleted_by: Admin performing the deletion.
    """

    user_id: UUID
    hard_delete: bool = False
    deleted_by: UUID | None = None
