"""User DTOs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserResult:
    """User as returned by the API."""

    id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    photo_url: str | None
    bio: str | None
    preferences: dict[str, Any]
    organization_id: UUID | None
    role: str
    is_active: bool
    last_login_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        """Map a User entity to the DTO."""
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            photo_url=user.photo_url,
            bio=user.bio,
            preferences=user.preferences.to_dict(),
            organization_id=user.organization_id,
            role=user.role.value,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class UserPage:
    """Paginated users."""

    data: list[UserResult]
    total: int
    page: int
    limit: int
    total_pages: int
