"""User domain entity.

Pure business logic, no framework dependencies.

Identity:
    Authentication is delegated to the identity provider (Supabase). The
    local record is linked through ``identity_provider_user_id`` and created
    on first successful magic link login or by an administrator.

Deletion:
    - Soft delete sets ``deleted_at`` and deactivates the account
    - Hard delete removes the row (repository concern)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums import UserRole
from src.domain.errors.user_error import UserError

SUPPORTED_THEMES = frozenset({"light", "dark", "system"})


@dataclass(slots=True, kw_only=True)
class UserPreferences:
    """User interface and notification preferences.

    Attributes:
        language: BCP 47 language tag.
        theme: light, dark or system.
        notifications: Whether the user accepts notification emails.
        timezone: IANA timezone name.
    """

    language: str = "en"
    theme: str = "system"
    notifications: bool = True
    timezone: str = "UTC"

    def to_dict(self) -> dict[str, Any]:
        """Serialize preferences for persistence and API responses."""
        return {
            "language": self.language,
            "theme": self.theme,
            "notifications": self.notifications,
            "timezone": self.timezone,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserPreferences":
        """Build preferences from stored JSON, falling back to defaults.

        Args:
            data: Stored preferences (may be None or partial).

        Returns:
            UserPreferences with missing keys defaulted.
        """
        data = data or {}
        defaults = cls()
        return cls(
            language=str(data.get("language", defaults.language)),
            theme=str(data.get("theme", defaults.theme)),
            notifications=bool(data.get("notifications", defaults.notifications)),
            timezone=str(data.get("timezone", defaults.timezone)),
        )


@dataclass(slots=True, kw_only=True)
class User:
    """User domain entity.

    Business Rules:
        - Email is unique (case-insensitive, enforced by repository)
        - Inactive users cannot authenticate
        - Soft-deleted users are inactive and hidden from normal lookups
        - Every successful login updates ``last_login_at``

    Attributes:
        id: Unique user identifier.
        email: User email address (lowercased).
        first_name: Given name (optional for provider-created users).
        last_name: Family name.
        photo_url: Avatar URL.
        bio: Short biography (max 500 chars, validated at the edge).
        preferences: UI and notification preferences.
        identity_provider_user_id: Supabase user id (None for admin-created users
            that never logged in).
        organization_id: Organization the user belongs to.
        role: Authorization role inside the organization.
        is_active: Account active status.
        last_login_at: Timestamp of the last successful login.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        deleted_at: Soft delete timestamp.

    Example:
        >>> user = User.create(email="Ana@Example.com", first_name="Ana")
        >>> user.email
        'ana@example.com'
        >>> user.role
        <UserRole.COLABORADOR: 'colaborador'>
    """

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    photo_url: str | None = None
    bio: str | None = None
    preferences: UserPreferences = field(default_factory=UserPreferences)
    identity_provider_user_id: str | None = None
    organization_id: UUID | None = None
    role: UserRole = UserRole.COLABORADOR
    is_active: bool = True
    last_login_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate user after initialization.

        Raises:
            ValueError: If email is empty.
        """
        if not self.email or not self.email.strip():
            raise ValueError(UserError.INVALID_EMAIL)

    @classmethod
    def create(
        cls,
        *,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        identity_provider_user_id: str | None = None,
        organization_id: UUID | None = None,
        role: UserRole = UserRole.COLABORADOR,
    ) -> "User":
        """Create a new active user.

        Args:
            email: Email address (normalized to lowercase).
            first_name: Optional given name.
            last_name: Optional family name.
            identity_provider_user_id: Supabase user id when created at login.
            organization_id: Optional organization membership.
            role: Role inside the organization (default colaborador).

        Returns:
            New User entity (not yet persisted).
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            email=email.strip().lower(),
            first_name=first_name,
            last_name=last_name,
            identity_provider_user_id=identity_provider_user_id,
            organization_id=organization_id,
            role=role,
            created_at=now,
            updated_at=now,
        )

    @property
    def full_name(self) -> str:
        """First and last name joined, or the email when both are missing."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.email

    def is_deleted(self) -> bool:
        """Check whether the user was soft-deleted.

        Returns:
            bool: True if ``deleted_at`` is set.
        """
        return self.deleted_at is not None

    def can_authenticate(self) -> bool:
        """Check if the user may log in (active and not deleted).

        Returns:
            bool: True if login is allowed.
        """
        return self.is_active and not self.is_deleted()

    def update_profile(
        self,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        bio: str | None = None,
        photo_url: str | None = None,
    ) -> None:
        """Update profile fields. ``None`` leaves a field unchanged.

        Args:
            first_name: New given name.
            last_name: New family name.
            bio: New biography.
            photo_url: New avatar URL.
        """
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if bio is not None:
            self.bio = bio
        if photo_url is not None:
            self.photo_url = photo_url
        self._touch()

    def update_preferences(self, **changes: Any) -> Result[None, str]:
        """Merge preference changes into the current preferences.

        Args:
            **changes: Any of language, theme, notifications, timezone.
                ``None`` values are ignored.

        Returns:
            Success(None): Preferences merged.
            Failure(error): Unknown key or unsupported theme.
        """
        current = self.preferences.to_dict()
        unknown = set(changes) - set(current)
        if unknown:
            return Failure(
                error=f"{UserError.UNKNOWN_PREFERENCE}: {', '.join(sorted(unknown))}"
            )
        theme = changes.get("theme")
        if theme is not None and theme not in SUPPORTED_THEMES:
            return Failure(error=UserError.UNSUPPORTED_THEME)

        current.update({k: v for k, v in changes.items() if v is not None})
        self.preferences = UserPreferences.from_dict(current)
        self._touch()
        return Success(value=None)

    def record_login(self) -> None:
        """Record a successful login."""
        self.last_login_at = datetime.now(UTC)
        self._touch()

    def link_identity(self, identity_provider_user_id: str) -> None:
        """Attach the identity provider id to an admin-created user.

        Args:
            identity_provider_user_id: Supabase user id.
        """
        self.identity_provider_user_id = identity_provider_user_id
        self._touch()

    def deactivate(self) -> None:
        """Deactivate the account (blocks authentication)."""
        self.is_active = False
        self._touch()

    def activate(self) -> None:
        """Re-activate the account."""
        self.is_active = True
        self._touch()

    def soft_delete(self) -> None:
        """Mark as deleted and deactivate."""
        now = datetime.now(UTC)
        self.deleted_at = now
        self.is_active = False
        self.updated_at = now

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
