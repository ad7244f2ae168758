"""Session domain entity.

A session represents one refresh token issued after a successful magic link
login. Access tokens are short-lived JWTs and are not stored; the refresh
token is stored so it can be rotated and revoked.

Lifecycle:
    create -> (rotate)* -> revoke | expire
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(slots=True, kw_only=True)
class Session:
    """Refresh token session.

    Business Rules:
        - A session belongs to exactly one user (cascade delete)
        - Revoked sessions are never usable again
        - Expired sessions are never usable, even if not revoked
        - Rotation replaces the token and extends the expiry in place

    Attributes:
        id: Unique session identifier.
        user_id: Owner of the session.
        refresh_token: Opaque refresh token value (unique).
        expires_at: Refresh token expiry.
        ip_address: Client IP at login.
        user_agent: Client user agent at login.
        is_valid: False once revoked.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> session = Session.create(
        ...     user_id=user.id, refresh_token="rt", expires_in_seconds=3600
        ... )
        >>> session.is_usable()
        True
    """

    id: UUID
    user_id: UUID
    refresh_token: str
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None
    is_valid: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        *,
        user_id: UUID,
        refresh_token: str,
        expires_in_seconds: int,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> "Session":
        """Create a new valid session.

        Args:
            user_id: Owner of the session.
            refresh_token: Refresh token value.
            expires_in_seconds: Refresh token lifetime.
            ip_address: Client IP address.
            user_agent: Client user agent.

        Returns:
            New Session entity (not yet persisted).
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            user_id=user_id,
            refresh_token=refresh_token,
            expires_at=now + timedelta(seconds=expires_in_seconds),
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=now,
            updated_at=now,
        )

    def is_expired(self) -> bool:
        """Check if the refresh token expired.

        Returns:
            bool: True if ``expires_at`` is in the past.
        """
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at < datetime.now(UTC)

    def is_usable(self) -> bool:
        """Check if the session can still refresh tokens.

        Returns:
            bool: True if not revoked and not expired.
        """
        return self.is_valid and not self.is_expired()

    def revoke(self) -> None:
        """Revoke the session. Idempotent."""
        self.is_valid = False
        self.updated_at = datetime.now(UTC)

    def rotate(self, *, refresh_token: str, expires_in_seconds: int) -> None:
        """Replace the refresh token and extend the expiry.

        Args:
            refresh_token: New refresh token value.
            expires_in_seconds: New refresh token lifetime.
        """
        now = datetime.now(UTC)
        self.refresh_token = refresh_token
        self.expires_at = now + timedelta(seconds=expires_in_seconds)
        self.updated_at = now
