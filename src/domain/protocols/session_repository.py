"""SessionRepository protocol for refresh token sessions.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session repository protocol (port).

    Methods:
        save: Persist a new session
        update: Persist rotation or revocation
        find_by_refresh_token: Lookup used by token refresh and logout
        revoke_by_refresh_token: Revoke one session
        revoke_all_for_user: Revoke every valid session of a user
        delete_expired: Retention cleanup
    """

    async def save(self, session: Session) -> None:
        """Persist a new session.

        Args:
            session: Session entity.
        """
        ...

    async def update(self, session: Session) -> None:
        """Persist changes to an existing session.

        Args:
            session: Session entity with updated fields.
        """
        ...

    async def find_by_id(self, session_id: UUID) -> Session | None:
        """Find session by ID (revoked and expired sessions included).

        Args:
            session_id: Session identifier (``session_id`` access token claim).

        Returns:
            Session if found, None otherwise.
        """
        ...

    async def find_by_refresh_token(self, refresh_token: str) -> Session | None:
        """Find session by refresh token value.

        Args:
            refresh_token: Refresh token.

        Returns:
            Session if found (valid or not), None otherwise.
        """
        ...

    async def find_by_user_id(
        self, user_id: UUID, *, active_only: bool = True
    ) -> list[Session]:
        """List sessions of a user, newest first.

        Args:
            user_id: Session owner.
            active_only: Only valid, unexpired sessions.

        Returns:
            Sessions (may be empty).
        """
        ...

    async def revoke_by_refresh_token(self, user_id: UUID, refresh_token: str) -> bool:
        """Revoke the session owned by ``user_id`` with this refresh token.

        Args:
            user_id: Session owner.
            refresh_token: Refresh token to revoke.

        Returns:
            True if a session was revoked.
        """
        ...

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke all valid sessions of a user.

        Args:
            user_id: Session owner.

        Returns:
            Number of sessions revoked.
        """
        ...

    async def delete_expired(self) -> int:
        """Delete sessions whose refresh token expired.

        Returns:
            Number of sessions deleted.
        """
        ...
