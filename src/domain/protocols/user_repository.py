"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Literal, Protocol
from uuid import UUID

from src.domain.entities.user import User
from src.domain.enums import UserRole

UserSortField = Literal["created_at", "email", "first_name", "last_name"]
SortOrder = Literal["ASC", "DESC"]


class UserRepository(Protocol):
    """User repository protocol (port).

    Soft-deleted users are invisible to every lookup except
    ``find_by_id_with_deleted``.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a non-deleted user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_id_with_deleted(self, user_id: UUID) -> User | None:
        """Find a user by ID, including soft-deleted users.

        Used by account deletion to decide between soft and hard delete.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: Email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_identity_provider_id(self, provider_user_id: str) -> User | None:
        """Find user by Supabase user id.

        Args:
            provider_user_id: Identity provider user id.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists (case-insensitive).

        Args:
            email: Email address to check.

        Returns:
            True if a user exists, False otherwise.
        """
        ...

    async def find_all(
        self,
        *,
        limit: int,
        offset: int,
        sort_by: UserSortField = "created_at",
        sort_order: SortOrder = "DESC",
        organization_id: UUID | None = None,
    ) -> tuple[list[User], int]:
        """List users with pagination and sorting.

        Args:
            limit: Page size.
            offset: Rows to skip.
            sort_by: Column to sort by.
            sort_order: ASC or DESC.
            organization_id: Restrict to one organization.

        Returns:
            Tuple of (users in page, total matching users).
        """
        ...

    async def find_by_roles(
        self, organization_id: UUID, roles: list[UserRole]
    ) -> list[User]:
        """Find active users of an organization holding any of the roles.

        Used to route emotional alerts to managers.

        Args:
            organization_id: Organization to search.
            roles: Accepted roles.

        Returns:
            Matching active users (may be empty).
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Args:
            user: User entity to persist.
        """
        ...

    async def update(self, user: User) -> None:
        """Persist changes to an existing user.

        Args:
            user: User entity with updated fields.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Hard delete a user (sessions cascade).

        Args:
            user_id: User's unique identifier.

        Returns:
            True if a row was deleted.
        """
        ...
