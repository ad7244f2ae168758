"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User, UserPreferences
from src.domain.enums import UserRole
from src.domain.protocols.user_repository import SortOrder, UserSortField
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.user import User as UserModel

_SORT_COLUMNS = {
    "created_at": UserModel.created_at,
    "email": UserModel.email,
    "first_name": UserModel.first_name,
    "last_name": UserModel.last_name,
}


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Soft-deleted rows (``deleted_at IS NOT NULL``) are filtered out of every
    query except ``find_by_id_with_deleted``.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("ana@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find non-deleted user by ID."""
        stmt = select(UserModel).where(
            UserModel.id == user_id, UserModel.deleted_at.is_(None)
        )
        return await self._first(stmt)

    async def find_by_id_with_deleted(self, user_id: UUID) -> User | None:
        """Find user by ID including soft-deleted rows."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._first(stmt)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower(),
            UserModel.deleted_at.is_(None),
        )
        return await self._first(stmt)

    async def find_by_identity_provider_id(self, provider_user_id: str) -> User | None:
        """Find user by Supabase user id."""
        stmt = select(UserModel).where(
            UserModel.identity_provider_user_id == provider_user_id,
            UserModel.deleted_at.is_(None),
        )
        return await self._first(stmt)

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists (soft-deleted rows included).

        The unique constraint covers soft-deleted rows, so they count.

        Args:
            email: Email address to check.

        Returns:
            True if user exists, False otherwise.
        """
        stmt = select(func.count()).select_from(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_all(
        self,
        *,
        limit: int,
        offset: int,
        sort_by: UserSortField = "created_at",
        sort_order: SortOrder = "DESC",
        organization_id: UUID | None = None,
    ) -> tuple[list[User], int]:
        """List non-deleted users with pagination and sorting.

        Args:
            limit: Page size.
            offset: Rows to skip.
            sort_by: Column to sort by.
            sort_order: ASC or DESC.
            organization_id: Restrict to one organization.

        Returns:
            Tuple of (users in page, total).
        """
        conditions = [UserModel.deleted_at.is_(None)]
        if organization_id is not None:
            conditions.append(UserModel.organization_id == organization_id)

        count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        column = _SORT_COLUMNS.get(sort_by, UserModel.created_at)
        order = column.asc() if sort_order == "ASC" else column.desc()
        stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(order, UserModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def find_by_roles(
        self, organization_id: UUID, roles: list[UserRole]
    ) -> list[User]:
        """Find active users of an organization holding any of the roles."""
        stmt = select(UserModel).where(
            UserModel.organization_id == organization_id,
            UserModel.role.in_([role.value for role in roles]),
            UserModel.is_active.is_(True),
            UserModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If email or provider id already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()

    async def update(self, user: User) -> None:
        """Update existing user in database.

        Args:
            user: Domain User entity with updated fields.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.first_name = user.first_name
        user_model.last_name = user.last_name
        user_model.photo_url = user.photo_url
        user_model.bio = user.bio
        user_model.preferences = user.preferences.to_dict()
        user_model.identity_provider_user_id = user.identity_provider_user_id
        user_model.organization_id = user.organization_id
        user_model.role = user.role.value
        user_model.is_active = user.is_active
        user_model.last_login_at = user.last_login_at
        user_model.deleted_at = user.deleted_at
        user_model.updated_at = user.updated_at

        await self.session.commit()

    async def delete(self, user_id: UUID) -> bool:
        """Hard delete user (sessions cascade).

        Args:
            user_id: User's unique identifier.

        Returns:
            True if a row was deleted.
        """
        result = await self.session.execute(
            delete(UserModel).where(UserModel.id == user_id)
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0  # type: ignore[attr-defined]

    async def _first(self, stmt: Select[tuple[UserModel]]) -> User | None:
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=user_model.id,
            email=user_model.email,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            photo_url=user_model.photo_url,
            bio=user_model.bio,
            preferences=UserPreferences.from_dict(user_model.preferences),
            identity_provider_user_id=user_model.identity_provider_user_id,
            organization_id=user_model.organization_id,
            role=UserRole(user_model.role),
            is_active=user_model.is_active,
            last_login_at=ensure_utc(user_model.last_login_at),
            created_at=ensure_utc(user_model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(user_model.updated_at),  # type: ignore[arg-type]
            deleted_at=ensure_utc(user_model.deleted_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model.

        Args:
            user: Domain User entity.

        Returns:
            SQLAlchemy UserModel instance.
        """
        return UserModel(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            photo_url=user.photo_url,
            bio=user.bio,
            preferences=user.preferences.to_dict(),
            identity_provider_user_id=user.identity_provider_user_id,
            organization_id=user.organization_id,
            role=user.role.value,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
            deleted_at=user.deleted_at,
        )
