"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Session entities and database SessionModel.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.session import Session
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.session import Session as SessionModel


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, session: Session) -> None:
        """Persist a new session."""
        self.session.add(self._to_model(session))
        await self.session.commit()

    async def update(self, session: Session) -> None:
        """Persist rotation or revocation of an existing session.

        Raises:
            NoResultFound: If the session doesn't exist.
        """
        result = await self.session.execute(
            select(SessionModel).where(SessionModel.id == session.id)
        )
        model = result.scalar_one()
        model.refresh_token = session.refresh_token
        model.expires_at = session.expires_at
        model.is_valid = session.is_valid
        model.updated_at = session.updated_at
        await self.session.commit()

    async def find_by_id(self, session_id: UUID) -> Session | None:
        """Find session by ID, whatever its state."""
        result = await self.session.execute(
            select(SessionModel).where(SessionModel.id == session_id)
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_refresh_token(self, refresh_token: str) -> Session | None:
        """Find session by refresh token value."""
        result = await self.session.execute(
            select(SessionModel).where(SessionModel.refresh_token == refresh_token)
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_user_id(
        self, user_id: UUID, *, active_only: bool = True
    ) -> list[Session]:
        """List sessions of a user, newest first."""
        stmt = select(SessionModel).where(SessionModel.user_id == user_id)
        if active_only:
            stmt = stmt.where(
                SessionModel.is_valid.is_(True),
                SessionModel.expires_at > datetime.now(UTC),
            )
        result = await self.session.execute(
            stmt.order_by(SessionModel.created_at.desc())
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def revoke_by_refresh_token(self, user_id: UUID, refresh_token: str) -> bool:
        """Revoke one session owned by the user.

        Returns:
            True if a valid session was revoked.
        """
        result = await self.session.execute(
            update(SessionModel)
            .where(
                SessionModel.user_id == user_id,
                SessionModel.refresh_token == refresh_token,
                SessionModel.is_valid.is_(True),
            )
            .values(is_valid=False, updated_at=datetime.now(UTC))
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0  # type: ignore[attr-defined]

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke every valid session of a user.

        Returns:
            Number of sessions revoked.
        """
        result = await self.session.execute(
            update(SessionModel)
            .where(SessionModel.user_id == user_id, SessionModel.is_valid.is_(True))
            .values(is_valid=False, updated_at=datetime.now(UTC))
        )
        await self.session.commit()
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def delete_expired(self) -> int:
        """Delete sessions whose refresh token expired.

        Returns:
            Number of sessions deleted.
        """
        result = await self.session.execute(
            delete(SessionModel).where(SessionModel.expires_at < datetime.now(UTC))
        )
        await self.session.commit()
        return result.rowcount or 0  # type: ignore[attr-defined]

    def _to_domain(self, model: SessionModel) -> Session:
        return Session(
            id=model.id,
            user_id=model.user_id,
            refresh_token=model.refresh_token,
            expires_at=ensure_utc(model.expires_at),  # type: ignore[arg-type]
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            is_valid=model.is_valid,
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, session: Session) -> SessionModel:
        return SessionModel(
            id=session.id,
            user_id=session.user_id,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
            is_valid=session.is_valid,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )
