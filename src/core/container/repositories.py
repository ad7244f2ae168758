"""Repository dependency factories.

Request-scoped repository instances for presentation-layer dependencies
that need direct lookups (the bearer guard loads the caller's user and
checks that the token's session was not revoked). Handler factories build
their repositories inline on the same session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        UserRepository instance.
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_session_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SessionRepository":
    """Get session repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        SessionRepository instance.
    """
    from src.infrastructure.persistence.repositories import SessionRepository

    return SessionRepository(session=session)
