"""User management handler factories.

Request-scoped handlers for the users module (CRUD plus listing).
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_audit,
    get_db_session,
    get_identity_provider,
    get_logger,
)
from src.domain.protocols import AuditProtocol

if TYPE_CHECKING:
    from src.application.commands.handlers.create_user_handler import (
        CreateUserHandler,
    )
    from src.application.commands.handlers.delete_user_handler import (
        DeleteUserHandler,
    )
    from src.application.commands.handlers.update_user_handler import (
        UpdateUserHandler,
    )
    from src.application.queries.handlers.get_user_handler import GetUserHandler
    from src.application.queries.handlers.list_users_handler import ListUsersHandler


async def get_create_user_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "CreateUserHandler":
    """Get CreateUserHandler instance.

    Args:
        session: Database session for the business transaction.
        audit: Audit adapter with its own session.

    Returns:
        CreateUserHandler instance.
    """
    from src.application.commands.handlers.create_user_handler import (
        CreateUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return CreateUserHandler(
        user_repo=UserRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )


async def get_update_user_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "UpdateUserHandler":
    """Get UpdateUserHandler instance."""
    from src.application.commands.handlers.update_user_handler import (
        UpdateUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return UpdateUserHandler(
        user_repo=UserRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )


async def get_delete_user_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "DeleteUserHandler":
    """Get DeleteUserHandler instance.

    Deletion also revokes sessions and removes the identity provider
    account, so the handler gets both repositories and the provider.

    Args:
        session: Database session for the business transaction.
        audit: Audit adapter with its own session.

    Returns:
        DeleteUserHandler instance.
    """
    from src.application.commands.handlers.delete_user_handler import (
        DeleteUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return DeleteUserHandler(
        user_repo=UserRepository(session=session),
        session_repo=SessionRepository(session=session),
        identity_provider=get_identity_provider(),
        audit=audit,
        logger=get_logger(),
    )


async def get_get_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserHandler":
    """Get GetUserHandler instance."""
    from src.application.queries.handlers.get_user_handler import GetUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return GetUserHandler(user_repo=UserRepository(session=session))


async def get_list_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListUsersHandler":
    """Get ListUsersHandler instance."""
    from src.application.queries.handlers.list_users_handler import ListUsersHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return ListUsersHandler(user_repo=UserRepository(session=session))
