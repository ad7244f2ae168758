"""Authentication handler factories.

Request-scoped handlers for the passwordless (magic link) flow:
- Send magic link
- Verify magic link (callback) and open a session
- Refresh tokens (rotation)
- Logout (single session or all sessions)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_audit,
    get_db_session,
    get_identity_provider,
    get_logger,
    get_token_service,
)
from src.domain.protocols import AuditProtocol

if TYPE_CHECKING:
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.application.commands.handlers.refresh_token_handler import (
        RefreshTokenHandler,
    )
    from src.application.commands.handlers.send_magic_link_handler import (
        SendMagicLinkHandler,
    )
    from src.application.commands.handlers.verify_magic_link_handler import (
        VerifyMagicLinkHandler,
    )


async def get_send_magic_link_handler() -> "SendMagicLinkHandler":
    """Get SendMagicLinkHandler instance.

    No database access: the identity provider creates the user on its side
    and emails the link.

    Returns:
        SendMagicLinkHandler instance.
    """
    from src.application.commands.handlers.send_magic_link_handler import (
        SendMagicLinkHandler,
    )

    return SendMagicLinkHandler(
        identity_provider=get_identity_provider(),
        logger=get_logger(),
    )


async def get_verify_magic_link_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "VerifyMagicLinkHandler":
    """Get VerifyMagicLinkHandler instance.

    Creates handler with:
        - Identity provider (token hash verification)
        - User sync handler (local user create/link/update)
        - SessionRepository (refresh token storage)
        - Token service (JWT issuance)
        - Audit adapter (login trail)

    Args:
        session: Database session for the business transaction.
        audit: Audit adapter with its own session.

    Returns:
        VerifyMagicLinkHandler instance.
    """
    from src.application.commands.handlers.sync_user_handler import (
        SyncUserWithProviderHandler,
    )
    from src.application.commands.handlers.verify_magic_link_handler import (
        VerifyMagicLinkHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    logger = get_logger()
    return VerifyMagicLinkHandler(
        identity_provider=get_identity_provider(),
        sync_user_handler=SyncUserWithProviderHandler(
            user_repo=UserRepository(session=session),
            logger=logger,
        ),
        session_repo=SessionRepository(session=session),
        token_service=get_token_service(),
        audit=audit,
        logger=logger,
    )


async def get_refresh_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshTokenHandler":
    """Get RefreshTokenHandler instance.

    Args:
        session: Database session for the business transaction.

    Returns:
        RefreshTokenHandler instance.
    """
    from src.application.commands.handlers.refresh_token_handler import (
        RefreshTokenHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return RefreshTokenHandler(
        user_repo=UserRepository(session=session),
        session_repo=SessionRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_logout_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "LogoutHandler":
    """Get LogoutHandler instance."""
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.infrastructure.persistence.repositories import SessionRepository

    return LogoutHandler(
        session_repo=SessionRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )
