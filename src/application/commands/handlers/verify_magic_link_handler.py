"""Verify Magic Link handler.

Flow:
1. Verify the token hash with the identity provider
2. Sync the local user (find or create, record login)
3. Refuse disabled users
4. Issue access and refresh tokens
5. Persist a Session holding the refresh token
6. Audit user_login (best effort)
7. Return Success(MagicLinkSession)
"""

from src.application.commands.auth_commands import SyncUserWithProvider, VerifyMagicLink
from src.application.commands.handlers.sync_user_handler import (
    SyncUserWithProviderHandler,
)
from src.application.dtos import AuthTokens, AuthUserSummary, MagicLinkSession
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.audit_recorder import record_audit
from src.core.result import Failure, Result, Success
from src.domain.entities import Session
from src.domain.enums import AuditAction
from src.domain.protocols import (
    AuditProtocol,
    IdentityProviderProtocol,
    LoggerProtocol,
    SessionRepository,
    TokenGenerationProtocol,
)

INVALID_MAGIC_LINK = "Invalid or expired magic link"
ACCOUNT_DISABLED = "User account is disabled"


class VerifyMagicLinkHandler:
    """Handler for VerifyMagicLink command."""

    def __init__(
        self,
        identity_provider: IdentityProviderProtocol,
        sync_user_handler: SyncUserWithProviderHandler,
        session_repo: SessionRepository,
        token_service: TokenGenerationProtocol,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            identity_provider: Supabase Auth adapter.
            sync_user_handler: Find-or-create for the local user.
            session_repo: Session persistence.
            token_service: JWT issuance.
            audit: Audit trail.
            logger: Structured logger.
        """
        self._identity_provider = identity_provider
        self._sync_user_handler = sync_user_handler
        self._session_repo = session_repo
        self._token_service = token_service
        self._audit = audit
        self._logger = logger

    async def handle(
        self, cmd: VerifyMagicLink
    ) -> Result[MagicLinkSession, ApplicationError]:
        """Handle VerifyMagicLink command.

        Returns:
            Success(MagicLinkSession) with tokens and user summary.
            Failure(ApplicationError) with UNAUTHORIZED.
        """
        verified = await self._identity_provider.verify_otp(
            token_hash=cmd.token_hash, otp_type=cmd.otp_type
        )
        if isinstance(verified, Failure):
            self._logger.warning(
                "Magic link verification failed",
                error_code=verified.error.code.value,
            )
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.UNAUTHORIZED,
                    verified.error,
                    INVALID_MAGIC_LINK,
                )
            )

        synced = await self._sync_user_handler.handle(
            SyncUserWithProvider(identity_user=verified.value)
        )
        if isinstance(synced, Failure):
            return synced
        user = synced.value

        if not user.can_authenticate():
            self._logger.warning("Login refused for disabled user", user_id=str(user.id))
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message=ACCOUNT_DISABLED,
                )
            )

        refresh_token = self._token_service.generate_refresh_token(user_id=user.id)
        session = Session.create(
            user_id=user.id,
            refresh_token=refresh_token,
            expires_in_seconds=self._token_service.refresh_token_expires_in,
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
        )
        await self._session_repo.save(session)

        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            organization_id=user.organization_id,
            session_id=session.id,
        )

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_LOGIN,
            user_id=user.id,
            organization_id=user.organization_id,
            resource_type="session",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context={"session_id": str(session.id), "method": "magic_link"},
        )

        self._logger.info("User logged in", user_id=str(user.id))
        return Success(
            value=MagicLinkSession(
                tokens=AuthTokens(
                    access_token=access_token,
                    refresh_token=refresh_token,
                    expires_in=self._token_service.access_token_expires_in,
                ),
                user=AuthUserSummary(
                    id=user.id,
                    email=user.email,
                    first_name=user.first_name,
                    last_name=user.last_name,
                ),
            )
        )
