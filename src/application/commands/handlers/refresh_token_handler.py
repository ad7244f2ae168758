"""Refresh Token handler (rotation).

Flow:
1. Look up the session by refresh token
2. Reject missing or revoked sessions, then expired ones
3. Validate the refresh JWT (signature, type)
4. Load the user and refuse disabled accounts
5. Rotate: new refresh token stored in the same session row
6. Issue a new access token
"""

from src.application.commands.auth_commands import RefreshToken
from src.application.dtos import AuthTokens
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    SessionRepository,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshError:
    """Refresh-specific error messages."""

    TOKEN_INVALID = "Invalid refresh token"
    TOKEN_EXPIRED = "Refresh token expired"
    SIGNATURE_INVALID = "Invalid token signature"
    USER_DISABLED = "User account is disabled"


def _unauthorized(message: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(code=ApplicationErrorCode.UNAUTHORIZED, message=message)
    )


class RefreshTokenHandler:
    """Handler for RefreshToken command.

    Implements token rotation: every refresh replaces the stored refresh token,
    so a token can be used once.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RefreshToken) -> Result[AuthTokens, ApplicationError]:
        """Handle RefreshToken command.

        Returns:
            Success(AuthTokens) with the rotated pair.
            Failure(ApplicationError) with UNAUTHORIZED.
        """
        session = await self._session_repo.find_by_refresh_token(cmd.refresh_token)
        if session is None or not session.is_valid:
            self._logger.warning("Refresh rejected: unknown or revoked session")
            return _unauthorized(RefreshError.TOKEN_INVALID)

        if session.is_expired():
            self._logger.info("Refresh rejected: session expired", session_id=str(session.id))
            return _unauthorized(RefreshError.TOKEN_EXPIRED)

        validated = self._token_service.validate_token(
            cmd.refresh_token, expected_type="refresh"
        )
        if isinstance(validated, Failure):
            message = (
                RefreshError.TOKEN_EXPIRED
                if validated.error.code == ErrorCode.TOKEN_EXPIRED
                else RefreshError.SIGNATURE_INVALID
            )
            return _unauthorized(message)

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None or not user.can_authenticate():
            return _unauthorized(RefreshError.USER_DISABLED)

        new_refresh_token = self._token_service.generate_refresh_token(user_id=user.id)
        session.rotate(
            refresh_token=new_refresh_token,
            expires_in_seconds=self._token_service.refresh_token_expires_in,
        )
        await self._session_repo.update(session)

        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            organization_id=user.organization_id,
            session_id=session.id,
        )

        self._logger.info("Tokens refreshed", user_id=str(user.id), session_id=str(session.id))
        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=new_refresh_token,
                expires_in=self._token_service.access_token_expires_in,
            )
        )
