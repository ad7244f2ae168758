"""Bearer authentication dependencies.

Validates the access JWT issued at magic link verification, loads the user
and checks the session named by the token, so disabled accounts and revoked
sessions (logout, account deletion) lose access immediately instead of at
token expiry.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import (
    get_session_repository,
    get_token_service,
    get_user_repository,
)
from src.core.result import Failure
from src.domain.enums import UserRole
from src.domain.protocols import (
    SessionRepository,
    TokenGenerationProtocol,
    UserRepository,
)

NO_TOKEN = "No authentication token provided"
INVALID_TOKEN = "Invalid or expired token"
ACCOUNT_DISABLED = "User account is disabled"
SESSION_NOT_FOUND = "Session not found"
SESSION_REVOKED = "Session has been revoked"

# auto_error=False so a missing header gets our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user resolved from the access token.

    Attributes:
        user_id: User's unique identifier (JWT 'sub').
        email: User's email address.
        role: Current role (from the database, not the token).
        organization_id: User's organization, if assigned.
        session_id: Session that issued the token, if present.
    """

    user_id: UUID
    email: str
    role: UserRole
    organization_id: UUID | None = None
    session_id: UUID | None = None

    @property
    def is_manager(self) -> bool:
        """Whether the user is a gestor or admin."""
        return self.role in UserRole.managers()

    @property
    def is_admin(self) -> bool:
        """Whether the user is an admin."""
        return self.role == UserRole.ADMIN


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    session_repo: Annotated[SessionRepository, Depends(get_session_repository)],
) -> CurrentUser:
    """Get current authenticated user from the bearer token.

    Flow:
        1. Decode and verify the access JWT
        2. Load the user; refuse disabled or deleted accounts
        3. When the token names a session, refuse it once revoked

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).
        user_repo: User lookup (injected).
        session_repo: Session lookup for the revocation check (injected).

    Returns:
        CurrentUser for an active account with a live session.

    Raises:
        HTTPException 401: Missing token, invalid or expired token, disabled
            account, or a revoked or unknown session.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized(NO_TOKEN)

    result = token_service.validate_token(credentials.credentials)
    if isinstance(result, Failure):
        raise _unauthorized(INVALID_TOKEN)

    payload = result.value
    try:
        user_id = UUID(str(payload["sub"]))
        session_id_raw = payload.get("session_id")
        session_id = UUID(str(session_id_raw)) if session_id_raw else None
    except (KeyError, ValueError) as e:
        raise _unauthorized(INVALID_TOKEN) from e

    user = await user_repo.find_by_id(user_id)
    if user is None or not user.can_authenticate():
        raise _unauthorized(ACCOUNT_DISABLED)

    if session_id is not None:
        session = await session_repo.find_by_id(session_id)
        if session is None or session.user_id != user.id:
            raise _unauthorized(SESSION_NOT_FOUND)
        if not session.is_valid:
            raise _unauthorized(SESSION_REVOKED)

    return CurrentUser(
        user_id=user.id,
        email=user.email,
        role=user.role,
        organization_id=user.organization_id,
        session_id=session_id,
    )
