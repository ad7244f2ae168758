"""Auth resource router (passwordless magic link flow).

Endpoints:
    POST /api/v1/auth/send-magic-link  - Email a magic link (rate limited)
    POST /api/v1/auth/callback         - Verify token hash, issue tokens
    POST /api/v1/auth/refresh          - Rotate access and refresh tokens
    POST /api/v1/auth/logout           - Revoke one or all sessions
    GET  /api/v1/auth/me               - Current user profile
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    Logout,
    RefreshToken,
    SendMagicLink,
    VerifyMagicLink,
)
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
from src.application.queries import GetUser
from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.core.container import (
    get_get_user_handler,
    get_logout_handler,
    get_rate_limit,
    get_refresh_token_handler,
    get_send_magic_link_handler,
    get_verify_magic_link_handler,
)
from src.core.result import Failure, Success
from src.domain.protocols import RateLimitProtocol
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.rate_limit_dependencies import (
    CALLBACK_RULE,
    MAGIC_LINK_RULE,
    client_ip,
    enforce_rate_limit,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthSessionResponse,
    AuthTokensResponse,
    LogoutRequest,
    RefreshTokenRequest,
    SendMagicLinkRequest,
    VerifyMagicLinkRequest,
)
from src.schemas.common_schemas import MessageResponse
from src.schemas.user_schemas import UserResponse

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/send-magic-link",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Provider rejected the request", "model": ProblemDetails},
        429: {"description": "Too many requests", "model": ProblemDetails},
    },
    summary="Send magic link",
)
async def send_magic_link(
    request: Request,
    data: SendMagicLinkRequest,
    handler: Annotated[SendMagicLinkHandler, Depends(get_send_magic_link_handler)],
    rate_limit: Annotated[RateLimitProtocol, Depends(get_rate_limit)],
) -> MessageResponse | JSONResponse:
    """Email a one-time login link.

    POST /api/v1/auth/send-magic-link → 200 OK

    Limited per email address; the account is created on the identity
    provider side if it does not exist yet.
    """
    await enforce_rate_limit(
        rate_limit,
        rule=MAGIC_LINK_RULE,
        identifier=str(data.email).lower(),
    )

    result = await handler.handle(
        SendMagicLink(email=str(data.email), redirect_to=data.redirect_to)
    )

    match result:
        case Success(value=message):
            return MessageResponse(message=message.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/callback",
    status_code=status.HTTP_200_OK,
    response_model=AuthSessionResponse,
    responses={
        401: {"description": "Invalid or expired magic link", "model": ProblemDetails},
        429: {"description": "Too many requests", "model": ProblemDetails},
    },
    summary="Verify magic link",
)
async def verify_magic_link(
    request: Request,
    data: VerifyMagicLinkRequest,
    handler: Annotated[VerifyMagicLinkHandler, Depends(get_verify_magic_link_handler)],
    rate_limit: Annotated[RateLimitProtocol, Depends(get_rate_limit)],
) -> AuthSessionResponse | JSONResponse:
    """Exchange the token hash from the link for access and refresh tokens.

    POST /api/v1/auth/callback → 200 OK
    """
    ip_address = client_ip(request)
    await enforce_rate_limit(rate_limit, rule=CALLBACK_RULE, identifier=ip_address)

    result = await handler.handle(
        VerifyMagicLink(
            token_hash=data.token_hash,
            otp_type=data.type,
            ip_address=ip_address,
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=session):
            return AuthSessionResponse.model_validate(session)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/refresh",
    status_code=status.HTTP_200_OK,
    response_model=AuthTokensResponse,
    responses={401: {"description": "Invalid refresh token", "model": ProblemDetails}},
    summary="Refresh tokens",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: Annotated[RefreshTokenHandler, Depends(get_refresh_token_handler)],
) -> AuthTokensResponse | JSONResponse:
    """Rotate the refresh token and issue a new access token.

    POST /api/v1/auth/refresh → 200 OK
    """
    result = await handler.handle(RefreshToken(refresh_token=data.refresh_token))

    match result:
        case Success(value=tokens):
            return AuthTokensResponse.model_validate(tokens)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    summary="Logout",
)
async def logout(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[LogoutHandler, Depends(get_logout_handler)],
    data: LogoutRequest | None = None,
) -> MessageResponse | JSONResponse:
    """Revoke the given session, or every session when no token is sent.

    POST /api/v1/auth/logout → 200 OK
    """
    result = await handler.handle(
        Logout(
            user_id=current_user.user_id,
            refresh_token=data.refresh_token if data else None,
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=message):
            return MessageResponse(message=message.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Current user",
)
async def get_me(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[GetUserHandler, Depends(get_get_user_handler)],
) -> UserResponse | JSONResponse:
    """Return the authenticated user's profile.

    GET /api/v1/auth/me → 200 OK
    """
    result = await handler.handle(GetUser(user_id=current_user.user_id))

    match result:
        case Success(value=user):
            return UserResponse.model_validate(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
