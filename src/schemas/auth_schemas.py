"""Authentication request/response schemas.

Endpoints:
    POST /api/v1/auth/send-magic-link   - Email a magic link
    POST /api/v1/auth/callback          - Exchange token hash for tokens
    POST /api/v1/auth/refresh           - Rotate tokens
    POST /api/v1/auth/logout            - Revoke one or all sessions
    GET  /api/v1/auth/me                - Current user
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.enums import OtpType


class SendMagicLinkRequest(BaseModel):
    """Request schema for magic link delivery.

    POST /api/v1/auth/send-magic-link
    Returns: 200 OK
    """

    email: EmailStr = Field(
        ...,
        description="Address that receives the magic link",
        examples=["colaborador@empresa.com.br"],
    )
    redirect_to: str | None = Field(
        None,
        max_length=2048,
        description="Frontend URL the link redirects to after verification",
        examples=["https://app.psicozen.app/auth/callback"],
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "colaborador@empresa.com.br"}}
    )


class VerifyMagicLinkRequest(BaseModel):
    """Request schema for the magic link callback.

    POST /api/v1/auth/callback
    Returns: 200 OK with tokens and user summary
    """

    token_hash: str = Field(..., min_length=1, description="Token hash from the link")
    type: OtpType = Field(
        OtpType.MAGICLINK,
        description="Verification type (magiclink, recovery, invite, email_change)",
    )


class RefreshTokenRequest(BaseModel):
    """Request schema for token refresh.

    POST /api/v1/auth/refresh
    """

    refresh_token: str = Field(..., min_length=1, description="Current refresh token")


class LogoutRequest(BaseModel):
    """Request schema for logout.

    Omit refresh_token to revoke every session of the user.
    """

    refresh_token: str | None = Field(
        None, min_length=1, description="Refresh token of the session to revoke"
    )


class AuthTokensResponse(BaseModel):
    """Access and refresh token pair."""

    model_config = ConfigDict(from_attributes=True)

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    token_type: str = Field("Bearer", description="Authorization header scheme")


class AuthUserResponse(BaseModel):
    """User summary returned after login."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None


class AuthSessionResponse(BaseModel):
    """Response schema for a successful magic link callback."""

    model_config = ConfigDict(from_attributes=True)

    tokens: AuthTokensResponse
    user: AuthUserResponse
