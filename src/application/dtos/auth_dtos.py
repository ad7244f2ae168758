"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command handlers.
These carry data from handlers back to the presentation layer.

DTOs:
    - AuthTokens: Access/refresh token pair
    - AuthUserSummary: Minimal user profile returned at login
    - MagicLinkSession: Result of VerifyMagicLink
    - MessageResult: Confirmation message for fire-and-forget commands
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Tokens returned to the client.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: JWT refresh token (stored in sessions).
        expires_in: Access token lifetime in seconds.
        token_type: Always "Bearer".
    """

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "Bearer"


@dataclass(frozen=True, kw_only=True)
class AuthUserSummary:
    """User fields returned with the tokens."""

    id: UUID
    email: str
    first_name: str | None
    last_name: str | None


@dataclass(frozen=True, kw_only=True)
class MagicLinkSession:
    """Result of a successful magic link verification."""

    tokens: AuthTokens
    user: AuthUserSummary


@dataclass(frozen=True, kw_only=True)
class MessageResult:
    """Human-readable confirmation."""

    message: str
