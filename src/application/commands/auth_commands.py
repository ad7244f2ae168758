"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import OtpType
from src.domain.protocols import IdentityUser


@dataclass(frozen=True, kw_only=True)
class SendMagicLink:
    """Request a passwordless login link.

    The identity provider creates the account on first use.

    Attributes:
        email: Address that receives the link.
        redirect_to: Where the provider sends the browser after the click.

    Example:
        >>> command = SendMagicLink(email="ana@example.com")
        >>> result = await handler.handle(command)
    """

    email: str
    redirect_to: str | None = None


@dataclass(frozen=True, kw_only=True)
class VerifyMagicLink:
    """Exchange a magic link token for API tokens.

    Attributes:
        token_hash: Token hash from the magic link URL.
        otp_type: Link type (magiclink, recovery, invite, email_change).
        ip_address: Client IP for the session record.
        user_agent: Client user agent for the session record.
    """

    token_hash: str
    otp_type: OtpType = OtpType.MAGICLINK
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshToken:
    """Rotate a refresh token and issue a new access token.

    Attributes:
        refresh_token: Current refresh token.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class Logout:
    """End one session, or all of the user's sessions.

    Attributes:
        user_id: Authenticated user.
        refresh_token: Session to revoke. None revokes every session.
        ip_address: Client IP for the audit trail.
        user_agent: Client user agent for the audit trail.
    """

    user_id: UUID
    refresh_token: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class SyncUserWithProvider:
    """Find or create the local user for a verified provider identity.

    Attributes:
        identity_user: User returned by the identity provider.
    """

    identity_user: IdentityUser
