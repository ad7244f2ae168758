"""IdentityProviderProtocol - Port for the passwordless identity provider.

Supabase Auth issues and verifies magic links. The API owns sessions and
tokens after verification; the provider is only asked three things: send a
link, verify a link, delete an account.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from src.core.result import Result
from src.domain.enums import OtpType
from src.domain.errors import IdentityProviderError


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityUser:
    """User as known by the identity provider.

    Attributes:
        id: Provider user id.
        email: Verified email address.
        user_metadata: Free-form profile metadata (first_name, last_name, ...).
    """

    id: str
    email: str
    user_metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def first_name(self) -> str | None:
        """First name from metadata (``first_name`` or ``firstName``)."""
        value = self.user_metadata.get("first_name") or self.user_metadata.get(
            "firstName"
        )
        return str(value) if value else None

    @property
    def last_name(self) -> str | None:
        """Last name from metadata (``last_name`` or ``lastName``)."""
        value = self.user_metadata.get("last_name") or self.user_metadata.get(
            "lastName"
        )
        return str(value) if value else None


class IdentityProviderProtocol(Protocol):
    """Identity provider protocol (port).

    Error Handling:
        Methods return Result types and never raise for provider failures.
        IdentityProviderRejectedError: provider refused the request.
        IdentityProviderUnavailableError: timeout, connection error or 5xx.
    """

    async def send_magic_link(
        self, *, email: str, redirect_to: str | None = None
    ) -> Result[None, IdentityProviderError]:
        """Send a one-time login link, creating the provider user if needed.

        Args:
            email: Recipient address.
            redirect_to: URL the link redirects to after verification.

        Returns:
            Success(None) or Failure(IdentityProviderError).
        """
        ...

    async def verify_otp(
        self, *, token_hash: str, otp_type: OtpType
    ) -> Result[IdentityUser, IdentityProviderError]:
        """Verify the token carried by a magic link.

        Args:
            token_hash: Token hash from the link.
            otp_type: Kind of one-time token.

        Returns:
            Success(IdentityUser) or Failure(IdentityProviderError).
        """
        ...

    async def delete_user(self, provider_user_id: str) -> Result[None, IdentityProviderError]:
        """Delete the provider account (admin API).

        Args:
            provider_user_id: Provider user id.

        Returns:
            Success(None) or Failure(IdentityProviderError).
        """
        ...
