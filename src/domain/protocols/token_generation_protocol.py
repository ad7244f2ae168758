"""TokenGenerationProtocol - Port for signed token issuance and validation.

Three token kinds share one signing key and are told apart by the ``type``
claim:
    access   short-lived bearer token for API calls
    refresh  long-lived token stored in a session, rotated on use
    action   single-purpose token mailed to the user (data deletion)
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Token service protocol (port).

    Validation returns Failure(AuthenticationError) with code TOKEN_EXPIRED
    or TOKEN_INVALID; it never raises.
    """

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    @property
    def refresh_token_expires_in(self) -> int:
        """Refresh token lifetime in seconds."""
        ...

    def generate_access_token(
        self,
        *,
        user_id: UUID,
        email: str,
        role: str,
        organization_id: UUID | None = None,
        session_id: UUID | None = None,
    ) -> str:
        """Issue an access token.

        Args:
            user_id: Subject.
            email: User email.
            role: User role.
            organization_id: User organization.
            session_id: Session the token belongs to.

        Returns:
            Encoded JWT.
        """
        ...

    def generate_refresh_token(self, *, user_id: UUID) -> str:
        """Issue a refresh token (unique ``jti`` per call).

        Args:
            user_id: Subject.

        Returns:
            Encoded JWT.
        """
        ...

    def generate_action_token(
        self,
        *,
        user_id: UUID,
        purpose: str,
        expires_in_seconds: int,
        claims: dict[str, Any] | None = None,
    ) -> str:
        """Issue a single-purpose token.

        Args:
            user_id: Subject.
            purpose: Value of the ``purpose`` claim.
            expires_in_seconds: Lifetime.
            claims: Extra claims.

        Returns:
            Encoded JWT.
        """
        ...

    def validate_token(
        self, token: str, *, expected_type: str = "access"
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Verify signature, expiry and token type.

        Args:
            token: Encoded JWT.
            expected_type: Required ``type`` claim.

        Returns:
            Success(payload) or Failure(AuthenticationError).
        """
        ...
