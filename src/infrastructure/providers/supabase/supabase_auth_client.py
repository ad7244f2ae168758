"""Supabase Auth adapter implementing IdentityProviderProtocol.

Talks to the GoTrue REST API directly with httpx:
    POST   /auth/v1/otp                  send magic link (create_user=true)
    POST   /auth/v1/verify               verify token_hash from the link
    DELETE /auth/v1/admin/users/{id}     delete account (service role key)

Public endpoints authenticate with the anon key; the admin endpoint with the
service role key. Both go in ``apikey`` and ``Authorization: Bearer``.
"""

from typing import Any

import httpx

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import OtpType
from src.domain.errors import (
    IdentityProviderError,
    IdentityProviderRejectedError,
    IdentityProviderUnavailableError,
)
from src.domain.protocols.identity_provider_protocol import IdentityUser
from src.infrastructure.providers.base_api_client import (
    DEFAULT_TIMEOUT_SECONDS,
    BaseAPIClient,
)

PROVIDER_NAME = "supabase"


class SupabaseAuthClient(BaseAPIClient):
    """Supabase Auth client.

    Example:
        >>> client = SupabaseAuthClient(
        ...     base_url="https://xyz.supabase.co",
        ...     anon_key="anon",
        ...     service_role_key="service",
        ... )
        >>> result = await client.send_magic_link(email="ana@example.com")
    """

    def __init__(
        self,
        *,
        base_url: str,
        anon_key: str,
        service_role_key: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Supabase project URL.
            anon_key: Public anon key.
            service_role_key: Service role key (admin API).
            timeout: HTTP timeout in seconds.
            transport: Optional custom transport.
        """
        super().__init__(
            base_url=base_url,
            service_name=PROVIDER_NAME,
            timeout=timeout,
            transport=transport,
        )
        self._anon_key = anon_key
        self._service_role_key = service_role_key

    def _rejected_error(self, message: str, status_code: int) -> IdentityProviderError:
        return IdentityProviderRejectedError(
            code=ErrorCode.IDENTITY_PROVIDER_REJECTED,
            message=message,
            provider_name=PROVIDER_NAME,
            status_code=status_code,
        )

    def _unavailable_error(
        self, message: str, status_code: int | None = None
    ) -> IdentityProviderError:
        return IdentityProviderUnavailableError(
            code=ErrorCode.IDENTITY_PROVIDER_UNAVAILABLE,
            message=message,
            provider_name=PROVIDER_NAME,
            status_code=status_code,
        )

    @staticmethod
    def _headers(key: str) -> dict[str, str]:
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }

    async def send_magic_link(
        self, *, email: str, redirect_to: str | None = None
    ) -> Result[None, IdentityProviderError]:
        """Ask Supabase to email a magic link, creating the user if needed.

        Args:
            email: Recipient address.
            redirect_to: Post-verification redirect URL.

        Returns:
            Success(None) or Failure(IdentityProviderError).
        """
        params = {"redirect_to": redirect_to} if redirect_to else None
        result = await self._execute_and_parse_object(
            method="POST",
            path="/auth/v1/otp",
            headers=self._headers(self._anon_key),
            params=params,
            json_data={"email": email, "create_user": True},
            operation="send_magic_link",
        )
        if isinstance(result, Failure):
            return Failure(error=result.error)  # type: ignore[arg-type]
        return Success(value=None)

    async def verify_otp(
        self, *, token_hash: str, otp_type: OtpType
    ) -> Result[IdentityUser, IdentityProviderError]:
        """Verify a magic link token.

        Args:
            token_hash: Token hash carried by the link.
            otp_type: OTP type.

        Returns:
            Success(IdentityUser) or Failure(IdentityProviderError).
        """
        result = await self._execute_and_parse_object(
            method="POST",
            path="/auth/v1/verify",
            headers=self._headers(self._anon_key),
            json_data={"type": otp_type.value, "token_hash": token_hash},
            operation="verify_otp",
        )
        if isinstance(result, Failure):
            return Failure(error=result.error)  # type: ignore[arg-type]
        return self._parse_user(result.value)

    async def delete_user(self, provider_user_id: str) -> Result[None, IdentityProviderError]:
        """Delete a user through the admin API.

        Args:
            provider_user_id: Supabase user id.

        Returns:
            Success(None) or Failure(IdentityProviderError).
        """
        result = await self._execute_and_parse_object(
            method="DELETE",
            path=f"/auth/v1/admin/users/{provider_user_id}",
            headers=self._headers(self._service_role_key),
            operation="delete_user",
        )
        if isinstance(result, Failure):
            return Failure(error=result.error)  # type: ignore[arg-type]
        return Success(value=None)

    def _parse_user(self, data: dict[str, Any]) -> Result[IdentityUser, IdentityProviderError]:
        """Extract the user from a verify response.

        GoTrue returns either a session object with a ``user`` key or the
        user object itself.
        """
        user_data = data.get("user")
        if not isinstance(user_data, dict):
            user_data = data
        user_id = user_data.get("id")
        email = user_data.get("email")

        if not user_id or not email:
            self._logger.warning("supabase_api_missing_user", operation="verify_otp")
            return Failure(
                error=IdentityProviderRejectedError(
                    code=ErrorCode.IDENTITY_PROVIDER_INVALID_RESPONSE,
                    message="Verification response did not include a user",
                    provider_name=PROVIDER_NAME,
                )
            )

        metadata = user_data.get("user_metadata") or {}
        return Success(
            value=IdentityUser(
                id=str(user_id),
                email=str(email).lower(),
                user_metadata=dict(metadata) if isinstance(metadata, dict) else {},
            )
        )
