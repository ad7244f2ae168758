"""Identity provider error types.

These errors are part of the IdentityProviderProtocol contract. The Supabase
adapter returns them instead of raising, so handlers can decide whether a
failure is fatal (magic link verification) or best-effort (remote user
deletion during local account removal).
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderError(DomainError):
    """Base identity provider failure.

    Attributes:
        provider_name: Provider identifier ("supabase").
        status_code: HTTP status returned by the provider, if any.
    """

    provider_name: str
    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderRejectedError(IdentityProviderError):
    """Provider refused the request (expired OTP, unknown user, bad input)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderUnavailableError(IdentityProviderError):
    """Provider could not be reached (timeout, connection error, 5xx)."""

    is_transient: bool = True
