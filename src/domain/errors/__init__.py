"""Domain error types.

Two flavours:
    - ``DomainError`` subclasses returned by protocols and their adapters
    - String constant classes used by entities (``Failure(error=...)``)
"""

from src.domain.errors.audit_error import AuditError
from src.domain.errors.email_error import EmailDeliveryError
from src.domain.errors.emociograma_error import EmociogramaError
from src.domain.errors.identity_provider_error import (
    IdentityProviderError,
    IdentityProviderRejectedError,
    IdentityProviderUnavailableError,
)
from src.domain.errors.rate_limit_error import RateLimitError
from src.domain.errors.user_error import UserError

__all__ = [
    "AuditError",
    "EmailDeliveryError",
    "EmociogramaError",
    "IdentityProviderError",
    "IdentityProviderRejectedError",
    "IdentityProviderUnavailableError",
    "RateLimitError",
    "UserError",
]
