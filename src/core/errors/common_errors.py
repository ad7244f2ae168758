"""Common error classes shared by every module.

Error Types:
- ValidationError: Input rejected by a business rule (emotion level, comment size)
- NotFoundError: User, session, submission or alert missing
- ConflictError: Duplicate email, alert already resolved
- AuthenticationError: Magic link, access token or refresh token rejected
- AuthorizationError: Caller lacks the required role

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ALERT_NOT_FOUND,
        message="Alert not found",
        resource_type="EmociogramaAlert",
        resource_id=str(alert_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Business-rule validation failure.

    Attributes:
        field: Name of the offending field, when there is one.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Entity name (User, Session, EmociogramaAlert).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate value or invalid state transition).

    Attributes:
        resource_type: Entity name.
        conflicting_field: Field in conflict (email, is_resolved).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Credential rejected (magic link, access token, refresh token)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller is authenticated but not allowed.

    Attributes:
        required_permission: Role or permission that was required.
    """

    required_permission: str | None = None
