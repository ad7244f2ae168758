"""Failure payloads returned by psicozen command and query handlers.

Handlers never raise for expected outcomes. They return
``Failure(error=ApplicationError(...))`` and the routers map the code to an
HTTP status through ErrorResponseBuilder. ``details`` carries string context
for the client; validation failures name the offending input under
``field`` so the problem body can list it in ``errors``.

Exports:
    ApplicationErrorCode: Outcome category of a failed handler
    ApplicationError: Failure payload with shortcut constructors
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Outcome category of a failed command or query.

    The value is the last segment of the problem ``type`` URI
    (``/errors/not_found``), so members are part of the public API.
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Failure payload of a handler Result.

    Attributes:
        code: Outcome category.
        message: Client facing message. Never carries tokens or comments of
            anonymous submissions.
        domain_error: Underlying domain or provider error, kept for logs.
        details: String context, e.g. ``{"alert_id": "..."}`` or
            ``{"field": "emotion_level"}``.

    Examples:
        >>> ApplicationError.invalid("emotion_level must be between 1 and 10",
        ...                          "emotion_level").field
        'emotion_level'
        >>> ApplicationError.not_found("Alert", alert_id).details
        {'alert_id': '0192f0c4-...'}
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @property
    def field(self) -> str | None:
        """Request field a validation failure refers to, if any."""
        return (self.details or {}).get("field")

    @classmethod
    def invalid(cls, message: str, field: str) -> "ApplicationError":
        """COMMAND_VALIDATION_FAILED for a single input field."""
        return cls(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=message,
            details={"field": field},
        )

    @classmethod
    def not_found(cls, resource: str, resource_id: UUID) -> "ApplicationError":
        """NOT_FOUND as ``"<resource> not found"``.

        Args:
            resource: Capitalized resource name ("User", "Alert").
            resource_id: Identifier that missed, echoed as
                ``<resource>_id`` in details.
        """
        return cls(
            code=ApplicationErrorCode.NOT_FOUND,
            message=f"{resource} not found",
            details={f"{resource.lower()}_id": str(resource_id)},
        )

    @classmethod
    def wrap(
        cls,
        code: ApplicationErrorCode,
        domain_error: DomainError,
        message: str | None = None,
    ) -> "ApplicationError":
        """Wrap a domain error, reusing its message unless one is given."""
        return cls(
            code=code,
            message=message or domain_error.message,
            domain_error=domain_error,
        )
