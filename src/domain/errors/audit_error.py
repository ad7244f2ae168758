"""Audit trail error types.

Returned when recording, querying or purging the audit trail fails.

Usage:
    from src.domain.errors import AuditError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=AuditError(
        code=ErrorCode.AUDIT_RECORD_FAILED,
        message="Failed to record audit log: connection lost",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Audit system failure (database error, connection loss).

    Attributes:
        code: AUDIT_RECORD_FAILED, AUDIT_QUERY_FAILED or AUDIT_PURGE_FAILED.
        message: Human-readable message.
        details: Additional context.
    """
