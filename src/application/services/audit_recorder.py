"""Best-effort audit recording for handlers.

Audit failures never fail the business operation; they are logged as
errors so they show up in alerting.
"""

from typing import Any
from uuid import UUID

from src.core.result import Failure
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol


async def record_audit(
    audit: AuditProtocol,
    logger: LoggerProtocol,
    *,
    action: AuditAction,
    user_id: UUID | None,
    organization_id: UUID | None = None,
    performed_by: UUID | None = None,
    resource_type: str | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
    context: dict[str, Any] | None = None,
) -> bool:
    """Record an audit entry, logging instead of propagating failures.

    Returns:
        bool: True if the entry was stored.
    """
    result = await audit.record(
        action=action,
        user_id=user_id,
        organization_id=organization_id,
        performed_by=performed_by,
        resource_type=resource_type,
        ip_address=ip_address,
        user_agent=user_agent,
        context=context,
    )
    if isinstance(result, Failure):
        logger.error(
            "Audit record failed",
            action=action.value,
            user_id=str(user_id) if user_id else None,
            error_code=result.error.code.value,
            error_message=result.error.message,
        )
        return False
    return True
