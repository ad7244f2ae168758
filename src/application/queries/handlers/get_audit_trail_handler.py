"""Get Audit Trail query handler."""

from src.application.dtos import AuditEntryResult, AuditTrailPage
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.lgpd_queries import GetAuditTrail
from src.application.validation import validation_error
from src.core.result import Failure, Result, Success
from src.domain.protocols import AuditProtocol
from src.domain.protocols.audit_protocol import MAX_QUERY_LIMIT


class GetAuditTrailHandler:
    """Handler for GetAuditTrail query."""

    def __init__(self, audit: AuditProtocol) -> None:
        self._audit = audit

    async def handle(
        self, query: GetAuditTrail
    ) -> Result[AuditTrailPage, ApplicationError]:
        """Read the user's audit trail, newest first.

        Returns:
            Success(AuditTrailPage) or Failure(ApplicationError).
        """
        if not 1 <= query.limit <= MAX_QUERY_LIMIT:
            return Failure(
                error=validation_error(f"limit must be between 1 and {MAX_QUERY_LIMIT}", "limit")
            )
        if query.offset < 0:
            return Failure(error=validation_error("offset must not be negative", "offset"))

        result = await self._audit.query(
            user_id=query.user_id,
            organization_id=query.organization_id,
            action=query.action,
            limit=query.limit,
            offset=query.offset,
        )
        if isinstance(result, Failure):
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.QUERY_FAILED, result.error
                )
            )

        return Success(
            value=AuditTrailPage(
                data=[AuditEntryResult.from_entry(e) for e in result.value.entries],
                total=result.value.total,
            )
        )
