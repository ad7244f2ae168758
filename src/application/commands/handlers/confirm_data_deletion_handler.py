"""Confirm Data Deletion handler (LGPD Art. 18, VI - right to erasure).

Verifies the emailed token (signature, expiry, purpose and owner), then
hard-deletes every submission of the user in the organization named by the
token.
"""

from uuid import UUID

from src.application.commands.lgpd_commands import ConfirmDataDeletion
from src.application.commands.handlers.request_data_deletion_handler import (
    DATA_DELETION_PURPOSE,
)
from src.application.dtos import LgpdActionResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.audit_recorder import record_audit
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import (
    AuditProtocol,
    LoggerProtocol,
    SubmissionRepository,
    TokenGenerationProtocol,
)

INVALID_CONFIRMATION = "Invalid or expired confirmation token"
LGPD_ARTICLE = "LGPD Art. 18, VI"


class ConfirmDataDeletionHandler:
    """Handler for ConfirmDataDeletion command."""

    def __init__(
        self,
        submission_repo: SubmissionRepository,
        token_service: TokenGenerationProtocol,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._submission_repo = submission_repo
        self._token_service = token_service
        self._audit = audit
        self._logger = logger

    async def handle(
        self, cmd: ConfirmDataDeletion
    ) -> Result[LgpdActionResult, ApplicationError]:
        """Handle ConfirmDataDeletion command.

        Returns:
            Success(LgpdActionResult) with the number of deleted submissions.
            Failure(ApplicationError): UNAUTHORIZED or FORBIDDEN.
        """
        validated = self._token_service.validate_token(cmd.token, expected_type="action")
        if isinstance(validated, Failure):
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.UNAUTHORIZED,
                    validated.error,
                    INVALID_CONFIRMATION,
                )
            )
        payload = validated.value

        organization_claim = payload.get("organization_id")
        if payload.get("purpose") != DATA_DELETION_PURPOSE or not organization_claim:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED, message=INVALID_CONFIRMATION
                )
            )

        if payload.get("sub") != str(cmd.user_id):
            self._logger.warning(
                "Data deletion token used by another user", user_id=str(cmd.user_id)
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Confirmation token does not belong to this user",
                )
            )

        organization_id = UUID(organization_claim)
        count = await self._submission_repo.delete_by_user(cmd.user_id, organization_id)

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_DATA_DELETED,
            user_id=cmd.user_id,
            organization_id=organization_id,
            resource_type="emociograma_submission",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context={
                "reason": "LGPD_right_to_erasure",
                "lgpd_article": LGPD_ARTICLE,
                "deleted_count": count,
            },
        )

        self._logger.info("User data deleted", user_id=str(cmd.user_id), deleted_count=count)
        return Success(
            value=LgpdActionResult(
                message="Data deleted successfully", affected_records=count
            )
        )
