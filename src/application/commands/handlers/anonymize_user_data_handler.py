"""Anonymize User Data handler (LGPD Art. 18, II).

Detaches every submission of the user in the organization: user linkage and
comment are dropped, level, emoji, category and timestamps stay for
aggregate reporting. Irreversible.
"""

from src.application.commands.lgpd_commands import AnonymizeUserData
from src.application.dtos import LgpdActionResult
from src.application.errors import ApplicationError
from src.application.services.audit_recorder import record_audit
from src.core.result import Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol, SubmissionRepository

LGPD_ARTICLE = "LGPD Art. 18, II"


class AnonymizeUserDataHandler:
    """Handler for AnonymizeUserData command."""

    def __init__(
        self,
        submission_repo: SubmissionRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._submission_repo = submission_repo
        self._audit = audit
        self._logger = logger

    async def handle(
        self, cmd: AnonymizeUserData
    ) -> Result[LgpdActionResult, ApplicationError]:
        """Handle AnonymizeUserData command.

        Returns:
            Success(LgpdActionResult) with the number of anonymized submissions.
        """
        count = await self._submission_repo.anonymize_by_user(
            cmd.user_id, cmd.organization_id
        )

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_DATA_ANONYMIZED,
            user_id=cmd.user_id,
            organization_id=cmd.organization_id,
            resource_type="emociograma_submission",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context={
                "reason": "LGPD_compliance",
                "lgpd_article": LGPD_ARTICLE,
                "anonymized_count": count,
            },
        )

        self._logger.info(
            "User data anonymized", user_id=str(cmd.user_id), anonymized_count=count
        )
        return Success(
            value=LgpdActionResult(
                message="Data anonymized successfully", affected_records=count
            )
        )
