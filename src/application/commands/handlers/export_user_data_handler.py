"""Export User Data handler (LGPD Art. 18, IV - data portability).

Collects the profile and every submission of the user in the organization,
audits the export and returns the payload. Internal identifiers of
submissions (id, organization, flags) are left out of the export.
"""

from datetime import UTC, datetime
from typing import Any

from src.application.commands.lgpd_commands import ExportUserData
from src.application.dtos import UserDataExport
from src.application.errors import ApplicationError
from src.application.services.audit_recorder import record_audit
from src.core.result import Failure, Result, Success
from src.domain.entities import EmociogramaSubmission
from src.domain.enums import AuditAction
from src.domain.protocols import (
    AuditProtocol,
    LoggerProtocol,
    SubmissionRepository,
    UserRepository,
)

EXPORT_BATCH_SIZE = 500
LGPD_ARTICLE = "LGPD Art. 18, IV"


def _export_submission(submission: EmociogramaSubmission) -> dict[str, Any]:
    return {
        "submitted_at": submission.submitted_at,
        "emotion_level": submission.emotion_level,
        "emotion_emoji": submission.emotion_emoji,
        "category_id": submission.category_id,
        "comment": submission.comment,
        "is_anonymous": submission.is_anonymous,
        "department": submission.department,
        "team": submission.team,
    }


class ExportUserDataHandler:
    """Handler for ExportUserData command."""

    def __init__(
        self,
        user_repo: UserRepository,
        submission_repo: SubmissionRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._submission_repo = submission_repo
        self._audit = audit
        self._logger = logger

    async def handle(
        self, cmd: ExportUserData
    ) -> Result[UserDataExport, ApplicationError]:
        """Handle ExportUserData command.

        Returns:
            Success(UserDataExport).
            Failure(ApplicationError) with NOT_FOUND.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        submissions: list[dict[str, Any]] = []
        offset = 0
        while True:
            batch, total = await self._submission_repo.find_by_user(
                cmd.user_id,
                cmd.organization_id,
                limit=EXPORT_BATCH_SIZE,
                offset=offset,
            )
            submissions.extend(_export_submission(s) for s in batch)
            offset += len(batch)
            if not batch or offset >= total:
                break

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_DATA_EXPORTED,
            user_id=user.id,
            organization_id=cmd.organization_id,
            resource_type="user",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context={
                "submissions_count": len(submissions),
                "lgpd_article": LGPD_ARTICLE,
            },
        )

        return Success(
            value=UserDataExport(
                profile={
                    "id": user.id,
                    "email": user.email,
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "created_at": user.created_at,
                },
                submissions=submissions,
                exported_at=datetime.now(UTC),
            )
        )
