"""Submit Emociograma handler.

Flow:
1. Check the author exists and the category is selectable
2. Validate level and comment, then moderate the comment
3. Persist the submission
4. Level >= 6: schedule the alert workflow (runs after the response)
5. Return the submission, masked when anonymous
"""

from collections.abc import Callable

from src.application.commands.emociograma_commands import SubmitEmociograma
from src.application.dtos import SubmissionResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.comment_moderation_service import (
    CommentModerationService,
)
from src.application.validation import validation_error
from src.core.result import Failure, Result, Success
from src.domain.entities import EmociogramaSubmission
from src.domain.errors import EmociogramaError
from src.domain.protocols import (
    CategoryRepository,
    LoggerProtocol,
    SubmissionRepository,
    UserRepository,
)

AlertScheduler = Callable[[EmociogramaSubmission], None]


class SubmitEmociogramaHandler:
    """Handler for SubmitEmociograma command.

    Args:
        user_repo: Author lookup.
        submission_repo: Submission persistence.
        category_repo: Category lookup.
        moderation: Comment moderation.
        schedule_alert: Enqueues the alert workflow without awaiting it.
        logger: Structured logger.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        submission_repo: SubmissionRepository,
        category_repo: CategoryRepository,
        moderation: CommentModerationService,
        schedule_alert: AlertScheduler,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._submission_repo = submission_repo
        self._category_repo = category_repo
        self._moderation = moderation
        self._schedule_alert = schedule_alert
        self._logger = logger

    async def handle(
        self, cmd: SubmitEmociograma
    ) -> Result[SubmissionResult, ApplicationError]:
        """Handle SubmitEmociograma command.

        Returns:
            Success(SubmissionResult).
            Failure(ApplicationError): NOT_FOUND or COMMAND_VALIDATION_FAILED.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        if cmd.category_id is not None:
            category = await self._category_repo.find_by_id(cmd.category_id)
            if category is None or not category.is_active:
                return Failure(
                    error=validation_error(
                        EmociogramaError.CATEGORY_NOT_AVAILABLE, "category_id"
                    )
                )

        try:
            submission = EmociogramaSubmission.create(
                organization_id=cmd.organization_id,
                user_id=cmd.user_id,
                emotion_level=cmd.emotion_level,
                category_id=cmd.category_id,
                is_anonymous=cmd.is_anonymous,
                comment=cmd.comment,
                department=cmd.department,
                team=cmd.team,
            )
        except ValueError as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=str(e),
                )
            )

        if submission.comment:
            moderation = self._moderation.moderate(submission.comment)
            submission.apply_moderation(
                moderation.sanitized_comment, flagged=moderation.is_flagged
            )
            if moderation.is_flagged:
                self._logger.warning(
                    "Submission comment flagged for review",
                    user_id=str(cmd.user_id),
                    reasons=moderation.flag_reasons,
                )

        await self._submission_repo.save(submission)
        self._logger.info(
            "Emociograma submitted",
            submission_id=str(submission.id),
            emotion_level=submission.emotion_level,
            is_anonymous=submission.is_anonymous,
        )

        if submission.should_trigger_alert():
            self._schedule_alert(submission)

        return Success(value=SubmissionResult.from_entity(submission))
