"""Request Data Deletion handler.

Erasure is a two-step flow: this handler audits the request and emails a
confirmation link carrying a signed, single-purpose token valid for 24
hours. ConfirmDataDeletionHandler performs the erasure.
"""

from src.application.commands.lgpd_commands import RequestDataDeletion
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.audit_recorder import record_audit
from src.application.services.email_templates import data_deletion_confirmation_email
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import (
    AuditProtocol,
    EmailProtocol,
    LoggerProtocol,
    TokenGenerationProtocol,
    UserRepository,
)

DATA_DELETION_PURPOSE = "data_deletion"
CONFIRMATION_TOKEN_TTL_SECONDS = 24 * 60 * 60


class RequestDataDeletionHandler:
    """Handler for RequestDataDeletion command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        email_service: EmailProtocol,
        audit: AuditProtocol,
        logger: LoggerProtocol,
        frontend_url: str,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User lookup (recipient address).
            token_service: Issues the confirmation token.
            email_service: Sends the confirmation email.
            audit: Audit trail.
            logger: Structured logger.
            frontend_url: Base URL of the confirmation page.
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._email_service = email_service
        self._audit = audit
        self._logger = logger
        self._frontend_url = frontend_url

    async def handle(
        self, cmd: RequestDataDeletion
    ) -> Result[MessageResult, ApplicationError]:
        """Handle RequestDataDeletion command.

        Returns:
            Success(MessageResult) once the email is accepted.
            Failure(ApplicationError): NOT_FOUND or COMMAND_EXECUTION_FAILED.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.DATA_DELETION_REQUESTED,
            user_id=user.id,
            organization_id=cmd.organization_id,
            resource_type="user",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context={"lgpd_article": "LGPD Art. 18, VI"},
        )

        token = self._token_service.generate_action_token(
            user_id=user.id,
            purpose=DATA_DELETION_PURPOSE,
            expires_in_seconds=CONFIRMATION_TOKEN_TTL_SECONDS,
            claims={"organization_id": str(cmd.organization_id)},
        )
        link = f"{self._frontend_url}/lgpd/confirm-deletion?token={token}"
        message = data_deletion_confirmation_email(confirmation_link=link)

        sent = await self._email_service.send(
            to=user.email, subject=message.subject, html=message.html, text=message.text
        )
        if isinstance(sent, Failure):
            self._logger.error(
                "Data deletion confirmation email failed",
                user_id=str(user.id),
                error_message=sent.error.message,
            )
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    sent.error,
                    "Failed to send confirmation email",
                )
            )

        self._logger.info("Data deletion requested", user_id=str(user.id))
        return Success(
            value=MessageResult(
                message="Confirmation email sent. Please check your inbox to confirm data deletion."
            )
        )
