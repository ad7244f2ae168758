"""Send Magic Link handler.

Flow:
1. Normalize and validate the email address
2. Ask the identity provider to email a magic link (creating the user there)
3. Return Success(MessageResult)

Rate limiting happens in the presentation layer before the handler runs.
"""

from src.application.commands.auth_commands import SendMagicLink
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import IdentityProviderProtocol, LoggerProtocol
from src.domain.value_objects import Email

MAGIC_LINK_SENT = "Magic link sent successfully. Please check your email."


class SendMagicLinkHandler:
    """Handler for SendMagicLink command."""

    def __init__(
        self,
        identity_provider: IdentityProviderProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            identity_provider: Supabase Auth adapter.
            logger: Structured logger.
        """
        self._identity_provider = identity_provider
        self._logger = logger

    async def handle(self, cmd: SendMagicLink) -> Result[MessageResult, ApplicationError]:
        """Handle SendMagicLink command.

        Returns:
            Success(MessageResult) when the provider accepted the request.
            Failure(ApplicationError) with COMMAND_VALIDATION_FAILED otherwise.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=str(e),
                    details={"field": "email"},
                )
            )

        result = await self._identity_provider.send_magic_link(
            email=email.value, redirect_to=cmd.redirect_to
        )

        if isinstance(result, Failure):
            self._logger.warning(
                "Magic link request failed",
                email=email.masked(),
                error_code=result.error.code.value,
            )
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    result.error,
                    f"Failed to send magic link: {result.error.message}",
                )
            )

        self._logger.info("Magic link sent", email=email.masked())
        return Success(value=MessageResult(message=MAGIC_LINK_SENT))
