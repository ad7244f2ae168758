"""EmailProtocol - Port for transactional email delivery.

Infrastructure provides ResendEmailService (production) and
StubEmailService (development and tests, logs instead of sending).
Message content is built by the application layer.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import EmailDeliveryError


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.

    Example:
        >>> result = await email_service.send(
        ...     to="gestor@example.com",
        ...     subject="[URGENTE] Alerta Emocional - PsicoZen",
        ...     html="<p>...</p>",
        ...     text="...",
        ... )
        >>> match result:
        ...     case Success(value=message_id):
        ...         ...
    """

    async def send(
        self,
        *,
        to: str | list[str],
        subject: str,
        html: str,
        text: str | None = None,
    ) -> Result[str, EmailDeliveryError]:
        """Send one message.

        Args:
            to: Recipient address or addresses.
            subject: Message subject.
            html: HTML body.
            text: Plain text body.

        Returns:
            Success(message_id) when accepted by the provider,
            Failure(EmailDeliveryError) otherwise.
        """
        ...
