"""Stub email service for development and testing.

Logs messages instead of sending them. Used whenever no Resend API key is
configured, so local runs and tests never reach the network.
"""

from uuid_extensions import uuid7

from src.core.result import Result, Success
from src.domain.errors import EmailDeliveryError
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email service that only logs.

    Attributes:
        sent: Messages "sent" during the process lifetime (inspected in tests).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[dict[str, str | list[str] | None]] = []

    async def send(
        self,
        *,
        to: str | list[str],
        subject: str,
        html: str,
        text: str | None = None,
    ) -> Result[str, EmailDeliveryError]:
        """Log the message and return a fake message id."""
        message_id = f"stub-{uuid7()}"
        self.sent.append({"to": to, "subject": subject, "html": html, "text": text})
        self._logger.warning(
            "Email delivery disabled, message logged only",
            to=to,
            subject=subject,
            message_id=message_id,
        )
        return Success(value=message_id)
