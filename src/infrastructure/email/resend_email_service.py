"""Resend email service.

Sends transactional email through ``POST https://api.resend.com/emails``.
Every failure (timeout, rejected payload, provider outage) comes back as
``EmailDeliveryError``; callers decide whether delivery is best-effort.
"""

from dataclasses import replace

import httpx

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import EmailDeliveryError
from src.infrastructure.providers.base_api_client import (
    DEFAULT_TIMEOUT_SECONDS,
    BaseAPIClient,
)

RESEND_API_URL = "https://api.resend.com"


class ResendEmailService(BaseAPIClient):
    """EmailProtocol implementation for Resend.

    Example:
        >>> service = ResendEmailService(api_key="re_...", sender="PsicoZen <no@x.io>")
        >>> result = await service.send(to="a@b.com", subject="Hi", html="<p>Hi</p>")
    """

    def __init__(
        self,
        *,
        api_key: str,
        sender: str,
        base_url: str = RESEND_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            service_name="resend",
            timeout=timeout,
            transport=transport,
        )
        self._api_key = api_key
        self._sender = sender

    def _rejected_error(self, message: str, status_code: int) -> DomainError:
        return EmailDeliveryError(
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            message=f"Email rejected by provider: {message}",
            recipient="",
            details={"status_code": status_code},
        )

    def _unavailable_error(
        self, message: str, status_code: int | None = None
    ) -> DomainError:
        return EmailDeliveryError(
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            message=message,
            recipient="",
            details={"status_code": status_code} if status_code else None,
        )

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
            text: Optional plain text body.

        Returns:
            Success(message_id) or Failure(EmailDeliveryError).
        """
        recipients = [to] if isinstance(to, str) else list(to)

        payload: dict[str, str | list[str]] = {
            "from": self._sender,
            "to": recipients,
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text

        result = await self._execute_and_parse_object(
            method="POST",
            path="/emails",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json_data=payload,
            operation="send_email",
        )

        if isinstance(result, Failure):
            return Failure(
                error=replace(result.error, recipient=", ".join(recipients))  # type: ignore[arg-type]
            )
        return Success(value=str(result.value.get("id", "")))
