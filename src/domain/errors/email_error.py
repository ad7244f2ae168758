"""Email delivery error type."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailDeliveryError(DomainError):
    """Email provider failed to accept a message.

    Attributes:
        recipient: Address the message was meant for.
    """

    recipient: str
