"""Structured logging adapters (structlog)."""

from src.infrastructure.logging.console_adapter import ConsoleAdapter
from src.infrastructure.logging.redaction import mask_email, redact_sensitive_data

__all__ = ["ConsoleAdapter", "mask_email", "redact_sensitive_data"]
