"""Email service implementations.

This package contains email service adapters:
- ResendEmailService: Resend HTTP API for production
- StubEmailService: Structured logging for development/testing
"""

from src.infrastructure.email.resend_email_service import ResendEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "ResendEmailService",
    "StubEmailService",
]
