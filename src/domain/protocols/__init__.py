"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement them without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import AuditProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.audit_protocol import AuditPage, AuditProtocol
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.identity_provider_protocol import (
    IdentityProviderProtocol,
    IdentityUser,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.rate_limit_protocol import RateLimitProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.alert_repository import AlertRepository, AlertStatistics
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.session_repository import SessionRepository
from src.domain.protocols.submission_repository import SubmissionRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AuditPage",
    "AuditProtocol",
    "EmailProtocol",
    "IdentityProviderProtocol",
    "IdentityUser",
    "LoggerProtocol",
    "RateLimitProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "AlertRepository",
    "AlertStatistics",
    "CategoryRepository",
    "SessionRepository",
    "SubmissionRepository",
    "UserRepository",
]
