"""Application DTOs (Data Transfer Objects).

Result dataclasses carried from handlers to the presentation layer.
"""

from src.application.dtos.auth_dtos import (
    AuthTokens,
    AuthUserSummary,
    MagicLinkSession,
    MessageResult,
)
from src.application.dtos.emociograma_dtos import (
    AlertDashboard,
    AlertPage,
    AlertResult,
    AlertStatisticsResult,
    CategoryResult,
    SubmissionPage,
    SubmissionResult,
)
from src.application.dtos.lgpd_dtos import (
    AuditEntryResult,
    AuditTrailPage,
    LgpdActionResult,
    UserDataExport,
)
from src.application.dtos.maintenance_dtos import PurgeResult
from src.application.dtos.user_dtos import UserPage, UserResult

__all__ = [
    "AlertDashboard",
    "AlertPage",
    "AlertResult",
    "AlertStatisticsResult",
    "AuditEntryResult",
    "AuditTrailPage",
    "AuthTokens",
    "AuthUserSummary",
    "CategoryResult",
    "LgpdActionResult",
    "MagicLinkSession",
    "MessageResult",
    "PurgeResult",
    "SubmissionPage",
    "SubmissionResult",
    "UserDataExport",
    "UserPage",
    "UserResult",
]
