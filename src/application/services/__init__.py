"""Application services shared by several handlers."""

from src.application.services.alert_service import AlertService
from src.application.services.audit_recorder import record_audit
from src.application.services.comment_moderation_service import (
    CommentModerationService,
    ModerationResult,
)

__all__ = [
    "AlertService",
    "CommentModerationService",
    "ModerationResult",
    "record_audit",
]
