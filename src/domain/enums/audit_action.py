"""Audit action types for LGPD compliance tracking.

Every sensitive action (authentication, personal data access, export,
anonymization, deletion) is recorded with one of these actions.

Categories:
    - Authentication: USER_LOGIN, USER_LOGOUT
    - User management: USER_CREATED, USER_UPDATED, USER_DELETED, USER_DEACTIVATED
    - LGPD data subject rights: USER_DATA_* and DATA_DELETION_REQUESTED
    - Emociograma: ALERT_RESOLVED

Usage:
    from src.domain.enums import AuditAction

    await audit.record(
        action=AuditAction.USER_DATA_EXPORTED,
        user_id=user_id,
        resource_type="user",
        context={"submissions_count": 12},
    )
"""

from enum import Enum


class AuditAction(str, Enum):
    """Audit action types.

    String Enum:
        Values are snake_case strings stored verbatim in audit_logs.action.
    """

    # Authentication
    USER_LOGIN = "user_login"
    USER_LOGOUT = "user_logout"

    # User management
    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"
    USER_DEACTIVATED = "user_deactivated"

    # LGPD data subject rights
    USER_DATA_EXPORTED = "user_data_exported"
    USER_DATA_ANONYMIZED = "user_data_anonymized"
    DATA_DELETION_REQUESTED = "data_deletion_requested"
    USER_DATA_DELETED = "user_data_deleted"

    # Emociograma
    ALERT_RESOLVED = "alert_resolved"

    @property
    def is_lgpd_action(self) -> bool:
        """Whether the action exercises an LGPD data subject right.

        Returns:
            bool: True for export, anonymization and deletion actions.
        """
        return self in {
            AuditAction.USER_DATA_EXPORTED,
            AuditAction.USER_DATA_ANONYMIZED,
            AuditAction.USER_DATA_DELETED,
        }
