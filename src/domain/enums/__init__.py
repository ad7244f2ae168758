"""Domain enums for business logic.

Enums are centralized here for discoverability.

Available Enums:
    - AuditAction: Audit trail action types for LGPD compliance
    - UserRole: Roles (colaborador, gestor, admin)
    - AlertSeverity: Emotional alert severity (low..critical)
    - AlertType: What produced an alert
    - OtpType: Magic link verification types
"""

from src.domain.enums.alert_severity import AlertSeverity, AlertType
from src.domain.enums.audit_action import AuditAction
from src.domain.enums.otp_type import OtpType
from src.domain.enums.user_role import UserRole

__all__ = [
    "AlertSeverity",
    "AlertType",
    "AuditAction",
    "OtpType",
    "UserRole",
]
