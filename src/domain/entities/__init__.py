"""Domain entities.

Mutable dataclasses with business rules and no framework dependencies.
"""

from src.domain.entities.audit_log_entry import AuditLogEntry
from src.domain.entities.emociograma_alert import EmociogramaAlert
from src.domain.entities.emociograma_category import EmociogramaCategory
from src.domain.entities.emociograma_submission import EmociogramaSubmission
from src.domain.entities.session import Session
from src.domain.entities.user import User, UserPreferences

__all__ = [
    "AuditLogEntry",
    "EmociogramaAlert",
    "EmociogramaCategory",
    "EmociogramaSubmission",
    "Session",
    "User",
    "UserPreferences",
]
