"""Database models for persistence layer.

SQLAlchemy models mapped to tables. Infrastructure concern only: the domain
layer never imports these; repositories map models to entities.

Models:
    - user.py: User profile, organization membership and role
    - session.py: Refresh token sessions
    - emociograma_category.py: Emotion categories
    - emociograma_submission.py: Emotional check-ins
    - emociograma_alert.py: Manager alerts
    - audit_log.py: Append-only audit trail
"""

from src.infrastructure.persistence.models.audit_log import AuditLog
from src.infrastructure.persistence.models.emociograma_alert import EmociogramaAlert
from src.infrastructure.persistence.models.emociograma_category import (
    EmociogramaCategory,
)
from src.infrastructure.persistence.models.emociograma_submission import (
    EmociogramaSubmission,
)
from src.infrastructure.persistence.models.session import Session
from src.infrastructure.persistence.models.user import User

__all__ = [
    "AuditLog",
    "EmociogramaAlert",
    "EmociogramaCategory",
    "EmociogramaSubmission",
    "Session",
    "User",
]
