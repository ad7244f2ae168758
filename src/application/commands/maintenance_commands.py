"""Maintenance commands (scheduled jobs)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PurgeExpiredData:
    """Delete expired sessions and audit entries past retention.

    Attributes:
        audit_retention_years: Audit entries older than this are deleted.
    """

    audit_retention_years: int = 2
