"""Maintenance DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PurgeResult:
    """Rows removed by a maintenance run."""

    expired_sessions_deleted: int
    audit_entries_deleted: int
