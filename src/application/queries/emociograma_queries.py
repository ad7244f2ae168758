"""Emociograma queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AlertSeverity


@dataclass(frozen=True, kw_only=True)
class ListMySubmissions:
    """List the caller's own submissions, newest first."""

    user_id: UUID
    organization_id: UUID
    page: int = 1
    limit: int = 20


@dataclass(frozen=True, kw_only=True)
class ListAlerts:
    """List alerts of an organization, newest first.

    Attributes:
        organization_id: Organization of the manager.
        page: 1-based page number.
        limit: Page size (1-100).
        include_resolved: Include resolved alerts.
        severity: Optional severity filter.
    """

    organization_id: UUID
    page: int = 1
    limit: int = 20
    include_resolved: bool = False
    severity: AlertSeverity | None = None


@dataclass(frozen=True, kw_only=True)
class GetAlert:
    """Fetch one alert inside an organization."""

    alert_id: UUID
    organization_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAlertDashboard:
    """Alert counters and the most urgent pending alerts."""

    organization_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetSubmission:
    """Fetch one submission inside an organization.

    Attributes:
        submission_id: Submission to fetch.
        organization_id: Organization of the caller.
        requester_id: Caller.
        requester_is_manager: Caller is a gestor or admin. Other users only
            read their own submissions.
    """

    submission_id: UUID
    organization_id: UUID
    requester_id: UUID
    requester_is_manager: bool = False


@dataclass(frozen=True, kw_only=True)
class ListTeamSubmissions:
    """List submissions of an organization for managers, newest first."""

    organization_id: UUID
    page: int = 1
    limit: int = 20
    department: str | None = None
    team: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListCategories:
    """List emotion categories by display order."""

    include_inactive: bool = False
