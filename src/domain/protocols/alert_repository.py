"""AlertRepository protocol for emociograma alerts.

Port (interface) for hexagonal architecture.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.emociograma_alert import EmociogramaAlert
from src.domain.enums import AlertSeverity


@dataclass(frozen=True, slots=True, kw_only=True)
class AlertStatistics:
    """Alert counters of one organization.

    Attributes:
        total: All alerts.
        unresolved: Alerts still pending.
        resolved_since: Alerts resolved inside the requested window.
        by_severity: Alerts per severity, zero filled.
    """

    total: int
    unresolved: int
    resolved_since: int
    by_severity: dict[AlertSeverity, int]


class AlertRepository(Protocol):
    """Emociograma alert repository protocol (port)."""

    async def save(self, alert: EmociogramaAlert) -> None:
        """Persist a new alert.

        Args:
            alert: Alert entity.
        """
        ...

    async def update(self, alert: EmociogramaAlert) -> None:
        """Persist resolution or notification changes.

        Args:
            alert: Alert entity with updated fields.
        """
        ...

    async def find_by_id(
        self, alert_id: UUID, organization_id: UUID
    ) -> EmociogramaAlert | None:
        """Find an alert inside an organization.

        Args:
            alert_id: Alert identifier.
            organization_id: Organization scope.

        Returns:
            Alert if found, None otherwise.
        """
        ...

    async def find_by_submission(self, submission_id: UUID) -> EmociogramaAlert | None:
        """Find the alert generated by a submission.

        Args:
            submission_id: Submission identifier.

        Returns:
            Alert if one exists, None otherwise.
        """
        ...

    async def find_by_organization(
        self,
        organization_id: UUID,
        *,
        limit: int,
        offset: int = 0,
        include_resolved: bool = False,
        severity: AlertSeverity | None = None,
    ) -> tuple[list[EmociogramaAlert], int]:
        """List alerts of an organization, newest first.

        Args:
            organization_id: Organization scope.
            limit: Page size.
            offset: Rows to skip.
            include_resolved: Include resolved alerts.
            severity: Only alerts with this severity.

        Returns:
            Tuple of (alerts in page, total matching alerts).
        """
        ...

    async def get_statistics(
        self, organization_id: UUID, *, resolved_since: datetime
    ) -> AlertStatistics:
        """Count alerts of an organization for the dashboard.

        Args:
            organization_id: Organization scope.
            resolved_since: Start of the "resolved today" window.

        Returns:
            AlertStatistics with every severity present in ``by_severity``.
        """
        ...

    async def find_unresolved(
        self, organization_id: UUID, *, limit: int
    ) -> list[EmociogramaAlert]:
        """List pending alerts, most severe first, then newest first.

        Args:
            organization_id: Organization scope.
            limit: Maximum alerts returned.

        Returns:
            Pending alerts (may be empty).
        """
        ...
