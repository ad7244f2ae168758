"""AlertRepository - SQLAlchemy implementation of AlertRepository protocol.

Adapter for hexagonal architecture.
Maps between EmociogramaAlert entities and the alerts table.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.emociograma_alert import EmociogramaAlert
from src.domain.enums import AlertSeverity, AlertType
from src.domain.protocols.alert_repository import AlertStatistics
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.emociograma_alert import (
    EmociogramaAlert as AlertModel,
)


class AlertRepository:
    """SQLAlchemy implementation of AlertRepository protocol.

    Notified user ids are stored as a JSON list of strings.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, alert: EmociogramaAlert) -> None:
        """Persist a new alert.

        Raises:
            IntegrityError: If the submission already has an alert.
        """
        self.session.add(self._to_model(alert))
        await self.session.commit()

    async def update(self, alert: EmociogramaAlert) -> None:
        """Persist resolution or notification changes.

        Raises:
            NoResultFound: If the alert doesn't exist.
        """
        result = await self.session.execute(
            select(AlertModel).where(AlertModel.id == alert.id)
        )
        model = result.scalar_one()
        model.is_resolved = alert.is_resolved
        model.resolved_at = alert.resolved_at
        model.resolved_by = alert.resolved_by
        model.resolution_notes = alert.resolution_notes
        model.notified_users = [str(user_id) for user_id in alert.notified_users]
        model.notification_sent_at = alert.notification_sent_at
        model.updated_at = alert.updated_at
        await self.session.commit()

    async def find_by_id(
        self, alert_id: UUID, organization_id: UUID
    ) -> EmociogramaAlert | None:
        """Find an alert inside an organization."""
        result = await self.session.execute(
            select(AlertModel).where(
                AlertModel.id == alert_id,
                AlertModel.organization_id == organization_id,
            )
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_submission(self, submission_id: UUID) -> EmociogramaAlert | None:
        """Find the alert generated by a submission."""
        result = await self.session.execute(
            select(AlertModel).where(AlertModel.submission_id == submission_id)
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

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

        Returns:
            Tuple of (alerts in page, total).
        """
        conditions = [AlertModel.organization_id == organization_id]
        if not include_resolved:
            conditions.append(AlertModel.is_resolved.is_(False))
        if severity is not None:
            conditions.append(AlertModel.severity == severity.value)

        count_stmt = select(func.count()).select_from(AlertModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        result = await self.session.execute(
            select(AlertModel)
            .where(*conditions)
            .order_by(AlertModel.created_at.desc(), AlertModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def get_statistics(
        self, organization_id: UUID, *, resolved_since: datetime
    ) -> AlertStatistics:
        """Count alerts of an organization for the dashboard."""
        in_org = AlertModel.organization_id == organization_id
        counts = await self.session.execute(
            select(
                func.count(),
                func.count().filter(AlertModel.is_resolved.is_(False)),
                func.count().filter(
                    AlertModel.is_resolved.is_(True),
                    AlertModel.resolved_at >= resolved_since,
                ),
            ).where(in_org)
        )
        total, unresolved, resolved = counts.one()

        by_severity = dict.fromkeys(AlertSeverity, 0)
        rows = await self.session.execute(
            select(AlertModel.severity, func.count())
            .where(in_org)
            .group_by(AlertModel.severity)
        )
        for severity, count in rows.all():
            by_severity[AlertSeverity(severity)] = count

        return AlertStatistics(
            total=total or 0,
            unresolved=unresolved or 0,
            resolved_since=resolved or 0,
            by_severity=by_severity,
        )

    async def find_unresolved(
        self, organization_id: UUID, *, limit: int
    ) -> list[EmociogramaAlert]:
        """List pending alerts, most severe first, then newest first."""
        urgency = case(
            {severity.value: severity.urgency for severity in AlertSeverity},
            value=AlertModel.severity,
            else_=0,
        )
        result = await self.session.execute(
            select(AlertModel)
            .where(
                AlertModel.organization_id == organization_id,
                AlertModel.is_resolved.is_(False),
            )
            .order_by(
                urgency.desc(), AlertModel.created_at.desc(), AlertModel.id.desc()
            )
            .limit(limit)
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, model: AlertModel) -> EmociogramaAlert:
        return EmociogramaAlert(
            id=model.id,
            organization_id=model.organization_id,
            submission_id=model.submission_id,
            alert_type=AlertType(model.alert_type),
            severity=AlertSeverity(model.severity),
            message=model.message,
            is_resolved=model.is_resolved,
            resolved_at=ensure_utc(model.resolved_at),
            resolved_by=model.resolved_by,
            resolution_notes=model.resolution_notes,
            notified_users=[UUID(user_id) for user_id in model.notified_users or []],
            notification_sent_at=ensure_utc(model.notification_sent_at),
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, alert: EmociogramaAlert) -> AlertModel:
        return AlertModel(
            id=alert.id,
            organization_id=alert.organization_id,
            submission_id=alert.submission_id,
            alert_type=alert.alert_type.value,
            severity=alert.severity.value,
            message=alert.message,
            is_resolved=alert.is_resolved,
            resolved_at=alert.resolved_at,
            resolved_by=alert.resolved_by,
            resolution_notes=alert.resolution_notes,
            notified_users=[str(user_id) for user_id in alert.notified_users],
            notification_sent_at=alert.notification_sent_at,
            created_at=alert.created_at,
            updated_at=alert.updated_at,
        )
