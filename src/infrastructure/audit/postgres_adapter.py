"""PostgreSQL implementation of AuditProtocol.

Append-only audit trail for LGPD compliance:
- Every entry is committed immediately on its own session, so it survives
  a rollback of the business transaction that produced it
- Query and purge never raise; failures come back as Failure(AuditError)
- LGPD data subject actions are also echoed to the structured log at
  WARNING level for operational visibility

Usage:
    from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

    adapter = PostgresAuditAdapter(session, logger=logger)
    result = await adapter.record(
        action=AuditAction.USER_DATA_EXPORTED,
        user_id=user_id,
        organization_id=organization_id,
        resource_type="user",
        context={"submissions_count": 3},
    )
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.audit_log_entry import AuditLogEntry
from src.domain.enums import AuditAction
from src.domain.errors import AuditError
from src.domain.protocols.audit_protocol import MAX_QUERY_LIMIT, AuditPage
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.audit_log import AuditLog as AuditLogModel


class PostgresAuditAdapter:
    """PostgreSQL implementation of AuditProtocol.

    Attributes:
        session: Dedicated audit session (not the request session).
        logger: Optional structured logger for LGPD warnings.

    Thread Safety:
        NOT thread-safe (uses provided session). The container creates one
        audit session per request.
    """

    def __init__(
        self, session: AsyncSession, logger: LoggerProtocol | None = None
    ) -> None:
        """Initialize adapter with database session.

        Args:
            session: SQLAlchemy async session dedicated to audit writes.
            logger: Structured logger (optional).
        """
        self.session = session
        self.logger = logger

    async def record(
        self,
        *,
        action: AuditAction,
        user_id: UUID | None,
        organization_id: UUID | None = None,
        performed_by: UUID | None = None,
        resource_type: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        """Record an immutable audit entry and commit immediately.

        Returns:
            Success(None) if stored, Failure(AuditError) on database error.
        """
        try:
            audit_log = AuditLogModel(
                id=uuid7(),
                action=action.value,
                user_id=user_id,
                organization_id=organization_id,
                performed_by=performed_by,
                resource_type=resource_type,
                ip_address=ip_address,
                user_agent=user_agent,
                context=context or {},
                created_at=datetime.now(UTC),
            )
            self.session.add(audit_log)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    message=f"Failed to record audit log: {e}",
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    details={
                        "action": action.value,
                        "error_type": type(e).__name__,
                    },
                )
            )

        if action.is_lgpd_action and self.logger is not None:
            self.logger.warning(
                "LGPD action recorded",
                action=action.value,
                user_id=str(user_id) if user_id else None,
                organization_id=str(organization_id) if organization_id else None,
            )
        return Success(value=None)

    async def query(
        self,
        *,
        user_id: UUID | None = None,
        organization_id: UUID | None = None,
        action: AuditAction | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[AuditPage, AuditError]:
        """Query the audit trail, newest first.

        Limit is capped at 1000 to bound the response size.

        Returns:
            Success(AuditPage) or Failure(AuditError).
        """
        limit = max(1, min(limit, MAX_QUERY_LIMIT))
        offset = max(0, offset)

        conditions = []
        if user_id is not None:
            conditions.append(AuditLogModel.user_id == user_id)
        if organization_id is not None:
            conditions.append(AuditLogModel.organization_id == organization_id)
        if action is not None:
            conditions.append(AuditLogModel.action == action.value)
        if start_date is not None:
            conditions.append(AuditLogModel.created_at >= start_date)
        if end_date is not None:
            conditions.append(AuditLogModel.created_at <= end_date)

        try:
            count_stmt = (
                select(func.count()).select_from(AuditLogModel).where(*conditions)
            )
            total = (await self.session.execute(count_stmt)).scalar() or 0

            result = await self.session.execute(
                select(AuditLogModel)
                .where(*conditions)
                .order_by(AuditLogModel.created_at.desc(), AuditLogModel.id.desc())
                .limit(limit)
                .offset(offset)
            )
            entries = [self._to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    message=f"Failed to query audit logs: {e}",
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    details={"error_type": type(e).__name__},
                )
            )

        return Success(value=AuditPage(entries=entries, total=total))

    async def purge_older_than(self, cutoff: datetime) -> Result[int, AuditError]:
        """Delete entries created before ``cutoff``.

        Returns:
            Success(deleted_count) or Failure(AuditError).
        """
        try:
            result = await self.session.execute(
                delete(AuditLogModel).where(AuditLogModel.created_at < cutoff)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    message=f"Failed to purge audit logs: {e}",
                    code=ErrorCode.AUDIT_PURGE_FAILED,
                    details={"cutoff": cutoff.isoformat()},
                )
            )

        return Success(value=result.rowcount or 0)  # type: ignore[attr-defined]

    @staticmethod
    def _to_domain(model: AuditLogModel) -> AuditLogEntry:
        return AuditLogEntry(
            id=model.id,
            action=model.action,
            user_id=model.user_id,
            organization_id=model.organization_id,
            performed_by=model.performed_by,
            resource_type=model.resource_type,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            context=dict(model.context or {}),
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
        )
