"""Purge Expired Data handler (maintenance job).

Deletes sessions past their refresh expiry and audit entries older than the
retention period. Audit purge failures are reported; the session purge has
already been committed by then.
"""

from datetime import UTC, datetime, timedelta

from src.application.commands.maintenance_commands import PurgeExpiredData
from src.application.dtos import PurgeResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import AuditProtocol, LoggerProtocol, SessionRepository

DAYS_PER_YEAR = 365


class PurgeExpiredDataHandler:
    """Handler for PurgeExpiredData command."""

    def __init__(
        self,
        session_repo: SessionRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._session_repo = session_repo
        self._audit = audit
        self._logger = logger

    async def handle(
        self, cmd: PurgeExpiredData
    ) -> Result[PurgeResult, ApplicationError]:
        """Handle PurgeExpiredData command.

        Returns:
            Success(PurgeResult) with deleted row counts.
            Failure(ApplicationError) with COMMAND_EXECUTION_FAILED when the
            audit purge fails.
        """
        sessions_deleted = await self._session_repo.delete_expired()

        cutoff = datetime.now(UTC) - timedelta(days=DAYS_PER_YEAR * cmd.audit_retention_years)
        purged = await self._audit.purge_older_than(cutoff)
        if isinstance(purged, Failure):
            self._logger.error(
                "Audit retention purge failed",
                error_message=purged.error.message,
                expired_sessions_deleted=sessions_deleted,
            )
            return Failure(
                error=ApplicationError.wrap(
                    ApplicationErrorCode.COMMAND_EXECUTION_FAILED, purged.error
                )
            )

        result = PurgeResult(
            expired_sessions_deleted=sessions_deleted,
            audit_entries_deleted=purged.value,
        )
        self._logger.info(
            "Expired data purged",
            expired_sessions_deleted=result.expired_sessions_deleted,
            audit_entries_deleted=result.audit_entries_deleted,
            cutoff=cutoff.isoformat(),
        )
        return Success(value=result)
