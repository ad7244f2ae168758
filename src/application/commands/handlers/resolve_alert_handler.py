"""Resolve Alert handler."""

from src.application.commands.emociograma_commands import ResolveAlert
from src.application.dtos import AlertResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.audit_recorder import record_audit
from src.application.validation import RESOLUTION_NOTES_MAX_LENGTH, validation_error
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.errors import EmociogramaError
from src.domain.protocols import AlertRepository, AuditProtocol, LoggerProtocol


class ResolveAlertHandler:
    """Handler for ResolveAlert command."""

    def __init__(
        self,
        alert_repo: AlertRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._alert_repo = alert_repo
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: ResolveAlert) -> Result[AlertResult, ApplicationError]:
        """Handle ResolveAlert command.

        Returns:
            Success(AlertResult) with the resolved alert.
            Failure(ApplicationError): NOT_FOUND, CONFLICT or
                COMMAND_VALIDATION_FAILED.
        """
        if cmd.notes is not None and len(cmd.notes) > RESOLUTION_NOTES_MAX_LENGTH:
            return Failure(
                error=validation_error(
                    f"notes must be at most {RESOLUTION_NOTES_MAX_LENGTH} characters",
                    "notes",
                )
            )

        alert = await self._alert_repo.find_by_id(cmd.alert_id, cmd.organization_id)
        if alert is None:
            return Failure(error=ApplicationError.not_found("Alert", cmd.alert_id))

        resolved = alert.resolve(resolved_by=cmd.resolved_by, notes=cmd.notes)
        if isinstance(resolved, Failure):
            code = (
                ApplicationErrorCode.CONFLICT
                if resolved.error == EmociogramaError.ALERT_ALREADY_RESOLVED
                else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            )
            return Failure(error=ApplicationError(code=code, message=resolved.error))

        await self._alert_repo.update(alert)

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.ALERT_RESOLVED,
            user_id=cmd.resolved_by,
            organization_id=cmd.organization_id,
            resource_type="emociograma_alert",
            context={"alert_id": str(alert.id), "severity": alert.severity.value},
        )

        self._logger.info("Alert resolved", alert_id=str(alert.id))
        return Success(value=AlertResult.from_entity(alert))
