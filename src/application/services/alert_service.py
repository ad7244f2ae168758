"""Emotional alert workflow.

Runs after a submission at or above the alert threshold has been stored:

1. Find the organization's managers (gestor, admin)
2. Persist one alert for the submission
3. Email each manager (failures are logged, the loop continues)
4. Record the managers that were actually notified

The workflow runs as a background task after the HTTP response is sent, so
it never raises: every failure is logged.
"""

from uuid import UUID

from src.application.services.email_templates import alert_notification_email
from src.core.result import Failure
from src.domain.entities import EmociogramaAlert, EmociogramaSubmission
from src.domain.enums import UserRole
from src.domain.protocols import (
    AlertRepository,
    EmailProtocol,
    LoggerProtocol,
    UserRepository,
)


class AlertService:
    """Creates manager alerts for concerning submissions.

    Args:
        user_repo: Source of manager recipients.
        alert_repo: Alert persistence.
        email_service: Notification delivery.
        logger: Structured logger.
        frontend_url: Base URL for links in emails.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        alert_repo: AlertRepository,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        frontend_url: str,
    ) -> None:
        self._user_repo = user_repo
        self._alert_repo = alert_repo
        self._email_service = email_service
        self._logger = logger
        self._frontend_url = frontend_url

    async def trigger_emotional_alert(
        self, submission: EmociogramaSubmission
    ) -> EmociogramaAlert | None:
        """Create the alert and notify managers.

        Args:
            submission: Persisted submission.

        Returns:
            The alert, or None when no alert was created (below threshold,
            no managers, already alerted, or an error occurred).
        """
        log = self._logger.bind(
            submission_id=str(submission.id),
            organization_id=str(submission.organization_id),
        )

        if not submission.should_trigger_alert():
            return None

        try:
            return await self._run(submission, log)
        except Exception as e:  # background task boundary
            log.error("Emotional alert failed", error=e)
            return None

    async def _run(
        self, submission: EmociogramaSubmission, log: LoggerProtocol
    ) -> EmociogramaAlert | None:
        log.info("Triggering emotional alert", emotion_level=submission.emotion_level)

        managers = await self._user_repo.find_by_roles(
            submission.organization_id, UserRole.managers()
        )
        if not managers:
            log.warning("No managers found for organization, alert skipped")
            return None

        if await self._alert_repo.find_by_submission(submission.id) is not None:
            log.info("Alert already exists for submission")
            return None

        alert = EmociogramaAlert.from_submission(submission)
        await self._alert_repo.save(alert)

        message = alert_notification_email(
            alert=alert, submission=submission, frontend_url=self._frontend_url
        )

        notified: list[UUID] = []
        for manager in managers:
            result = await self._email_service.send(
                to=manager.email,
                subject=message.subject,
                html=message.html,
                text=message.text,
            )
            if isinstance(result, Failure):
                log.warning(
                    "Alert email failed",
                    manager_id=str(manager.id),
                    error_message=result.error.message,
                )
                continue
            notified.append(manager.id)

        if notified:
            alert.record_notification(notified)
            await self._alert_repo.update(alert)

        log.info(
            "Emotional alert created",
            alert_id=str(alert.id),
            severity=alert.severity.value,
            notified_count=len(notified),
            manager_count=len(managers),
        )
        return alert
