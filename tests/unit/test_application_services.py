"""Unit tests for application services.

Tests cover:
- CommentModerationService: masking, urgent flags, HTML escaping
- AlertService: manager lookup, duplicate guard, email failures, error boundary
- Email templates: subjects and links
- record_audit: best-effort recording

Architecture:
- Unit tests with mocked repositories and email protocol
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.services.alert_service import AlertService
from src.application.services.audit_recorder import record_audit
from src.application.services.comment_moderation_service import (
    FILTERED_REASON,
    URGENT_REASON,
    CommentModerationService,
)
from src.application.services.email_templates import (
    DATA_DELETION_SUBJECT,
    alert_notification_email,
    data_deletion_confirmation_email,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import EmociogramaAlert, EmociogramaSubmission, User
from src.domain.enums import AuditAction, UserRole
from src.domain.errors import AuditError, EmailDeliveryError

FRONTEND_URL = "https://app.psicozen.test"


def make_submission(level: int = 8, **overrides) -> EmociogramaSubmission:
    kwargs = {"organization_id": uuid7(), "user_id": uuid7(), "emotion_level": level}
    kwargs.update(overrides)
    return EmociogramaSubmission.create(**kwargs)


@pytest.mark.unit
class TestCommentModerationService:
    """Test CommentModerationService."""

    def test_clean_comment_passes(self, mock_logger):
        result = CommentModerationService(logger=mock_logger).moderate("Semana boa")

        assert result.sanitized_comment == "Semana boa"
        assert result.is_flagged is False
        assert result.flag_reasons == []

    @pytest.mark.parametrize("comment", [None, "", "   "])
    def test_blank_comment(self, mock_logger, comment):
        result = CommentModerationService(logger=mock_logger).moderate(comment)

        assert result.sanitized_comment == ""
        assert result.is_flagged is False

    def test_blocked_word_is_masked(self, mock_logger):
        result = CommentModerationService(logger=mock_logger).moderate(
            "Que reunião IDIOTA"
        )

        assert result.sanitized_comment == "Que reunião ******"
        assert result.is_flagged is True
        assert result.flag_reasons == [FILTERED_REASON]

    def test_urgent_content_is_flagged_and_kept(self, mock_logger):
        result = CommentModerationService(logger=mock_logger).moderate(
            "Sofri assédio na reunião"
        )

        assert result.sanitized_comment == "Sofri assédio na reunião"
        assert result.is_flagged is True
        assert result.flag_reasons == [URGENT_REASON]
        mock_logger.warning.assert_called_once()

    def test_html_is_escaped(self, mock_logger):
        result = CommentModerationService(logger=mock_logger).moderate(
            '<script>alert("x")</script>'
        )

        assert "<script>" not in result.sanitized_comment
        assert result.sanitized_comment.startswith("&lt;script&gt;")
        assert result.is_flagged is False


@pytest.mark.unit
class TestAlertService:
    """Test AlertService.trigger_emotional_alert."""

    def _service(self, mock_logger, managers, existing=None, send_result=None):
        user_repo = AsyncMock()
        user_repo.find_by_roles.return_value = managers
        alert_repo = AsyncMock()
        alert_repo.find_by_submission.return_value = existing
        email_service = AsyncMock()
        email_service.send.return_value = send_result or Success(value="msg")
        service = AlertService(
            user_repo=user_repo,
            alert_repo=alert_repo,
            email_service=email_service,
            logger=mock_logger,
            frontend_url=FRONTEND_URL,
        )
        return service, user_repo, alert_repo, email_service

    def _managers(self, organization_id):
        return [
            User.create(
                email="gestor@example.com",
                organization_id=organization_id,
                role=UserRole.GESTOR,
            ),
            User.create(
                email="admin@example.com",
                organization_id=organization_id,
                role=UserRole.ADMIN,
            ),
        ]

    @pytest.mark.asyncio
    async def test_creates_alert_and_notifies_managers(self, mock_logger):
        # Arrange
        submission = make_submission(level=9, team="Core")
        managers = self._managers(submission.organization_id)
        service, user_repo, alert_repo, email_service = self._service(
            mock_logger, managers
        )

        # Act
        alert = await service.trigger_emotional_alert(submission)

        # Assert
        assert alert is not None
        assert alert.submission_id == submission.id
        assert alert.notified_users == [m.id for m in managers]
        user_repo.find_by_roles.assert_awaited_once_with(
            submission.organization_id, UserRole.managers()
        )
        alert_repo.save.assert_awaited_once_with(alert)
        alert_repo.update.assert_awaited_once_with(alert)
        assert email_service.send.await_count == 2
        subject = email_service.send.await_args.kwargs["subject"]
        assert subject.startswith("[CRÍTICO]")

    @pytest.mark.asyncio
    async def test_below_threshold_does_nothing(self, mock_logger):
        service, user_repo, _, _ = self._service(mock_logger, [])

        assert await service.trigger_emotional_alert(make_submission(level=5)) is None
        user_repo.find_by_roles.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_managers(self, mock_logger):
        service, _, alert_repo, _ = self._service(mock_logger, [])

        assert await service.trigger_emotional_alert(make_submission()) is None
        alert_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_existing_alert_is_not_duplicated(self, mock_logger):
        submission = make_submission()
        service, _, alert_repo, email_service = self._service(
            mock_logger,
            self._managers(submission.organization_id),
            existing=EmociogramaAlert.from_submission(submission),
        )

        assert await service.trigger_emotional_alert(submission) is None
        alert_repo.save.assert_not_awaited()
        email_service.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_email_failure_skips_manager(self, mock_logger):
        submission = make_submission()
        managers = self._managers(submission.organization_id)
        failure = Failure(
            error=EmailDeliveryError(
                code=ErrorCode.EMAIL_DELIVERY_FAILED,
                message="bounced",
                recipient=managers[0].email,
            )
        )
        service, _, alert_repo, email_service = self._service(mock_logger, managers)
        email_service.send.side_effect = [failure, Success(value="msg")]

        alert = await service.trigger_emotional_alert(submission)

        assert alert.notified_users == [managers[1].id]
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_all_emails_fail_keeps_alert_unnotified(self, mock_logger):
        submission = make_submission()
        managers = self._managers(submission.organization_id)[:1]
        failure = Failure(
            error=EmailDeliveryError(
                code=ErrorCode.EMAIL_DELIVERY_FAILED,
                message="bounced",
                recipient=managers[0].email,
            )
        )
        service, _, alert_repo, _ = self._service(mock_logger, managers, send_result=failure)

        alert = await service.trigger_emotional_alert(submission)

        assert alert.was_notification_sent() is False
        alert_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_error_is_logged(self, mock_logger):
        service, user_repo, _, _ = self._service(mock_logger, [])
        user_repo.find_by_roles.side_effect = RuntimeError("db gone")

        assert await service.trigger_emotional_alert(make_submission()) is None
        mock_logger.error.assert_called_once()


@pytest.mark.unit
class TestEmailTemplates:
    """Test email template rendering."""

    def test_alert_notification(self):
        submission = make_submission(level=7, department="Financeiro", comment="Cansada")
        alert = EmociogramaAlert.from_submission(submission)

        message = alert_notification_email(
            alert=alert, submission=submission, frontend_url=FRONTEND_URL
        )

        assert message.subject == "[URGENTE] Alerta Emocional - PsicoZen"
        assert f"{FRONTEND_URL}/emociograma/alerts/{alert.id}" in message.html
        assert "Departamento:</strong> Financeiro" in message.html
        assert "Cansada" in message.text
        assert str(submission.user_id) not in message.html

    def test_data_deletion_confirmation(self):
        link = f"{FRONTEND_URL}/lgpd/confirm-deletion?token=abc"

        message = data_deletion_confirmation_email(confirmation_link=link)

        assert message.subject == DATA_DELETION_SUBJECT
        assert link in message.html
        assert link in message.text
        assert "24 horas" in message.text


@pytest.mark.unit
class TestRecordAudit:
    """Test best-effort audit recording."""

    @pytest.mark.asyncio
    async def test_success(self, mock_audit, mock_logger):
        stored = await record_audit(
            mock_audit,
            mock_logger,
            action=AuditAction.USER_LOGIN,
            user_id=uuid7(),
            context={"method": "magic_link"},
        )

        assert stored is True
        assert mock_audit.record.await_args.kwargs["context"] == {"method": "magic_link"}

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, mock_logger):
        audit = AsyncMock()
        audit.record.return_value = Failure(
            error=AuditError(code=ErrorCode.AUDIT_RECORD_FAILED, message="db down")
        )

        stored = await record_audit(
            audit, mock_logger, action=AuditAction.USER_LOGOUT, user_id=None
        )

        assert stored is False
        mock_logger.error.assert_called_once()
