"""Unit tests for emociograma command and query handlers.

Tests cover:
- SubmitEmociogramaHandler: persistence, moderation, alert scheduling,
  anonymous masking, category availability, validation errors
- ResolveAlertHandler: resolution, already resolved, notes length, not found
- ListMySubmissionsHandler / ListAlertsHandler / GetAlertHandler
- GetSubmissionHandler: author unmasked, managers masked, others forbidden
- ListTeamSubmissionsHandler / GetAlertDashboardHandler / ListCategoriesHandler

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Real CommentModerationService (pure), mocked repositories
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.emociograma_commands import (
    ResolveAlert,
    SubmitEmociograma,
)
from src.application.commands.handlers.resolve_alert_handler import (
    ResolveAlertHandler,
)
from src.application.commands.handlers.submit_emociograma_handler import (
    SubmitEmociogramaHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.emociograma_queries import (
    GetAlert,
    GetAlertDashboard,
    GetSubmission,
    ListAlerts,
    ListCategories,
    ListMySubmissions,
    ListTeamSubmissions,
)
from src.application.queries.handlers.emociograma_handlers import (
    GetAlertDashboardHandler,
    GetAlertHandler,
    GetSubmissionHandler,
    ListAlertsHandler,
    ListCategoriesHandler,
    ListMySubmissionsHandler,
    ListTeamSubmissionsHandler,
)
from src.application.services.comment_moderation_service import (
    CommentModerationService,
)
from src.core.result import Success
from src.domain.entities import (
    EmociogramaAlert,
    EmociogramaCategory,
    EmociogramaSubmission,
    User,
)
from src.domain.enums import AlertSeverity, AuditAction
from src.domain.errors import EmociogramaError
from src.domain.protocols import AlertStatistics


def make_alert(level: int = 8) -> EmociogramaAlert:
    submission = EmociogramaSubmission.create(
        organization_id=uuid7(), user_id=uuid7(), emotion_level=level
    )
    return EmociogramaAlert.from_submission(submission)


@pytest.fixture
def author():
    return User.create(email="ana@example.com", organization_id=uuid7())


@pytest.fixture
def category_repo():
    repo = AsyncMock()
    repo.find_by_id.return_value = EmociogramaCategory.create(
        name="Trabalho", display_order=1
    )
    return repo


@pytest.fixture
def submit_deps(author, category_repo, mock_logger):
    user_repo = AsyncMock()
    user_repo.find_by_id.return_value = author
    submission_repo = AsyncMock()
    schedule_alert = Mock()
    handler = SubmitEmociogramaHandler(
        user_repo=user_repo,
        submission_repo=submission_repo,
        category_repo=category_repo,
        moderation=CommentModerationService(logger=mock_logger),
        schedule_alert=schedule_alert,
        logger=mock_logger,
    )
    return handler, submission_repo, schedule_alert


@pytest.mark.unit
class TestSubmitEmociogramaHandler:
    """Test SubmitEmociogramaHandler."""

    @pytest.mark.asyncio
    async def test_low_level_does_not_schedule_alert(self, author, submit_deps):
        # Arrange
        handler, submission_repo, schedule_alert = submit_deps

        # Act
        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=2,
                comment="Dia tranquilo",
                team="Core",
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.emotion_level == 2
        assert result.value.emotion_emoji == "🙂"
        assert result.value.user_id == author.id
        assert result.value.comment == "Dia tranquilo"
        assert result.value.comment_flagged is False
        submission_repo.save.assert_awaited_once()
        schedule_alert.assert_not_called()

    @pytest.mark.asyncio
    async def test_threshold_level_schedules_alert(self, author, submit_deps):
        handler, submission_repo, schedule_alert = submit_deps

        await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=6,
            )
        )

        saved = submission_repo.save.await_args.args[0]
        schedule_alert.assert_called_once_with(saved)

    @pytest.mark.asyncio
    async def test_anonymous_submission_is_masked(self, author, submit_deps):
        handler, submission_repo, _ = submit_deps

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=4,
                is_anonymous=True,
            )
        )

        assert result.value.user_id == "anonymous"
        assert submission_repo.save.await_args.args[0].user_id == author.id

    @pytest.mark.asyncio
    async def test_comment_is_moderated(self, author, submit_deps):
        handler, submission_repo, _ = submit_deps

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=5,
                comment="Meu chefe é um idiota <b>",
            )
        )

        assert result.value.comment == "Meu chefe é um ****** &lt;b&gt;"
        assert result.value.comment_flagged is True
        assert submission_repo.save.await_args.args[0].comment_flagged is True

    @pytest.mark.asyncio
    async def test_invalid_level(self, author, submit_deps):
        handler, submission_repo, _ = submit_deps

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=11,
            )
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        submission_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_comment_too_long(self, author, submit_deps):
        handler, submission_repo, _ = submit_deps

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=3,
                comment="x" * 1001,
            )
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert "1000" in result.error.message

    @pytest.mark.asyncio
    async def test_unknown_author(self, submit_deps):
        handler, submission_repo, _ = submit_deps
        handler._user_repo.find_by_id.return_value = None

        result = await handler.handle(
            SubmitEmociograma(user_id=uuid7(), organization_id=uuid7(), emotion_level=3)
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        submission_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_active_category_accepted(self, author, submit_deps, category_repo):
        handler, submission_repo, _ = submit_deps
        category_id = uuid7()

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=3,
                category_id=category_id,
            )
        )

        assert result.value.category_id == category_id
        category_repo.find_by_id.assert_awaited_once_with(category_id)
        submission_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_inactive_category_rejected(self, author, submit_deps, category_repo):
        handler, submission_repo, _ = submit_deps
        category_repo.find_by_id.return_value.deactivate()

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=3,
                category_id=uuid7(),
            )
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == EmociogramaError.CATEGORY_NOT_AVAILABLE
        assert result.error.field == "category_id"
        submission_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self, author, submit_deps, category_repo):
        handler, submission_repo, _ = submit_deps
        category_repo.find_by_id.return_value = None

        result = await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=3,
                category_id=uuid7(),
            )
        )

        assert result.error.field == "category_id"
        submission_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_category_skips_lookup(self, author, submit_deps, category_repo):
        handler, _, _ = submit_deps

        await handler.handle(
            SubmitEmociograma(
                user_id=author.id,
                organization_id=author.organization_id,
                emotion_level=3,
            )
        )

        category_repo.find_by_id.assert_not_awaited()


@pytest.mark.unit
class TestResolveAlertHandler:
    """Test ResolveAlertHandler."""

    @pytest.mark.asyncio
    async def test_resolves_alert(self, mock_audit, mock_logger):
        alert = make_alert(level=9)
        alert_repo = AsyncMock()
        alert_repo.find_by_id.return_value = alert
        manager_id = uuid7()
        handler = ResolveAlertHandler(
            alert_repo=alert_repo, audit=mock_audit, logger=mock_logger
        )

        result = await handler.handle(
            ResolveAlert(
                alert_id=alert.id,
                organization_id=alert.organization_id,
                resolved_by=manager_id,
                notes="Conversa com a equipe",
            )
        )

        assert result.value.is_resolved is True
        assert result.value.resolved_by == manager_id
        assert result.value.resolution_notes == "Conversa com a equipe"
        alert_repo.find_by_id.assert_awaited_once_with(alert.id, alert.organization_id)
        alert_repo.update.assert_awaited_once_with(alert)
        kwargs = mock_audit.record.await_args.kwargs
        assert kwargs["action"] == AuditAction.ALERT_RESOLVED
        assert kwargs["context"]["severity"] == "critical"

    @pytest.mark.asyncio
    async def test_already_resolved_conflicts(self, mock_audit, mock_logger):
        alert = make_alert()
        alert.resolve(resolved_by=uuid7())
        alert_repo = AsyncMock()
        alert_repo.find_by_id.return_value = alert
        handler = ResolveAlertHandler(
            alert_repo=alert_repo, audit=mock_audit, logger=mock_logger
        )

        result = await handler.handle(
            ResolveAlert(
                alert_id=alert.id,
                organization_id=alert.organization_id,
                resolved_by=uuid7(),
            )
        )

        assert result.error.code == ApplicationErrorCode.CONFLICT
        alert_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_notes_too_long(self, mock_audit, mock_logger):
        alert_repo = AsyncMock()
        handler = ResolveAlertHandler(
            alert_repo=alert_repo, audit=mock_audit, logger=mock_logger
        )

        result = await handler.handle(
            ResolveAlert(
                alert_id=uuid7(),
                organization_id=uuid7(),
                resolved_by=uuid7(),
                notes="n" * 501,
            )
        )

        assert result.error.details == {"field": "notes"}
        alert_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_found(self, mock_audit, mock_logger):
        alert_repo = AsyncMock()
        alert_repo.find_by_id.return_value = None
        handler = ResolveAlertHandler(
            alert_repo=alert_repo, audit=mock_audit, logger=mock_logger
        )

        result = await handler.handle(
            ResolveAlert(alert_id=uuid7(), organization_id=uuid7(), resolved_by=uuid7())
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestEmociogramaQueries:
    """Test emociograma query handlers."""

    @pytest.mark.asyncio
    async def test_list_my_submissions(self):
        user_id, org_id = uuid7(), uuid7()
        submissions = [
            EmociogramaSubmission.create(
                organization_id=org_id, user_id=user_id, emotion_level=3, is_anonymous=True
            )
        ]
        repo = AsyncMock()
        repo.find_by_user.return_value = (submissions, 21)

        result = await ListMySubmissionsHandler(submission_repo=repo).handle(
            ListMySubmissions(user_id=user_id, organization_id=org_id, page=2, limit=20)
        )

        assert result.value.total == 21
        assert result.value.total_pages == 2
        assert result.value.data[0].user_id == "anonymous"
        repo.find_by_user.assert_awaited_once_with(user_id, org_id, limit=20, offset=20)

    @pytest.mark.asyncio
    async def test_list_my_submissions_bad_page(self):
        repo = AsyncMock()

        result = await ListMySubmissionsHandler(submission_repo=repo).handle(
            ListMySubmissions(user_id=uuid7(), organization_id=uuid7(), page=0)
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_list_alerts_passes_filters(self):
        alert = make_alert()
        repo = AsyncMock()
        repo.find_by_organization.return_value = ([alert], 1)
        org_id = alert.organization_id

        result = await ListAlertsHandler(alert_repo=repo).handle(
            ListAlerts(
                organization_id=org_id,
                include_resolved=True,
                severity=AlertSeverity.HIGH,
            )
        )

        assert result.value.data[0].severity == "high"
        repo.find_by_organization.assert_awaited_once_with(
            org_id,
            limit=20,
            offset=0,
            include_resolved=True,
            severity=AlertSeverity.HIGH,
        )

    @pytest.mark.asyncio
    async def test_get_alert(self):
        alert = make_alert()
        repo = AsyncMock()
        repo.find_by_id.return_value = alert

        result = await GetAlertHandler(alert_repo=repo).handle(
            GetAlert(alert_id=alert.id, organization_id=alert.organization_id)
        )

        assert result.value.id == alert.id

    @pytest.mark.asyncio
    async def test_get_alert_not_found(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetAlertHandler(alert_repo=repo).handle(
            GetAlert(alert_id=uuid7(), organization_id=uuid7())
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestGetSubmissionHandler:
    """Test GetSubmissionHandler masking and access."""

    @pytest.fixture
    def anonymous_submission(self):
        return EmociogramaSubmission.create(
            organization_id=uuid7(),
            user_id=uuid7(),
            emotion_level=7,
            is_anonymous=True,
            comment="Cansada",
        )

    @pytest.fixture
    def repo(self, anonymous_submission):
        repo = AsyncMock()
        repo.find_by_id.return_value = anonymous_submission
        return repo

    @pytest.mark.asyncio
    async def test_author_sees_own_identity(self, anonymous_submission, repo):
        result = await GetSubmissionHandler(submission_repo=repo).handle(
            GetSubmission(
                submission_id=anonymous_submission.id,
                organization_id=anonymous_submission.organization_id,
                requester_id=anonymous_submission.user_id,
            )
        )

        assert result.value.user_id == anonymous_submission.user_id
        repo.find_by_id.assert_awaited_once_with(
            anonymous_submission.id, anonymous_submission.organization_id
        )

    @pytest.mark.asyncio
    async def test_manager_sees_masked_author(self, anonymous_submission, repo):
        result = await GetSubmissionHandler(submission_repo=repo).handle(
            GetSubmission(
                submission_id=anonymous_submission.id,
                organization_id=anonymous_submission.organization_id,
                requester_id=uuid7(),
                requester_is_manager=True,
            )
        )

        assert result.value.user_id == "anonymous"
        assert result.value.comment == "Cansada"

    @pytest.mark.asyncio
    async def test_other_colaborador_forbidden(self, anonymous_submission, repo):
        result = await GetSubmissionHandler(submission_repo=repo).handle(
            GetSubmission(
                submission_id=anonymous_submission.id,
                organization_id=anonymous_submission.organization_id,
                requester_id=uuid7(),
            )
        )

        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert result.error.message == "You can only view your own submissions"

    @pytest.mark.asyncio
    async def test_not_found(self, repo):
        repo.find_by_id.return_value = None
        submission_id = uuid7()

        result = await GetSubmissionHandler(submission_repo=repo).handle(
            GetSubmission(
                submission_id=submission_id,
                organization_id=uuid7(),
                requester_id=uuid7(),
                requester_is_manager=True,
            )
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.details == {"submission_id": str(submission_id)}


@pytest.mark.unit
class TestTeamAndDashboardQueries:
    """Test team listing, alert dashboard and category listing."""

    @pytest.mark.asyncio
    async def test_team_submissions_are_masked(self):
        org_id = uuid7()
        submissions = [
            EmociogramaSubmission.create(
                organization_id=org_id,
                user_id=uuid7(),
                emotion_level=6,
                is_anonymous=True,
            ),
            EmociogramaSubmission.create(
                organization_id=org_id, user_id=uuid7(), emotion_level=2
            ),
        ]
        repo = AsyncMock()
        repo.find_by_organization.return_value = (submissions, 2)

        result = await ListTeamSubmissionsHandler(submission_repo=repo).handle(
            ListTeamSubmissions(organization_id=org_id, department="Tecnologia")
        )

        assert [s.user_id for s in result.value.data] == [
            "anonymous",
            submissions[1].user_id,
        ]
        repo.find_by_organization.assert_awaited_once_with(
            org_id, limit=20, offset=0, department="Tecnologia", team=None
        )

    @pytest.mark.asyncio
    async def test_team_submissions_bad_limit(self):
        result = await ListTeamSubmissionsHandler(submission_repo=AsyncMock()).handle(
            ListTeamSubmissions(organization_id=uuid7(), limit=101)
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_dashboard(self):
        alert = make_alert(level=10)
        repo = AsyncMock()
        repo.get_statistics.return_value = AlertStatistics(
            total=5,
            unresolved=3,
            resolved_since=1,
            by_severity={
                AlertSeverity.LOW: 0,
                AlertSeverity.MEDIUM: 1,
                AlertSeverity.HIGH: 2,
                AlertSeverity.CRITICAL: 2,
            },
        )
        repo.find_unresolved.return_value = [alert]

        result = await GetAlertDashboardHandler(alert_repo=repo).handle(
            GetAlertDashboard(organization_id=alert.organization_id)
        )

        stats = result.value.statistics
        assert (stats.total, stats.unresolved, stats.resolved_today) == (5, 3, 1)
        assert list(stats.by_severity) == ["critical", "high", "medium", "low"]
        assert stats.by_severity["high"] == 2
        assert result.value.recent_alerts[0].id == alert.id
        repo.find_unresolved.assert_awaited_once_with(alert.organization_id, limit=10)
        since = repo.get_statistics.await_args.kwargs["resolved_since"]
        assert (since.hour, since.minute, since.second) == (0, 0, 0)
        assert since.utcoffset().total_seconds() == 0

    @pytest.mark.asyncio
    async def test_list_categories(self):
        repo = AsyncMock()
        repo.find_all.return_value = [
            EmociogramaCategory.create(name="Saúde", display_order=2)
        ]

        result = await ListCategoriesHandler(category_repo=repo).handle(
            ListCategories(include_inactive=True)
        )

        assert result.value[0].slug == "saude"
        repo.find_all.assert_awaited_once_with(include_inactive=True)
