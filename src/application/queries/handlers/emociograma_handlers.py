"""Emociograma query handlers.

Handlers:
    - ListMySubmissionsHandler: author's own submissions
    - GetSubmissionHandler: one submission, masked unless read by its author
    - ListTeamSubmissionsHandler: organization submissions for managers
    - ListAlertsHandler: organization alerts for managers
    - GetAlertHandler: one alert for managers
    - GetAlertDashboardHandler: alert counters and urgent alerts
    - ListCategoriesHandler: emotion categories
"""

from datetime import UTC, datetime

from src.application.dtos import (
    AlertDashboard,
    AlertPage,
    AlertResult,
    AlertStatisticsResult,
    CategoryResult,
    SubmissionPage,
    SubmissionResult,
)
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.emociograma_queries import (
    GetAlert,
    GetAlertDashboard,
    GetSubmission,
    ListAlerts,
    ListCategories,
    ListMySubmissions,
    ListTeamSubmissions,
)
from src.application.validation import check_pagination, total_pages
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AlertRepository,
    CategoryRepository,
    SubmissionRepository,
)

RECENT_ALERTS_LIMIT = 10


class ListMySubmissionsHandler:
    """Handler for ListMySubmissions query."""

    def __init__(self, submission_repo: SubmissionRepository) -> None:
        self._submission_repo = submission_repo

    async def handle(
        self, query: ListMySubmissions
    ) -> Result[SubmissionPage, ApplicationError]:
        """List the caller's submissions.

        Anonymous submissions are masked like for any other reader.
        """
        invalid = check_pagination(query.page, query.limit)
        if invalid is not None:
            return Failure(error=invalid)

        submissions, total = await self._submission_repo.find_by_user(
            query.user_id,
            query.organization_id,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )
        return Success(
            value=SubmissionPage(
                data=[SubmissionResult.from_entity(s) for s in submissions],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=total_pages(total, query.limit),
            )
        )


class ListAlertsHandler:
    """Handler for ListAlerts query."""

    def __init__(self, alert_repo: AlertRepository) -> None:
        self._alert_repo = alert_repo

    async def handle(self, query: ListAlerts) -> Result[AlertPage, ApplicationError]:
        """List alerts of the organization, pending only by default."""
        invalid = check_pagination(query.page, query.limit)
        if invalid is not None:
            return Failure(error=invalid)

        alerts, total = await self._alert_repo.find_by_organization(
            query.organization_id,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
            include_resolved=query.include_resolved,
            severity=query.severity,
        )
        return Success(
            value=AlertPage(
                data=[AlertResult.from_entity(a) for a in alerts],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=total_pages(total, query.limit),
            )
        )


class GetAlertHandler:
    """Handler for GetAlert query."""

    def __init__(self, alert_repo: AlertRepository) -> None:
        self._alert_repo = alert_repo

    async def handle(self, query: GetAlert) -> Result[AlertResult, ApplicationError]:
        """Fetch one alert scoped to the organization."""
        alert = await self._alert_repo.find_by_id(query.alert_id, query.organization_id)
        if alert is None:
            return Failure(error=ApplicationError.not_found("Alert", query.alert_id))
        return Success(value=AlertResult.from_entity(alert))


class GetSubmissionHandler:
    """Handler for GetSubmission query."""

    def __init__(self, submission_repo: SubmissionRepository) -> None:
        self._submission_repo = submission_repo

    async def handle(
        self, query: GetSubmission
    ) -> Result[SubmissionResult, ApplicationError]:
        """Fetch one submission of the organization.

        The author reads their submission unmasked. Managers read any
        submission of the organization with anonymous authors masked.

        Returns:
            Success(SubmissionResult).
            Failure(ApplicationError): NOT_FOUND (also for other
                organizations) or FORBIDDEN.
        """
        submission = await self._submission_repo.find_by_id(
            query.submission_id, query.organization_id
        )
        if submission is None:
            return Failure(
                error=ApplicationError.not_found("Submission", query.submission_id)
            )

        is_author = submission.user_id == query.requester_id
        if not is_author and not query.requester_is_manager:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="You can only view your own submissions",
                )
            )
        return Success(
            value=SubmissionResult.from_entity(submission, reveal_author=is_author)
        )


class ListTeamSubmissionsHandler:
    """Handler for ListTeamSubmissions query."""

    def __init__(self, submission_repo: SubmissionRepository) -> None:
        self._submission_repo = submission_repo

    async def handle(
        self, query: ListTeamSubmissions
    ) -> Result[SubmissionPage, ApplicationError]:
        """List organization submissions, optionally by department or team."""
        invalid = check_pagination(query.page, query.limit)
        if invalid is not None:
            return Failure(error=invalid)

        submissions, total = await self._submission_repo.find_by_organization(
            query.organization_id,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
            department=query.department,
            team=query.team,
        )
        return Success(
            value=SubmissionPage(
                data=[SubmissionResult.from_entity(s) for s in submissions],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=total_pages(total, query.limit),
            )
        )


class GetAlertDashboardHandler:
    """Handler for GetAlertDashboard query."""

    def __init__(self, alert_repo: AlertRepository) -> None:
        self._alert_repo = alert_repo

    async def handle(
        self, query: GetAlertDashboard
    ) -> Result[AlertDashboard, ApplicationError]:
        """Build the dashboard. "Today" starts at midnight UTC."""
        start_of_day = datetime.now(UTC).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        stats = await self._alert_repo.get_statistics(
            query.organization_id, resolved_since=start_of_day
        )
        recent = await self._alert_repo.find_unresolved(
            query.organization_id, limit=RECENT_ALERTS_LIMIT
        )
        by_severity = sorted(
            stats.by_severity.items(), key=lambda item: item[0].urgency, reverse=True
        )
        return Success(
            value=AlertDashboard(
                statistics=AlertStatisticsResult(
                    total=stats.total,
                    unresolved=stats.unresolved,
                    resolved_today=stats.resolved_since,
                    by_severity={s.value: count for s, count in by_severity},
                ),
                recent_alerts=[AlertResult.from_entity(a) for a in recent],
            )
        )


class ListCategoriesHandler:
    """Handler for ListCategories query."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(
        self, query: ListCategories
    ) -> Result[list[CategoryResult], ApplicationError]:
        categories = await self._category_repo.find_all(
            include_inactive=query.include_inactive
        )
        return Success(value=[CategoryResult.from_entity(c) for c in categories])
