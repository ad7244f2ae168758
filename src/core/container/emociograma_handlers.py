"""Emociograma handler factories.

Request-scoped handlers for emotional check-ins and manager alerts, plus the
background alert workflow scheduled after a concerning submission.
"""

from typing import TYPE_CHECKING

from fastapi import BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_audit,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
)
from src.domain.entities import EmociogramaSubmission
from src.domain.protocols import AuditProtocol

if TYPE_CHECKING:
    from src.application.commands.handlers.category_handlers import (
        CreateCategoryHandler,
        DeactivateCategoryHandler,
        UpdateCategoryHandler,
    )
    from src.application.commands.handlers.resolve_alert_handler import (
        ResolveAlertHandler,
    )
    from src.application.commands.handlers.submit_emociograma_handler import (
        SubmitEmociogramaHandler,
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


async def dispatch_emotional_alert(submission: EmociogramaSubmission) -> None:
    """Run the alert workflow for a persisted submission.

    Executes after the response is sent, so it opens its own database
    session instead of reusing the (already closed) request session.
    Failures are logged by AlertService and never reach the client.

    Args:
        submission: Submission at or above the alert threshold.
    """
    from src.application.services import AlertService
    from src.infrastructure.persistence.repositories import (
        AlertRepository,
        UserRepository,
    )

    async with get_database().get_session() as session:
        service = AlertService(
            user_repo=UserRepository(session=session),
            alert_repo=AlertRepository(session=session),
            email_service=get_email_service(),
            logger=get_logger(),
            frontend_url=settings.frontend_url,
        )
        await service.trigger_emotional_alert(submission)


async def get_submit_emociograma_handler(
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_db_session),
) -> "SubmitEmociogramaHandler":
    """Get SubmitEmociogramaHandler instance.

    Creates handler with:
        - UserRepository (author lookup)
        - SubmissionRepository (persistence)
        - CategoryRepository (category must be active)
        - CommentModerationService (masking and urgent flagging)
        - Alert scheduler (FastAPI background task, fire-and-forget)

    Args:
        background_tasks: Request background task queue.
        session: Database session for the business transaction.

    Returns:
        SubmitEmociogramaHandler instance.
    """
    from src.application.commands.handlers.submit_emociograma_handler import (
        SubmitEmociogramaHandler,
    )
    from src.application.services import CommentModerationService
    from src.infrastructure.persistence.repositories import (
        CategoryRepository,
        SubmissionRepository,
        UserRepository,
    )

    def schedule_alert(submission: EmociogramaSubmission) -> None:
        background_tasks.add_task(dispatch_emotional_alert, submission)

    logger = get_logger()
    return SubmitEmociogramaHandler(
        user_repo=UserRepository(session=session),
        submission_repo=SubmissionRepository(session=session),
        category_repo=CategoryRepository(session=session),
        moderation=CommentModerationService(logger=logger),
        schedule_alert=schedule_alert,
        logger=logger,
    )


async def get_resolve_alert_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "ResolveAlertHandler":
    """Get ResolveAlertHandler instance."""
    from src.application.commands.handlers.resolve_alert_handler import (
        ResolveAlertHandler,
    )
    from src.infrastructure.persistence.repositories import AlertRepository

    return ResolveAlertHandler(
        alert_repo=AlertRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )


async def get_list_my_submissions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListMySubmissionsHandler":
    """Get ListMySubmissionsHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        ListMySubmissionsHandler,
    )
    from src.infrastructure.persistence.repositories import SubmissionRepository

    return ListMySubmissionsHandler(submission_repo=SubmissionRepository(session=session))


async def get_list_alerts_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListAlertsHandler":
    """Get ListAlertsHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        ListAlertsHandler,
    )
    from src.infrastructure.persistence.repositories import AlertRepository

    return ListAlertsHandler(alert_repo=AlertRepository(session=session))


async def get_get_alert_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAlertHandler":
    """Get GetAlertHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        GetAlertHandler,
    )
    from src.infrastructure.persistence.repositories import AlertRepository

    return GetAlertHandler(alert_repo=AlertRepository(session=session))


async def get_get_submission_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetSubmissionHandler":
    """Get GetSubmissionHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        GetSubmissionHandler,
    )
    from src.infrastructure.persistence.repositories import SubmissionRepository

    return GetSubmissionHandler(submission_repo=SubmissionRepository(session=session))


async def get_list_team_submissions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListTeamSubmissionsHandler":
    """Get ListTeamSubmissionsHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        ListTeamSubmissionsHandler,
    )
    from src.infrastructure.persistence.repositories import SubmissionRepository

    return ListTeamSubmissionsHandler(
        submission_repo=SubmissionRepository(session=session)
    )


async def get_alert_dashboard_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAlertDashboardHandler":
    """Get GetAlertDashboardHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        GetAlertDashboardHandler,
    )
    from src.infrastructure.persistence.repositories import AlertRepository

    return GetAlertDashboardHandler(alert_repo=AlertRepository(session=session))


async def get_list_categories_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListCategoriesHandler":
    """Get ListCategoriesHandler instance."""
    from src.application.queries.handlers.emociograma_handlers import (
        ListCategoriesHandler,
    )
    from src.infrastructure.persistence.repositories import CategoryRepository

    return ListCategoriesHandler(category_repo=CategoryRepository(session=session))


async def get_create_category_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateCategoryHandler":
    """Get CreateCategoryHandler instance."""
    from src.application.commands.handlers.category_handlers import (
        CreateCategoryHandler,
    )
    from src.infrastructure.persistence.repositories import CategoryRepository

    return CreateCategoryHandler(
        category_repo=CategoryRepository(session=session), logger=get_logger()
    )


async def get_update_category_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateCategoryHandler":
    """Get UpdateCategoryHandler instance."""
    from src.application.commands.handlers.category_handlers import (
        UpdateCategoryHandler,
    )
    from src.infrastructure.persistence.repositories import CategoryRepository

    return UpdateCategoryHandler(
        category_repo=CategoryRepository(session=session), logger=get_logger()
    )


async def get_deactivate_category_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeactivateCategoryHandler":
    """Get DeactivateCategoryHandler instance."""
    from src.application.commands.handlers.category_handlers import (
        DeactivateCategoryHandler,
    )
    from src.infrastructure.persistence.repositories import CategoryRepository

    return DeactivateCategoryHandler(
        category_repo=CategoryRepository(session=session), logger=get_logger()
    )
