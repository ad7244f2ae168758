"""Emociograma resource router.

Endpoints:
    POST   /api/v1/emociograma/submissions             - Submit a check-in
    GET    /api/v1/emociograma/submissions             - Team submissions (gestor/admin)
    GET    /api/v1/emociograma/submissions/me          - My submissions
    GET    /api/v1/emociograma/submissions/{id}        - Get submission
    GET    /api/v1/emociograma/alerts                  - List alerts (gestor/admin)
    GET    /api/v1/emociograma/alerts/dashboard        - Alert dashboard (gestor/admin)
    GET    /api/v1/emociograma/alerts/{id}             - Get alert (gestor/admin)
    POST   /api/v1/emociograma/alerts/{id}/resolution  - Resolve alert (gestor/admin)
    GET    /api/v1/emociograma/categories              - List categories
    POST   /api/v1/emociograma/categories              - Create category (admin)
    PATCH  /api/v1/emociograma/categories/{id}         - Update category (admin)
    DELETE /api/v1/emociograma/categories/{id}         - Deactivate category (admin)

Submissions at level 6 or above schedule the manager alert workflow as a
background task; the response does not wait for it.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.emociograma_commands import (
    CreateCategory,
    DeactivateCategory,
    ResolveAlert,
    SubmitEmociograma,
    UpdateCategory,
)
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
from src.application.queries import (
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
from src.core.container import (
    get_alert_dashboard_handler,
    get_create_category_handler,
    get_deactivate_category_handler,
    get_get_alert_handler,
    get_get_submission_handler,
    get_list_alerts_handler,
    get_list_categories_handler,
    get_list_my_submissions_handler,
    get_list_team_submissions_handler,
    get_resolve_alert_handler,
    get_submit_emociograma_handler,
    get_update_category_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import AlertSeverity
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    get_organization_id,
    require_admin,
    require_manager,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.emociograma_schemas import (
    AlertDashboardResponse,
    AlertListResponse,
    AlertResolveRequest,
    AlertResponse,
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    SubmissionCreateRequest,
    SubmissionListResponse,
    SubmissionResponse,
)

router = APIRouter(prefix="/emociograma", tags=["Emociograma"])


@router.post(
    "/submissions",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmissionResponse,
    responses={
        400: {"description": "Invalid submission", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Submit emociograma",
)
async def submit_emociograma(
    request: Request,
    data: SubmissionCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        SubmitEmociogramaHandler, Depends(get_submit_emociograma_handler)
    ],
) -> SubmissionResponse | JSONResponse:
    """Record an emotional check-in.

    POST /api/v1/emociograma/submissions → 201 Created
    """
    result = await handler.handle(
        SubmitEmociograma(
            user_id=current_user.user_id,
            organization_id=organization_id,
            emotion_level=data.emotion_level,
            category_id=data.category_id,
            is_anonymous=data.is_anonymous,
            comment=data.comment,
            department=data.department,
            team=data.team,
        )
    )

    match result:
        case Success(value=submission):
            return SubmissionResponse.model_validate(submission)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/submissions",
    response_model=SubmissionListResponse,
    responses={403: {"description": "Insufficient permissions", "model": ProblemDetails}},
    summary="Team submissions",
)
async def list_team_submissions(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        ListTeamSubmissionsHandler, Depends(get_list_team_submissions_handler)
    ],
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    department: str | None = Query(None, max_length=100),
    team: str | None = Query(None, max_length=100),
) -> SubmissionListResponse | JSONResponse:
    """List the organization's submissions, anonymous authors masked.

    GET /api/v1/emociograma/submissions → 200 OK
    """
    result = await handler.handle(
        ListTeamSubmissions(
            organization_id=organization_id,
            page=page,
            limit=limit,
            department=department,
            team=team,
        )
    )

    match result:
        case Success(value=submissions):
            return SubmissionListResponse.model_validate(submissions)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/submissions/me",
    response_model=SubmissionListResponse,
    summary="My submissions",
)
async def list_my_submissions(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        ListMySubmissionsHandler, Depends(get_list_my_submissions_handler)
    ],
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
) -> SubmissionListResponse | JSONResponse:
    """List the caller's submissions, newest first.

    GET /api/v1/emociograma/submissions/me → 200 OK
    """
    result = await handler.handle(
        ListMySubmissions(
            user_id=current_user.user_id,
            organization_id=organization_id,
            page=page,
            limit=limit,
        )
    )

    match result:
        case Success(value=submissions):
            return SubmissionListResponse.model_validate(submissions)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/submissions/{submission_id}",
    response_model=SubmissionResponse,
    responses={
        403: {"description": "Not your submission", "model": ProblemDetails},
        404: {"description": "Submission not found", "model": ProblemDetails},
    },
    summary="Get submission",
)
async def get_submission(
    request: Request,
    submission_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[GetSubmissionHandler, Depends(get_get_submission_handler)],
) -> SubmissionResponse | JSONResponse:
    """Get one submission. Only its author sees an anonymous author.

    GET /api/v1/emociograma/submissions/{id} → 200 OK
    """
    result = await handler.handle(
        GetSubmission(
            submission_id=submission_id,
            organization_id=organization_id,
            requester_id=current_user.user_id,
            requester_is_manager=current_user.is_manager,
        )
    )

    match result:
        case Success(value=submission):
            return SubmissionResponse.model_validate(submission)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/alerts",
    response_model=AlertListResponse,
    responses={403: {"description": "Insufficient permissions", "model": ProblemDetails}},
    summary="List alerts",
)
async def list_alerts(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[ListAlertsHandler, Depends(get_list_alerts_handler)],
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    include_resolved: bool = Query(False),
    severity: AlertSeverity | None = Query(None),
) -> AlertListResponse | JSONResponse:
    """List the organization's alerts (pending only by default).

    GET /api/v1/emociograma/alerts → 200 OK
    """
    result = await handler.handle(
        ListAlerts(
            organization_id=organization_id,
            page=page,
            limit=limit,
            include_resolved=include_resolved,
            severity=severity,
        )
    )

    match result:
        case Success(value=alerts):
            return AlertListResponse.model_validate(alerts)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/alerts/dashboard",
    response_model=AlertDashboardResponse,
    responses={403: {"description": "Insufficient permissions", "model": ProblemDetails}},
    summary="Alert dashboard",
)
async def get_alert_dashboard(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        GetAlertDashboardHandler, Depends(get_alert_dashboard_handler)
    ],
) -> AlertDashboardResponse | JSONResponse:
    """Alert counters plus the 10 most urgent pending alerts.

    GET /api/v1/emociograma/alerts/dashboard → 200 OK
    """
    result = await handler.handle(GetAlertDashboard(organization_id=organization_id))

    match result:
        case Success(value=dashboard):
            return AlertDashboardResponse.model_validate(dashboard)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/alerts/{alert_id}",
    response_model=AlertResponse,
    responses={
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        404: {"description": "Alert not found", "model": ProblemDetails},
    },
    summary="Get alert",
)
async def get_alert(
    request: Request,
    alert_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[GetAlertHandler, Depends(get_get_alert_handler)],
) -> AlertResponse | JSONResponse:
    """Get one alert of the organization.

    GET /api/v1/emociograma/alerts/{id} → 200 OK
    """
    result = await handler.handle(
        GetAlert(alert_id=alert_id, organization_id=organization_id)
    )

    match result:
        case Success(value=alert):
            return AlertResponse.model_validate(alert)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/alerts/{alert_id}/resolution",
    response_model=AlertResponse,
    responses={
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        404: {"description": "Alert not found", "model": ProblemDetails},
        409: {"description": "Alert already resolved", "model": ProblemDetails},
    },
    summary="Resolve alert",
)
async def resolve_alert(
    request: Request,
    alert_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[ResolveAlertHandler, Depends(get_resolve_alert_handler)],
    data: AlertResolveRequest | None = None,
) -> AlertResponse | JSONResponse:
    """Mark an alert as handled.

    POST /api/v1/emociograma/alerts/{id}/resolution → 200 OK
    """
    result = await handler.handle(
        ResolveAlert(
            alert_id=alert_id,
            organization_id=organization_id,
            resolved_by=current_user.user_id,
            notes=data.notes if data else None,
        )
    )

    match result:
        case Success(value=alert):
            return AlertResponse.model_validate(alert)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[ListCategoriesHandler, Depends(get_list_categories_handler)],
    include_inactive: bool = Query(False),
) -> list[CategoryResponse] | JSONResponse:
    """List categories by display order.

    ``include_inactive`` is honored for admins only.

    GET /api/v1/emociograma/categories → 200 OK
    """
    result = await handler.handle(
        ListCategories(include_inactive=include_inactive and current_user.is_admin)
    )

    match result:
        case Success(value=categories):
            return [CategoryResponse.model_validate(c) for c in categories]
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/categories",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryResponse,
    responses={
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        409: {"description": "Category already exists", "model": ProblemDetails},
    },
    summary="Create category",
)
async def create_category(
    request: Request,
    data: CategoryCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    handler: Annotated[CreateCategoryHandler, Depends(get_create_category_handler)],
) -> CategoryResponse | JSONResponse:
    """Create an emotion category.

    POST /api/v1/emociograma/categories → 201 Created
    """
    result = await handler.handle(
        CreateCategory(
            name=data.name,
            display_order=data.display_order,
            description=data.description,
            icon=data.icon,
        )
    )

    match result:
        case Success(value=category):
            return CategoryResponse.model_validate(category)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.patch(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    responses={
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        404: {"description": "Category not found", "model": ProblemDetails},
        409: {"description": "Category already exists", "model": ProblemDetails},
    },
    summary="Update category",
)
async def update_category(
    request: Request,
    category_id: UUID,
    data: CategoryUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    handler: Annotated[UpdateCategoryHandler, Depends(get_update_category_handler)],
) -> CategoryResponse | JSONResponse:
    """Partially update a category.

    PATCH /api/v1/emociograma/categories/{id} → 200 OK
    """
    result = await handler.handle(
        UpdateCategory(
            category_id=category_id,
            name=data.name,
            description=data.description,
            icon=data.icon,
            display_order=data.display_order,
        )
    )

    match result:
        case Success(value=category):
            return CategoryResponse.model_validate(category)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.delete(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    responses={
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        404: {"description": "Category not found", "model": ProblemDetails},
    },
    summary="Deactivate category",
)
async def deactivate_category(
    request: Request,
    category_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    handler: Annotated[
        DeactivateCategoryHandler, Depends(get_deactivate_category_handler)
    ],
) -> CategoryResponse | JSONResponse:
    """Deactivate a category. Past submissions keep referencing it.

    DELETE /api/v1/emociograma/categories/{id} → 200 OK
    """
    result = await handler.handle(DeactivateCategory(category_id=category_id))

    match result:
        case Success(value=category):
            return CategoryResponse.model_validate(category)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
