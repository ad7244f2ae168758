"""Users resource router.

User management plus the LGPD data subject rights of the caller.

Endpoints:
    POST   /api/v1/users                       - Create user (gestor/admin)
    GET    /api/v1/users                       - List users (gestor/admin)
    GET    /api/v1/users/me                    - Current user
    GET    /api/v1/users/data-export           - Export own data (LGPD Art. 18, V)
    POST   /api/v1/users/data-anonymize        - Anonymize own submissions
    DELETE /api/v1/users/data-deletion         - Request erasure (emails a link)
    POST   /api/v1/users/data-deletion/confirm - Confirm erasure
    GET    /api/v1/users/audit-trail           - Own audit trail
    GET    /api/v1/users/{id}                  - Get user (self or gestor/admin)
    PUT    /api/v1/users/{id}                  - Update user (self or gestor/admin)
    DELETE /api/v1/users/{id}                  - Delete user (admin)

Static paths are declared before ``/{user_id}`` so they are not captured by
the path parameter.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.anonymize_user_data_handler import (
    AnonymizeUserDataHandler,
)
from src.application.commands.handlers.confirm_data_deletion_handler import (
    ConfirmDataDeletionHandler,
)
from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.export_user_data_handler import (
    ExportUserDataHandler,
)
from src.application.commands.handlers.request_data_deletion_handler import (
    RequestDataDeletionHandler,
)
from src.application.commands.handlers.update_user_handler import UpdateUserHandler
from src.application.commands.lgpd_commands import (
    AnonymizeUserData,
    ConfirmDataDeletion,
    ExportUserData,
    RequestDataDeletion,
)
from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser
from src.application.queries import GetAuditTrail, GetUser, ListUsers
from src.application.queries.handlers.get_audit_trail_handler import (
    GetAuditTrailHandler,
)
from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.application.queries.handlers.list_users_handler import ListUsersHandler
from src.core.container import (
    get_anonymize_user_data_handler,
    get_audit_trail_handler,
    get_confirm_data_deletion_handler,
    get_create_user_handler,
    get_delete_user_handler,
    get_export_user_data_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_request_data_deletion_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import AuditAction, UserRole
from src.domain.protocols.audit_protocol import MAX_QUERY_LIMIT
from src.domain.protocols.user_repository import SortOrder, UserSortField
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    authorize_user_access,
    ensure_can_act_on_organization,
    get_organization_id,
    require_admin,
    require_manager,
)
from src.presentation.routers.api.middleware.rate_limit_dependencies import client_ip
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.lgpd_schemas import (
    AuditTrailResponse,
    DataDeletionConfirmRequest,
    LgpdActionResponse,
    UserDataExportResponse,
)
from src.schemas.common_schemas import MessageResponse
from src.schemas.user_schemas import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])


# =============================================================================
# Management (gestor/admin)
# =============================================================================


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid field", "model": ProblemDetails},
        403: {"description": "Insufficient permissions", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
    },
    summary="Create user",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    handler: Annotated[CreateUserHandler, Depends(get_create_user_handler)],
) -> UserResponse | JSONResponse:
    """Create a user in the caller's organization.

    POST /api/v1/users → 201 Created

    The body's organization_id must satisfy the tenant rule (see
    authorization_dependencies). Only admins create gestores and admins.
    """
    if data.role in UserRole.managers() and not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Only admins can create {data.role.value} users",
        )

    organization_id = data.organization_id or current_user.organization_id
    ensure_can_act_on_organization(current_user, organization_id)

    result = await handler.handle(
        CreateUser(
            email=str(data.email),
            first_name=data.first_name,
            last_name=data.last_name,
            bio=data.bio,
            organization_id=organization_id,
            role=data.role,
            created_by=current_user.user_id,
        )
    )

    match result:
        case Success(value=user):
            return UserResponse.model_validate(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "",
    response_model=UserListResponse,
    responses={403: {"description": "Insufficient permissions", "model": ProblemDetails}},
    summary="List users",
)
async def list_users(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(require_manager)],
    handler: Annotated[ListUsersHandler, Depends(get_list_users_handler)],
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(20, ge=1, le=100, description="Items per page"),
    sort_by: UserSortField = Query("created_at", description="Sort field"),
    sort_order: SortOrder = Query("DESC", description="ASC or DESC"),
) -> UserListResponse | JSONResponse:
    """List users of the caller's organization.

    GET /api/v1/users → 200 OK
    """
    ensure_can_act_on_organization(current_user, current_user.organization_id)
    result = await handler.handle(
        ListUsers(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            organization_id=current_user.organization_id,
        )
    )

    match result:
        case Success(value=users):
            return UserListResponse.model_validate(users)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def get_me(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[GetUserHandler, Depends(get_get_user_handler)],
) -> UserResponse | JSONResponse:
    """Return the authenticated user's profile.

    GET /api/v1/users/me → 200 OK
    """
    result = await handler.handle(GetUser(user_id=current_user.user_id))

    match result:
        case Success(value=user):
            return UserResponse.model_validate(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


# =============================================================================
# LGPD (data subject rights of the caller)
# =============================================================================


@router.get(
    "/data-export",
    response_model=UserDataExportResponse,
    responses={400: {"description": "Missing organization", "model": ProblemDetails}},
    summary="Export my data",
)
async def export_user_data(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[ExportUserDataHandler, Depends(get_export_user_data_handler)],
) -> UserDataExportResponse | JSONResponse:
    """Export profile and submissions as JSON.

    GET /api/v1/users/data-export → 200 OK
    """
    result = await handler.handle(
        ExportUserData(
            user_id=current_user.user_id,
            organization_id=organization_id,
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=export):
            return UserDataExportResponse.model_validate(export)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/data-anonymize",
    response_model=LgpdActionResponse,
    summary="Anonymize my submissions",
)
async def anonymize_user_data(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        AnonymizeUserDataHandler, Depends(get_anonymize_user_data_handler)
    ],
) -> LgpdActionResponse | JSONResponse:
    """Irreversibly detach the caller's submissions from their account.

    POST /api/v1/users/data-anonymize → 200 OK
    """
    result = await handler.handle(
        AnonymizeUserData(
            user_id=current_user.user_id,
            organization_id=organization_id,
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=outcome):
            return LgpdActionResponse.model_validate(outcome)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.delete(
    "/data-deletion",
    response_model=MessageResponse,
    summary="Request data deletion",
)
async def request_data_deletion(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    organization_id: Annotated[UUID, Depends(get_organization_id)],
    handler: Annotated[
        RequestDataDeletionHandler, Depends(get_request_data_deletion_handler)
    ],
) -> MessageResponse | JSONResponse:
    """Email a confirmation link; nothing is deleted yet.

    DELETE /api/v1/users/data-deletion → 200 OK
    """
    result = await handler.handle(
        RequestDataDeletion(
            user_id=current_user.user_id,
            organization_id=organization_id,
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=outcome):
            return MessageResponse(message=outcome.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.post(
    "/data-deletion/confirm",
    response_model=LgpdActionResponse,
    responses={401: {"description": "Invalid or expired token", "model": ProblemDetails}},
    summary="Confirm data deletion",
)
async def confirm_data_deletion(
    request: Request,
    data: DataDeletionConfirmRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[
        ConfirmDataDeletionHandler, Depends(get_confirm_data_deletion_handler)
    ],
) -> LgpdActionResponse | JSONResponse:
    """Delete the caller's submissions using the emailed token.

    POST /api/v1/users/data-deletion/confirm → 200 OK
    """
    result = await handler.handle(
        ConfirmDataDeletion(
            user_id=current_user.user_id,
            token=data.token,
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success(value=outcome):
            return LgpdActionResponse.model_validate(outcome)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.get(
    "/audit-trail",
    response_model=AuditTrailResponse,
    summary="My audit trail",
)
async def get_audit_trail(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: Annotated[GetAuditTrailHandler, Depends(get_audit_trail_handler)],
    organization_id: UUID | None = Query(None, description="Filter by organization"),
    action: AuditAction | None = Query(None, description="Filter by action"),
    limit: int = Query(100, ge=1, le=MAX_QUERY_LIMIT),
    offset: int = Query(0, ge=0),
) -> AuditTrailResponse | JSONResponse:
    """List audit entries about the caller, newest first.

    GET /api/v1/users/audit-trail → 200 OK
    """
    result = await handler.handle(
        GetAuditTrail(
            user_id=current_user.user_id,
            organization_id=organization_id,
            action=action,
            limit=limit,
            offset=offset,
        )
    )

    match result:
        case Success(value=trail):
            return AuditTrailResponse.model_validate(trail)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


# =============================================================================
# Single user
# =============================================================================


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        403: {"description": "Not your profile", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Get user",
)
async def get_user(
    request: Request,
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(authorize_user_access)],
    handler: Annotated[GetUserHandler, Depends(get_get_user_handler)],
) -> UserResponse | JSONResponse:
    """Get a user profile.

    GET /api/v1/users/{id} → 200 OK
    """
    result = await handler.handle(GetUser(user_id=user_id))

    match result:
        case Success(value=user):
            return UserResponse.model_validate(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid field", "model": ProblemDetails},
        403: {"description": "Not your profile", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Update user",
)
async def update_user(
    request: Request,
    user_id: UUID,
    data: UserUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(authorize_user_access)],
    handler: Annotated[UpdateUserHandler, Depends(get_update_user_handler)],
) -> UserResponse | JSONResponse:
    """Update profile fields and preferences.

    PUT /api/v1/users/{id} → 200 OK
    """
    preferences = (
        data.preferences.model_dump(exclude_none=True) if data.preferences else None
    )
    result = await handler.handle(
        UpdateUser(
            user_id=user_id,
            first_name=data.first_name,
            last_name=data.last_name,
            bio=data.bio,
            photo_url=data.photo_url,
            preferences=preferences,
            updated_by=current_user.user_id,
        )
    )

    match result:
        case Success(value=user):
            return UserResponse.model_validate(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={
        403: {"description": "Admin role required", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Delete user",
)
async def delete_user(
    request: Request,
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    _access: Annotated[CurrentUser, Depends(authorize_user_access)],
    handler: Annotated[DeleteUserHandler, Depends(get_delete_user_handler)],
    hard_delete: bool = Query(False, description="Remove the row instead of soft delete"),
) -> MessageResponse | JSONResponse:
    """Soft delete a user (or hard delete when requested or already deleted).

    DELETE /api/v1/users/{id} → 200 OK
    """
    result = await handler.handle(
        DeleteUser(
            user_id=user_id,
            hard_delete=hard_delete,
            deleted_by=current_user.user_id,
        )
    )

    match result:
        case Success(value=outcome):
            return MessageResponse(message=outcome.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
