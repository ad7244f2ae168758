"""Role and tenant authorization dependencies.

Roles come from the loaded user (see auth_dependencies), so a demotion takes
effect on the next request.

Tenant rule: a user assigned to an organization only acts inside it. An
admin without an organization is a platform admin and may act on any
organization.

Usage:
    @router.get("/emociograma/alerts")
    async def list_alerts(
        current_user: Annotated[
            CurrentUser, Depends(require_roles(UserRole.GESTOR, UserRole.ADMIN))
        ],
    ): ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.core.container import get_user_repository
from src.domain.enums import UserRole
from src.domain.protocols import UserRepository
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

ORGANIZATION_HEADER = "X-Organization-Id"
FOREIGN_ORGANIZATION = "Access to this organization is not allowed"


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires one of the given roles.

    Args:
        *roles: Accepted roles.

    Returns:
        Dependency returning the CurrentUser when authorized.

    Raises:
        HTTPException 403: If the user's role is not accepted.
    """
    allowed = frozenset(roles)

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions: requires one of "
                + ", ".join(sorted(role.value for role in allowed)),
            )
        return current_user

    return role_checker


require_manager = require_roles(UserRole.GESTOR, UserRole.ADMIN)
require_admin = require_roles(UserRole.ADMIN)


def can_act_on_organization(
    current_user: CurrentUser, organization_id: UUID | None
) -> bool:
    """Check the tenant rule for a target organization.

    Args:
        current_user: Authenticated caller.
        organization_id: Organization of the target resource (None for
            users not assigned to one).

    Returns:
        bool: True for platform admins or a matching organization. A
        non-admin without an organization may act on none.
    """
    if current_user.organization_id is None:
        return current_user.is_admin
    return organization_id == current_user.organization_id


def ensure_can_act_on_organization(
    current_user: CurrentUser, organization_id: UUID | None
) -> None:
    """Raise 403 unless the caller may act on ``organization_id``."""
    if not can_act_on_organization(current_user, organization_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FOREIGN_ORGANIZATION,
        )


def ensure_self_or_manager(
    current_user: CurrentUser,
    user_id: UUID,
    organization_id: UUID | None = None,
) -> None:
    """Allow access to a user's own record or to a manager of its organization.

    Args:
        current_user: Authenticated caller.
        user_id: Target user.
        organization_id: Target user's organization.

    Raises:
        HTTPException 403: Different user without a manager role, or a
            manager of another organization.
    """
    if current_user.user_id == user_id:
        return
    if not current_user.is_manager:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own profile",
        )
    ensure_can_act_on_organization(current_user, organization_id)


async def authorize_user_access(
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Authorize access to the ``{user_id}`` path parameter.

    Self access needs no lookup. For managers the target is loaded so its
    organization can be compared; a missing target is left to the handler
    (404).

    Returns:
        The CurrentUser when access is allowed.

    Raises:
        HTTPException 403: See ensure_self_or_manager.
    """
    if current_user.user_id == user_id:
        return current_user

    # Colaboradores are refused before any lookup
    ensure_self_or_manager(current_user, user_id, current_user.organization_id)

    target = await user_repo.find_by_id_with_deleted(user_id)
    if target is not None:
        ensure_self_or_manager(current_user, user_id, target.organization_id)
    return current_user


async def get_organization_id(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    x_organization_id: Annotated[
        str | None, Header(alias=ORGANIZATION_HEADER)
    ] = None,
) -> UUID:
    """Resolve the organization context for the request.

    The X-Organization-Id header wins; otherwise the user's own
    organization is used. A user assigned to an organization cannot act on
    another one, and a gestor without an organization cannot pick one.

    Raises:
        HTTPException 400: Header missing/malformed and no fallback.
        HTTPException 403: Header names an organization the caller may not
            act on.
    """
    organization_id = current_user.organization_id
    if x_organization_id:
        try:
            organization_id = UUID(x_organization_id)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{ORGANIZATION_HEADER} must be a valid UUID",
            ) from e

    if organization_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{ORGANIZATION_HEADER} header is required",
        )

    if current_user.organization_id is not None or current_user.is_manager:
        ensure_can_act_on_organization(current_user, organization_id)
    return organization_id
