"""Shared fixtures for API tests.

The app is exercised through TestClient without its lifespan, so no database
is created. Authentication and handler factories are replaced through
``app.dependency_overrides``; every test starts with a clean override map.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos import UserResult
from src.core.container import (
    get_audit_session,
    get_db_session,
    get_session_repository,
    get_user_repository,
)
from src.core.result import Success
from src.domain.enums import UserRole
from src.domain.value_objects.rate_limit_rule import RateLimitResult
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


class StubHandler:
    """Handler double returning a fixed result and recording commands."""

    def __init__(self, result):
        self._result = result
        self.calls: list = []

    async def handle(self, command):
        self.calls.append(command)
        return self._result


class StubRateLimit:
    """Rate limiter double with a fixed decision."""

    def __init__(self, allowed: bool = True, retry_after: int = 0, limit: int = 5):
        self.decision = RateLimitResult(
            allowed=allowed,
            retry_after=retry_after,
            remaining=limit if allowed else 0,
            limit=limit,
        )
        self.calls: list = []

    async def is_allowed(self, *, rule, identifier):
        self.calls.append((rule.name, identifier))
        return Success(value=self.decision)


def make_user_result(
    user_id: UUID | None = None,
    email: str = "colaborador@empresa.com.br",
    role: UserRole = UserRole.COLABORADOR,
    organization_id: UUID | None = None,
) -> UserResult:
    now = datetime.now(UTC)
    return UserResult(
        id=user_id or uuid7(),
        email=email,
        first_name="Maria",
        last_name="Silva",
        photo_url=None,
        bio=None,
        preferences={
            "language": "en",
            "theme": "system",
            "notifications": True,
            "timezone": "UTC",
        },
        organization_id=organization_id,
        role=role.value,
        is_active=True,
        last_login_at=None,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def user_repo():
    """User repository double used by auth and tenant checks (finds nothing)."""
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_id_with_deleted.return_value = None
    return repo


@pytest.fixture
def session_repo():
    """Session repository double used by the revocation check."""
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    return repo


@pytest.fixture(autouse=True)
def clear_overrides(user_repo, session_repo):
    """Reset dependency overrides around every test.

    Database sessions and the repositories read by the auth dependencies are
    always replaced so nothing that is not overridden opens a connection.
    """
    app.dependency_overrides.clear()
    app.dependency_overrides[get_db_session] = lambda: AsyncMock()
    app.dependency_overrides[get_audit_session] = lambda: AsyncMock()
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_session_repository] = lambda: session_repo
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Provide test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def organization_id():
    return uuid7()


@pytest.fixture
def login_as(organization_id):
    """Authenticate requests as a user with the given role.

    Returns the CurrentUser installed as the get_current_user override.
    """

    def _login(role: UserRole = UserRole.COLABORADOR, org_id=...) -> CurrentUser:
        user = CurrentUser(
            user_id=uuid7(),
            email=f"{role.value}@empresa.com.br",
            role=role,
            organization_id=organization_id if org_id is ... else org_id,
        )
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


@pytest.fixture
def override():
    """Install a StubHandler for a handler factory."""

    def _override(factory, result) -> StubHandler:
        handler = StubHandler(result)
        app.dependency_overrides[factory] = lambda: handler
        return handler

    return _override
