"""API tests for the users resource and the LGPD endpoints under /users."""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.application.dtos import (
    AuditEntryResult,
    AuditTrailPage,
    LgpdActionResult,
    MessageResult,
    UserDataExport,
    UserPage,
)
from src.application.errors import ApplicationError, ApplicationErrorCode
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
from src.domain.entities import User
from src.domain.enums import AuditAction, UserRole
from tests.api.conftest import make_user_result


def _not_found() -> Failure:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND, message="User not found"
        )
    )


# =============================================================================
# Management
# =============================================================================


@pytest.mark.api
class TestCreateUser:
    def test_manager_creates_user_in_own_organization(
        self, client, override, login_as, organization_id
    ):
        manager = login_as(UserRole.GESTOR)
        handler = override(
            get_create_user_handler,
            Success(value=make_user_result(organization_id=organization_id)),
        )

        response = client.post(
            "/api/v1/users",
            json={"email": "nova.pessoa@empresa.com.br", "first_name": "Nova"},
        )

        assert response.status_code == 201
        command = handler.calls[0]
        assert command.organization_id == organization_id
        assert command.role == UserRole.COLABORADOR
        assert command.created_by == manager.user_id

    def test_colaborador_forbidden(self, client, override, login_as):
        login_as()
        handler = override(get_create_user_handler, Success(value=make_user_result()))

        response = client.post(
            "/api/v1/users",
            json={"email": "nova.pessoa@empresa.com.br", "first_name": "Nova"},
        )

        assert response.status_code == 403
        assert response.json()["title"] == "Access Denied"
        assert handler.calls == []

    def test_gestor_cannot_create_admin(self, client, override, login_as):
        login_as(UserRole.GESTOR)
        handler = override(get_create_user_handler, Success(value=make_user_result()))

        response = client.post(
            "/api/v1/users",
            json={
                "email": "chefe@empresa.com.br",
                "first_name": "Chefe",
                "role": "admin",
            },
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Only admins can create admin users"
        assert handler.calls == []

    def test_gestor_cannot_create_in_other_organization(
        self, client, override, login_as
    ):
        login_as(UserRole.GESTOR)
        handler = override(get_create_user_handler, Success(value=make_user_result()))

        response = client.post(
            "/api/v1/users",
            json={
                "email": "intrusa@empresa.com.br",
                "first_name": "Intrusa",
                "organization_id": str(uuid7()),
            },
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access to this organization is not allowed"
        assert handler.calls == []

    def test_gestor_cannot_create_gestor(self, client, override, login_as):
        login_as(UserRole.GESTOR)
        handler = override(get_create_user_handler, Success(value=make_user_result()))

        response = client.post(
            "/api/v1/users",
            json={
                "email": "outro.gestor@empresa.com.br",
                "first_name": "Outro",
                "role": "gestor",
            },
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Only admins can create gestor users"
        assert handler.calls == []

    def test_platform_admin_creates_in_any_organization(
        self, client, override, login_as
    ):
        login_as(UserRole.ADMIN, org_id=None)
        target_org = uuid7()
        handler = override(
            get_create_user_handler,
            Success(value=make_user_result(organization_id=target_org)),
        )

        response = client.post(
            "/api/v1/users",
            json={
                "email": "gestora@cliente.com.br",
                "first_name": "Gestora",
                "role": "gestor",
                "organization_id": str(target_org),
            },
        )

        assert response.status_code == 201
        assert handler.calls[0].organization_id == target_org
        assert handler.calls[0].role == UserRole.GESTOR

    def test_duplicate_email_returns_409(self, client, override, login_as):
        login_as(UserRole.ADMIN)
        override(
            get_create_user_handler,
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message="Email already registered",
                )
            ),
        )

        response = client.post(
            "/api/v1/users",
            json={"email": "existente@empresa.com.br", "first_name": "Ana"},
        )

        assert response.status_code == 409
        assert response.json()["title"] == "Resource Conflict"

    def test_short_first_name_returns_422(self, client, login_as):
        login_as(UserRole.ADMIN)

        response = client.post(
            "/api/v1/users",
            json={"email": "nova.pessoa@empresa.com.br", "first_name": "A"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "first_name"


@pytest.mark.api
class TestListUsers:
    def test_lists_organization_users(
        self, client, override, login_as, organization_id
    ):
        login_as(UserRole.GESTOR)
        handler = override(
            get_list_users_handler,
            Success(
                value=UserPage(
                    data=[make_user_result(organization_id=organization_id)],
                    total=1,
                    page=2,
                    limit=10,
                    total_pages=1,
                )
            ),
        )

        response = client.get(
            "/api/v1/users",
            params={"page": 2, "limit": 10, "sort_by": "email", "sort_order": "ASC"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert len(data["data"]) == 1
        query = handler.calls[0]
        assert query.organization_id == organization_id
        assert (query.page, query.limit) == (2, 10)
        assert (query.sort_by, query.sort_order) == ("email", "ASC")

    def test_unassigned_gestor_forbidden(self, client, override, login_as):
        login_as(UserRole.GESTOR, org_id=None)
        handler = override(
            get_list_users_handler,
            Success(value=UserPage(data=[], total=0, page=1, limit=20, total_pages=0)),
        )

        response = client.get("/api/v1/users")

        assert response.status_code == 403
        assert handler.calls == []

    def test_limit_above_maximum_returns_422(self, client, login_as):
        login_as(UserRole.GESTOR)

        response = client.get("/api/v1/users", params={"limit": 101})

        assert response.status_code == 422

    def test_unknown_sort_field_returns_422(self, client, login_as):
        login_as(UserRole.GESTOR)

        response = client.get("/api/v1/users", params={"sort_by": "password"})

        assert response.status_code == 422


# =============================================================================
# Single user
# =============================================================================


@pytest.mark.api
class TestGetUser:
    def test_own_profile(self, client, override, login_as):
        user = login_as()
        override(get_get_user_handler, Success(value=make_user_result(user.user_id)))

        response = client.get(f"/api/v1/users/{user.user_id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(user.user_id)

    def test_other_profile_forbidden_for_colaborador(self, client, override, login_as):
        login_as()
        handler = override(get_get_user_handler, Success(value=make_user_result()))

        response = client.get(f"/api/v1/users/{uuid7()}")

        assert response.status_code == 403
        assert handler.calls == []

    def test_manager_gets_missing_user(self, client, override, login_as):
        login_as(UserRole.GESTOR)
        override(get_get_user_handler, _not_found())

        response = client.get(f"/api/v1/users/{uuid7()}")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/not_found")

    def test_manager_gets_user_of_own_organization(
        self, client, override, login_as, user_repo, organization_id
    ):
        login_as(UserRole.GESTOR)
        target = User.create(
            email="colega@empresa.com.br", organization_id=organization_id
        )
        user_repo.find_by_id_with_deleted.return_value = target
        override(get_get_user_handler, Success(value=make_user_result(target.id)))

        response = client.get(f"/api/v1/users/{target.id}")

        assert response.status_code == 200

    def test_manager_of_other_organization_forbidden(
        self, client, override, login_as, user_repo
    ):
        login_as(UserRole.GESTOR)
        target = User.create(email="alheia@outra.com.br", organization_id=uuid7())
        user_repo.find_by_id_with_deleted.return_value = target
        handler = override(
            get_get_user_handler, Success(value=make_user_result(target.id))
        )

        response = client.get(f"/api/v1/users/{target.id}")

        assert response.status_code == 403
        assert handler.calls == []

    def test_malformed_id_returns_422(self, client, login_as):
        login_as()

        response = client.get("/api/v1/users/not-a-uuid")

        assert response.status_code == 422

    def test_me_route_not_captured_by_id(self, client, override, login_as):
        user = login_as()
        handler = override(
            get_get_user_handler, Success(value=make_user_result(user.user_id))
        )

        response = client.get("/api/v1/users/me")

        assert response.status_code == 200
        assert handler.calls[0].user_id == user.user_id


@pytest.mark.api
class TestUpdateUser:
    def test_updates_own_profile_and_preferences(self, client, override, login_as):
        user = login_as()
        handler = override(
            get_update_user_handler, Success(value=make_user_result(user.user_id))
        )

        response = client.put(
            f"/api/v1/users/{user.user_id}",
            json={
                "first_name": "Mariana",
                "preferences": {"theme": "dark", "language": "pt-BR"},
            },
        )

        assert response.status_code == 200
        command = handler.calls[0]
        assert command.first_name == "Mariana"
        assert command.preferences == {"theme": "dark", "language": "pt-BR"}
        assert command.updated_by == user.user_id

    def test_invalid_theme_returns_422(self, client, login_as):
        user = login_as()

        response = client.put(
            f"/api/v1/users/{user.user_id}",
            json={"preferences": {"theme": "neon"}},
        )

        assert response.status_code == 422

    def test_other_profile_forbidden(self, client, login_as):
        login_as()

        response = client.put(f"/api/v1/users/{uuid7()}", json={"bio": "Oi"})

        assert response.status_code == 403


    def test_manager_cannot_update_user_of_other_organization(
        self, client, override, login_as, user_repo
    ):
        login_as(UserRole.GESTOR)
        target = User.create(email="alheia@outra.com.br", organization_id=uuid7())
        user_repo.find_by_id_with_deleted.return_value = target
        handler = override(
            get_update_user_handler, Success(value=make_user_result(target.id))
        )

        response = client.put(f"/api/v1/users/{target.id}", json={"bio": "Oi"})

        assert response.status_code == 403
        assert handler.calls == []


@pytest.mark.api
class TestDeleteUser:
    def test_admin_soft_deletes(self, client, override, login_as):
        admin = login_as(UserRole.ADMIN)
        target = uuid7()
        handler = override(
            get_delete_user_handler,
            Success(value=MessageResult(message="User deleted successfully")),
        )

        response = client.delete(f"/api/v1/users/{target}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        command = handler.calls[0]
        assert command.user_id == target
        assert command.hard_delete is False
        assert command.deleted_by == admin.user_id

    def test_hard_delete_flag(self, client, override, login_as):
        login_as(UserRole.ADMIN)
        handler = override(
            get_delete_user_handler,
            Success(value=MessageResult(message="User permanently deleted")),
        )

        response = client.delete(
            f"/api/v1/users/{uuid7()}", params={"hard_delete": "true"}
        )

        assert response.status_code == 200
        assert handler.calls[0].hard_delete is True

    def test_admin_cannot_delete_user_of_other_organization(
        self, client, override, login_as, user_repo
    ):
        login_as(UserRole.ADMIN)
        target = User.create(email="alheia@outra.com.br", organization_id=uuid7())
        user_repo.find_by_id_with_deleted.return_value = target
        handler = override(
            get_delete_user_handler,
            Success(value=MessageResult(message="User deleted successfully")),
        )

        response = client.delete(f"/api/v1/users/{target.id}")

        assert response.status_code == 403
        assert handler.calls == []

    def test_gestor_forbidden(self, client, login_as):
        login_as(UserRole.GESTOR)

        response = client.delete(f"/api/v1/users/{uuid7()}")

        assert response.status_code == 403


# =============================================================================
# LGPD
# =============================================================================


@pytest.mark.api
class TestDataExport:
    def test_exports_own_data(self, client, override, login_as, organization_id):
        user = login_as()
        handler = override(
            get_export_user_data_handler,
            Success(
                value=UserDataExport(
                    profile={"id": str(user.user_id), "email": user.email},
                    submissions=[{"emotion_level": 3, "emotion_emoji": "😌"}],
                    exported_at=datetime.now(UTC),
                )
            ),
        )

        response = client.get(
            "/api/v1/users/data-export", headers={"User-Agent": "pytest"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["format"] == "json"
        assert data["submissions"][0]["emotion_level"] == 3
        command = handler.calls[0]
        assert command.user_id == user.user_id
        assert command.organization_id == organization_id
        assert command.user_agent == "pytest"

    def test_requires_organization(self, client, login_as):
        login_as(org_id=None)

        response = client.get("/api/v1/users/data-export")

        assert response.status_code == 400
        assert "X-Organization-Id" in response.json()["detail"]

    def test_organization_header_for_unassigned_user(self, client, override, login_as):
        login_as(org_id=None)
        header_org = uuid7()
        handler = override(
            get_export_user_data_handler,
            Success(
                value=UserDataExport(profile={}, exported_at=datetime.now(UTC))
            ),
        )

        response = client.get(
            "/api/v1/users/data-export",
            headers={"X-Organization-Id": str(header_org)},
        )

        assert response.status_code == 200
        assert handler.calls[0].organization_id == header_org

    def test_foreign_organization_forbidden(self, client, login_as):
        login_as()

        response = client.get(
            "/api/v1/users/data-export",
            headers={"X-Organization-Id": str(uuid7())},
        )

        assert response.status_code == 403


@pytest.mark.api
class TestAnonymize:
    def test_anonymizes_submissions(self, client, override, login_as):
        login_as()
        override(
            get_anonymize_user_data_handler,
            Success(
                value=LgpdActionResult(
                    message="Your submissions were anonymized", affected_records=4
                )
            ),
        )

        response = client.post("/api/v1/users/data-anonymize")

        assert response.status_code == 200
        assert response.json()["affected_records"] == 4


@pytest.mark.api
class TestDataDeletion:
    def test_request_sends_confirmation(self, client, override, login_as):
        user = login_as()
        handler = override(
            get_request_data_deletion_handler,
            Success(
                value=LgpdActionResult(message="Confirmation email sent")
            ),
        )

        response = client.delete("/api/v1/users/data-deletion")

        assert response.status_code == 200
        assert response.json() == {"message": "Confirmation email sent"}
        assert handler.calls[0].user_id == user.user_id

    def test_confirm_deletes(self, client, override, login_as):
        user = login_as()
        handler = override(
            get_confirm_data_deletion_handler,
            Success(
                value=LgpdActionResult(
                    message="Your data was deleted", affected_records=2
                )
            ),
        )

        response = client.post(
            "/api/v1/users/data-deletion/confirm", json={"token": "deletion.jwt"}
        )

        assert response.status_code == 200
        assert response.json()["affected_records"] == 2
        command = handler.calls[0]
        assert command.user_id == user.user_id
        assert command.token == "deletion.jwt"

    def test_confirm_with_invalid_token(self, client, override, login_as):
        login_as()
        override(
            get_confirm_data_deletion_handler,
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="Invalid or expired deletion token",
                )
            ),
        )

        response = client.post(
            "/api/v1/users/data-deletion/confirm", json={"token": "forged"}
        )

        assert response.status_code == 401

    def test_confirm_requires_token(self, client, login_as):
        login_as()

        response = client.post("/api/v1/users/data-deletion/confirm", json={})

        assert response.status_code == 422


@pytest.mark.api
class TestAuditTrail:
    def test_lists_own_entries(self, client, override, login_as, organization_id):
        user = login_as()
        entry = AuditEntryResult(
            id=uuid7(),
            action=AuditAction.USER_DATA_EXPORTED.value,
            user_id=user.user_id,
            organization_id=organization_id,
            performed_by=None,
            resource_type="user",
            ip_address="203.0.113.9",
            user_agent="pytest",
            context={"submission_count": 3},
            created_at=datetime.now(UTC),
        )
        handler = override(
            get_audit_trail_handler,
            Success(value=AuditTrailPage(data=[entry], total=1)),
        )

        response = client.get(
            "/api/v1/users/audit-trail",
            params={"action": "user_data_exported", "limit": 10, "offset": 5},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["data"][0]["action"] == "user_data_exported"
        query = handler.calls[0]
        assert query.user_id == user.user_id
        assert query.action == AuditAction.USER_DATA_EXPORTED
        assert (query.limit, query.offset) == (10, 5)

    def test_unknown_action_returns_422(self, client, login_as):
        login_as()

        response = client.get(
            "/api/v1/users/audit-trail", params={"action": "teleported"}
        )

        assert response.status_code == 422
