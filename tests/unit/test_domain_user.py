"""Unit tests for the User domain entity.

Tests cover:
- Creation (email normalization, default role, empty email rejection)
- Authentication rules (inactive, soft-deleted)
- Profile and preference updates
- Login recording and identity linking

Architecture:
- Pure domain tests, no mocks or I/O
"""

import pytest
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.entities import User, UserPreferences
from src.domain.enums import UserRole
from src.domain.errors import UserError


@pytest.mark.unit
class TestUserCreation:
    """Test User.create factory."""

    def test_create_normalizes_email(self):
        user = User.create(email="  Ana.Souza@Example.COM ")

        assert user.email == "ana.souza@example.com"

    def test_create_defaults(self):
        user = User.create(email="ana@example.com")

        assert user.role == UserRole.COLABORADOR
        assert user.is_active is True
        assert user.deleted_at is None
        assert user.last_login_at is None
        assert user.preferences == UserPreferences()
        assert user.created_at == user.updated_at

    def test_create_with_organization_and_role(self):
        org_id = uuid7()

        user = User.create(
            email="gestor@example.com",
            organization_id=org_id,
            role=UserRole.GESTOR,
            identity_provider_user_id="sb-123",
        )

        assert user.organization_id == org_id
        assert user.role == UserRole.GESTOR
        assert user.identity_provider_user_id == "sb-123"

    def test_empty_email_raises(self):
        with pytest.raises(ValueError, match=UserError.INVALID_EMAIL):
            User(id=uuid7(), email="   ")


@pytest.mark.unit
class TestUserAuthentication:
    """Test can_authenticate and deletion state."""

    def test_active_user_can_authenticate(self):
        user = User.create(email="ana@example.com")

        assert user.can_authenticate() is True

    def test_deactivated_user_cannot_authenticate(self):
        user = User.create(email="ana@example.com")

        user.deactivate()

        assert user.can_authenticate() is False

    def test_soft_deleted_user_is_inactive(self):
        user = User.create(email="ana@example.com")

        user.soft_delete()

        assert user.is_deleted() is True
        assert user.is_active is False
        assert user.can_authenticate() is False

    def test_activate_restores_access(self):
        user = User.create(email="ana@example.com")
        user.deactivate()

        user.activate()

        assert user.can_authenticate() is True


@pytest.mark.unit
class TestUserProfile:
    """Test profile updates and derived fields."""

    def test_full_name_joins_names(self):
        user = User.create(email="ana@example.com", first_name="Ana", last_name="Souza")

        assert user.full_name == "Ana Souza"

    def test_full_name_falls_back_to_email(self):
        user = User.create(email="ana@example.com")

        assert user.full_name == "ana@example.com"

    def test_update_profile_ignores_none(self):
        user = User.create(email="ana@example.com", first_name="Ana", last_name="Souza")

        user.update_profile(bio="Designer")

        assert user.first_name == "Ana"
        assert user.last_name == "Souza"
        assert user.bio == "Designer"

    def test_record_login_sets_timestamp(self):
        user = User.create(email="ana@example.com")

        user.record_login()

        assert user.last_login_at is not None

    def test_link_identity(self):
        user = User.create(email="ana@example.com")

        user.link_identity("sb-456")

        assert user.identity_provider_user_id == "sb-456"


@pytest.mark.unit
class TestUserPreferences:
    """Test preference merging and validation."""

    def test_update_preferences_merges(self):
        user = User.create(email="ana@example.com")

        result = user.update_preferences(theme="dark", language="pt-BR")

        assert isinstance(result, Success)
        assert user.preferences.theme == "dark"
        assert user.preferences.language == "pt-BR"
        assert user.preferences.notifications is True
        assert user.preferences.timezone == "UTC"

    def test_none_values_are_ignored(self):
        user = User.create(email="ana@example.com")

        result = user.update_preferences(theme=None, notifications=False)

        assert isinstance(result, Success)
        assert user.preferences.theme == "system"
        assert user.preferences.notifications is False

    def test_unknown_key_fails(self):
        user = User.create(email="ana@example.com")

        result = user.update_preferences(font_size=14)

        assert isinstance(result, Failure)
        assert result.error.startswith(UserError.UNKNOWN_PREFERENCE)
        assert "font_size" in result.error

    def test_unsupported_theme_fails(self):
        user = User.create(email="ana@example.com")

        result = user.update_preferences(theme="neon")

        assert isinstance(result, Failure)
        assert result.error == UserError.UNSUPPORTED_THEME
        assert user.preferences.theme == "system"

    def test_from_dict_defaults_missing_keys(self):
        prefs = UserPreferences.from_dict({"theme": "light"})

        assert prefs.theme == "light"
        assert prefs.language == "en"
        assert UserPreferences.from_dict(None) == UserPreferences()
