"""Unit tests for domain value objects and enums.

Tests cover:
- Email: normalization, validation, masking
- RateLimitRule: validation and key building
- UserRole and AuditAction helpers
- AuditLogEntry classification

Architecture:
- Pure domain tests, no mocks or I/O
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.domain.entities import AuditLogEntry
from src.domain.enums import AuditAction, UserRole
from src.domain.value_objects import Email, RateLimitRule


@pytest.mark.unit
class TestEmail:
    """Test Email value object."""

    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ana.Souza@Example.COM ").value == "ana.souza@example.com"

    @pytest.mark.parametrize("raw", ["", "not-an-email", "ana@", "@example.com"])
    def test_invalid_addresses_raise(self, raw):
        with pytest.raises(ValueError, match="Invalid email"):
            Email(raw)

    def test_masked_and_domain(self):
        email = Email("ana@example.com")

        assert email.masked() == "a**@example.com"
        assert email.domain == "example.com"
        assert str(email) == "ana@example.com"


@pytest.mark.unit
class TestRateLimitRule:
    """Test RateLimitRule value object."""

    def test_key_for_lowercases_identifier(self):
        rule = RateLimitRule(name="auth_magic_link", limit=3, window_seconds=60)

        assert rule.key_for(" Ana@Example.com ") == "auth_magic_link:ana@example.com"

    @pytest.mark.parametrize(("limit", "window"), [(0, 60), (3, 0), (-1, 60)])
    def test_non_positive_values_raise(self, limit, window):
        with pytest.raises(ValueError):
            RateLimitRule(name="r", limit=limit, window_seconds=window)


@pytest.mark.unit
class TestEnums:
    """Test enum helpers."""

    def test_user_role_values(self):
        assert UserRole.values() == ["colaborador", "gestor", "admin"]
        assert UserRole.is_valid("gestor") is True
        assert UserRole.is_valid("owner") is False

    def test_managers(self):
        assert UserRole.managers() == [UserRole.GESTOR, UserRole.ADMIN]

    @pytest.mark.parametrize(
        "action",
        [
            AuditAction.USER_DATA_EXPORTED,
            AuditAction.USER_DATA_ANONYMIZED,
            AuditAction.USER_DATA_DELETED,
        ],
    )
    def test_lgpd_actions(self, action):
        assert action.is_lgpd_action is True

    def test_non_lgpd_action(self):
        assert AuditAction.USER_LOGIN.is_lgpd_action is False
        assert AuditAction.DATA_DELETION_REQUESTED.is_lgpd_action is False


@pytest.mark.unit
class TestAuditLogEntry:
    """Test AuditLogEntry classification helpers."""

    def _entry(self, action: str) -> AuditLogEntry:
        return AuditLogEntry(
            id=uuid7(),
            action=action,
            user_id=uuid7(),
            created_at=datetime.now(UTC),
        )

    def test_lgpd_entry(self):
        entry = self._entry(AuditAction.USER_DATA_EXPORTED.value)

        assert entry.is_lgpd_action() is True
        assert entry.is_security_event() is False

    def test_security_entry(self):
        entry = self._entry(AuditAction.USER_LOGOUT.value)

        assert entry.is_security_event() is True
        assert entry.is_lgpd_action() is False

    def test_unknown_action_is_not_lgpd(self):
        assert self._entry("legacy_action").is_lgpd_action() is False
