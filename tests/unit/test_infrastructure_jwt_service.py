"""Unit tests for JWTService.

Tests cover:
- Duration parsing (s/m/h/d and fallback)
- Secret length check
- Access, refresh and action token claims
- Validation: expiry, signature, token type

Architecture:
- Real PyJWT encode/decode, no mocks
"""

import time

import jwt
import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.security.jwt_service import JWTService, parse_expiration

SECRET = "unit-test-secret-key-with-at-least-32-chars"


@pytest.fixture
def service():
    return JWTService(secret_key=SECRET, access_expires_in="15m", refresh_expires_in="7d")


@pytest.mark.unit
class TestParseExpiration:
    """Test parse_expiration."""

    @pytest.mark.parametrize(
        ("value", "seconds"),
        [("30s", 30), ("15m", 900), ("12h", 43200), ("7d", 604800)],
    )
    def test_known_units(self, value, seconds):
        assert parse_expiration(value) == seconds

    @pytest.mark.parametrize("value", ["", "soon", "15", "m15", "1w"])
    def test_unknown_format_falls_back(self, value):
        assert parse_expiration(value) == 900


@pytest.mark.unit
class TestJWTService:
    """Test token generation and validation."""

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32"):
            JWTService(secret_key="short")

    def test_lifetimes(self, service):
        assert service.access_token_expires_in == 900
        assert service.refresh_token_expires_in == 604800

    def test_access_token_claims(self, service):
        user_id, org_id, session_id = uuid7(), uuid7(), uuid7()

        token = service.generate_access_token(
            user_id=user_id,
            email="ana@example.com",
            role="gestor",
            organization_id=org_id,
            session_id=session_id,
        )
        result = service.validate_token(token)

        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(user_id)
        assert payload["type"] == "access"
        assert payload["email"] == "ana@example.com"
        assert payload["role"] == "gestor"
        assert payload["organization_id"] == str(org_id)
        assert payload["session_id"] == str(session_id)
        assert payload["exp"] - payload["iat"] == 900

    def test_refresh_tokens_are_unique(self, service):
        user_id = uuid7()

        first = service.generate_refresh_token(user_id=user_id)
        second = service.generate_refresh_token(user_id=user_id)

        assert first != second
        assert isinstance(service.validate_token(first, expected_type="refresh"), Success)

    def test_action_token(self, service):
        user_id = uuid7()

        token = service.generate_action_token(
            user_id=user_id,
            purpose="data_deletion",
            expires_in_seconds=3600,
            claims={"organization_id": "org-1"},
        )
        result = service.validate_token(token, expected_type="action")

        assert result.value["purpose"] == "data_deletion"
        assert result.value["organization_id"] == "org-1"

    def test_wrong_type_rejected(self, service):
        token = service.generate_refresh_token(user_id=uuid7())

        result = service.validate_token(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_expired_token(self, service):
        token = service.generate_action_token(
            user_id=uuid7(), purpose="p", expires_in_seconds=-10
        )

        result = service.validate_token(token, expected_type="action")

        assert result.error.code == ErrorCode.TOKEN_EXPIRED

    def test_foreign_signature_rejected(self, service):
        other = JWTService(secret_key="another-secret-key-that-is-32-chars-long")
        token = other.generate_access_token(user_id=uuid7(), email="a@b.co", role="admin")

        result = service.validate_token(token)

        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_missing_required_claim(self, service):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "x", "type": "access", "iat": now, "exp": now + 60},
            SECRET,
            algorithm="HS256",
        )

        result = service.validate_token(token)

        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_garbage_token(self, service):
        assert service.validate_token("not.a.jwt").error.code == ErrorCode.TOKEN_INVALID
