"""Unit tests for the HTTP adapters (Supabase Auth, Resend).

Tests cover:
- SupabaseAuthClient: send_magic_link, verify_otp (both response shapes),
  delete_user, rejection vs. unavailability mapping, timeouts
- ResendEmailService: payload, message id, failures carry the recipient
- StubEmailService: records messages

Architecture:
- HTTP mocked with pytest_httpx (httpx_mock fixture)
"""

import json

import httpx
import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import OtpType
from src.domain.errors import (
    EmailDeliveryError,
    IdentityProviderRejectedError,
    IdentityProviderUnavailableError,
)
from src.infrastructure.email.resend_email_service import ResendEmailService
from src.infrastructure.email.stub_email_service import StubEmailService
from src.infrastructure.providers.supabase.supabase_auth_client import (
    SupabaseAuthClient,
)

SUPABASE_URL = "https://project.supabase.test"
RESEND_URL = "https://resend.test"


@pytest.fixture
def supabase():
    return SupabaseAuthClient(
        base_url=f"{SUPABASE_URL}/",
        anon_key="anon-key",
        service_role_key="service-key",
    )


@pytest.fixture
def resend():
    return ResendEmailService(
        api_key="re_test", sender="PsicoZen <noreply@psicozen.test>", base_url=RESEND_URL
    )


@pytest.mark.unit
class TestSupabaseAuthClient:
    """Test SupabaseAuthClient."""

    @pytest.mark.asyncio
    async def test_send_magic_link(self, supabase, httpx_mock):
        # Arrange
        httpx_mock.add_response(method="POST", json={})

        # Act
        result = await supabase.send_magic_link(
            email="ana@example.com", redirect_to="http://app/callback"
        )

        # Assert
        assert isinstance(result, Success)
        request = httpx_mock.get_requests()[0]
        assert request.url.path == "/auth/v1/otp"
        assert request.url.params["redirect_to"] == "http://app/callback"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer anon-key"
        assert json.loads(request.content) == {
            "email": "ana@example.com",
            "create_user": True,
        }

    @pytest.mark.asyncio
    async def test_send_magic_link_rejected(self, supabase, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            status_code=429,
            json={"msg": "For security purposes, you can only request this once every 60 seconds"},
        )

        result = await supabase.send_magic_link(email="ana@example.com")

        assert isinstance(result, Failure)
        assert isinstance(result.error, IdentityProviderRejectedError)
        assert result.error.status_code == 429
        assert result.error.message.startswith("For security purposes")

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self, supabase, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=503, text="down")

        result = await supabase.send_magic_link(email="ana@example.com")

        assert isinstance(result.error, IdentityProviderUnavailableError)
        assert result.error.code == ErrorCode.IDENTITY_PROVIDER_UNAVAILABLE
        assert result.error.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self, supabase, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await supabase.send_magic_link(email="ana@example.com")

        assert isinstance(result.error, IdentityProviderUnavailableError)
        assert "timed out" in result.error.message

    @pytest.mark.asyncio
    async def test_verify_otp_session_shape(self, supabase, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            json={
                "access_token": "provider-token",
                "user": {
                    "id": "sb-1",
                    "email": "Ana@Example.com",
                    "user_metadata": {"first_name": "Ana"},
                },
            },
        )

        result = await supabase.verify_otp(token_hash="hash", otp_type=OtpType.MAGICLINK)

        assert result.value.id == "sb-1"
        assert result.value.email == "ana@example.com"
        assert result.value.first_name == "Ana"
        request = httpx_mock.get_requests()[0]
        assert request.url.path == "/auth/v1/verify"
        assert json.loads(request.content) == {"type": "magiclink", "token_hash": "hash"}

    @pytest.mark.asyncio
    async def test_verify_otp_user_shape(self, supabase, httpx_mock):
        httpx_mock.add_response(method="POST", json={"id": "sb-2", "email": "b@example.com"})

        result = await supabase.verify_otp(token_hash="hash", otp_type=OtpType.INVITE)

        assert result.value.id == "sb-2"
        assert result.value.user_metadata == {}

    @pytest.mark.asyncio
    async def test_verify_otp_without_user(self, supabase, httpx_mock):
        httpx_mock.add_response(method="POST", json={"access_token": "x"})

        result = await supabase.verify_otp(token_hash="hash", otp_type=OtpType.MAGICLINK)

        assert result.error.code == ErrorCode.IDENTITY_PROVIDER_INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_verify_otp_expired(self, supabase, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            status_code=403,
            json={"error_description": "Token has expired or is invalid"},
        )

        result = await supabase.verify_otp(token_hash="old", otp_type=OtpType.MAGICLINK)

        assert result.error.message == "Token has expired or is invalid"

    @pytest.mark.asyncio
    async def test_delete_user_uses_service_role(self, supabase, httpx_mock):
        httpx_mock.add_response(method="DELETE", status_code=200, content=b"")

        result = await supabase.delete_user("sb-1")

        assert isinstance(result, Success)
        request = httpx_mock.get_requests()[0]
        assert request.url.path == "/auth/v1/admin/users/sb-1"
        assert request.headers["apikey"] == "service-key"


@pytest.mark.unit
class TestResendEmailService:
    """Test ResendEmailService."""

    @pytest.mark.asyncio
    async def test_send(self, resend, httpx_mock):
        httpx_mock.add_response(method="POST", url=f"{RESEND_URL}/emails", json={"id": "msg-1"})

        result = await resend.send(
            to="ana@example.com", subject="Olá", html="<p>Olá</p>", text="Olá"
        )

        assert result.value == "msg-1"
        request = httpx_mock.get_requests()[0]
        assert request.headers["Authorization"] == "Bearer re_test"
        assert json.loads(request.content) == {
            "from": "PsicoZen <noreply@psicozen.test>",
            "to": ["ana@example.com"],
            "subject": "Olá",
            "html": "<p>Olá</p>",
            "text": "Olá",
        }

    @pytest.mark.asyncio
    async def test_rejected_carries_recipients(self, resend, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=f"{RESEND_URL}/emails",
            status_code=422,
            json={"message": "Invalid `to` field"},
        )

        result = await resend.send(to=["a@example.com", "b@example.com"], subject="s", html="h")

        assert isinstance(result.error, EmailDeliveryError)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED
        assert result.error.recipient == "a@example.com, b@example.com"
        assert "Invalid `to` field" in result.error.message

    @pytest.mark.asyncio
    async def test_connection_error(self, resend, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        result = await resend.send(to="ana@example.com", subject="s", html="h")

        assert isinstance(result, Failure)
        assert result.error.recipient == "ana@example.com"


@pytest.mark.unit
class TestStubEmailService:
    """Test StubEmailService."""

    @pytest.mark.asyncio
    async def test_records_message(self, mock_logger):
        service = StubEmailService(logger=mock_logger)

        result = await service.send(to="ana@example.com", subject="s", html="h")

        assert result.value.startswith("stub-")
        assert service.sent == [
            {"to": "ana@example.com", "subject": "s", "html": "h", "text": None}
        ]
        mock_logger.warning.assert_called_once()
