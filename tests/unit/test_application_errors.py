"""Unit tests for ApplicationError shortcut constructors."""

import pytest
from uuid_extensions import uuid7

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.domain.errors import IdentityProviderRejectedError


@pytest.mark.unit
class TestApplicationError:
    def test_invalid_names_field(self):
        error = ApplicationError.invalid("emotion_level out of range", "emotion_level")

        assert error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert error.field == "emotion_level"
        assert error.details == {"field": "emotion_level"}

    def test_field_absent_without_details(self):
        error = ApplicationError(code=ApplicationErrorCode.CONFLICT, message="Taken")

        assert error.field is None

    def test_not_found_echoes_identifier(self):
        alert_id = uuid7()

        error = ApplicationError.not_found("Alert", alert_id)

        assert error.code == ApplicationErrorCode.NOT_FOUND
        assert error.message == "Alert not found"
        assert error.details == {"alert_id": str(alert_id)}
        assert error.field is None

    def test_wrap_keeps_domain_error(self):
        cause = IdentityProviderRejectedError(
            code=ErrorCode.IDENTITY_PROVIDER_REJECTED,
            message="Token has expired or is invalid",
            provider_name="supabase",
            status_code=403,
        )

        error = ApplicationError.wrap(ApplicationErrorCode.UNAUTHORIZED, cause)

        assert error.message == "Token has expired or is invalid"
        assert error.domain_error is cause

    def test_wrap_with_own_message(self):
        cause = IdentityProviderRejectedError(
            code=ErrorCode.IDENTITY_PROVIDER_REJECTED,
            message="upstream detail",
            provider_name="supabase",
            status_code=403,
        )

        error = ApplicationError.wrap(
            ApplicationErrorCode.UNAUTHORIZED, cause, "Invalid or expired magic link"
        )

        assert error.message == "Invalid or expired magic link"
