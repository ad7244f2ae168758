"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_ALREADY_RESOLVED)
- Authentication errors (TOKEN_*, MAGIC_LINK_*, SESSION_*)
- Authorization errors (PERMISSION_*, ACCOUNT_DISABLED)
- External provider errors (IDENTITY_PROVIDER_*, EMAIL_*)
- Compliance errors (AUDIT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_EMOTION_LEVEL = "invalid_emotion_level"
    COMMENT_TOO_LONG = "comment_too_long"
    INVALID_PREFERENCES = "invalid_preferences"
    INVALID_OTP_TYPE = "invalid_otp_type"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    SESSION_NOT_FOUND = "session_not_found"
    SUBMISSION_NOT_FOUND = "submission_not_found"
    ALERT_NOT_FOUND = "alert_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    ALERT_ALREADY_RESOLVED = "alert_already_resolved"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    MAGIC_LINK_INVALID = "magic_link_invalid"
    SESSION_EXPIRED = "session_expired"
    SESSION_REVOKED = "session_revoked"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    ACCOUNT_DISABLED = "account_disabled"
    AUTHORIZATION_FAILED = "authorization_failed"

    # Audit trail errors
    AUDIT_RECORD_FAILED = "audit_record_failed"
    AUDIT_QUERY_FAILED = "audit_query_failed"
    AUDIT_PURGE_FAILED = "audit_purge_failed"

    # Rate limit errors
    RATE_LIMIT_CHECK_FAILED = "rate_limit_check_failed"

    # External provider errors
    IDENTITY_PROVIDER_REJECTED = "identity_provider_rejected"
    IDENTITY_PROVIDER_UNAVAILABLE = "identity_provider_unavailable"
    IDENTITY_PROVIDER_INVALID_RESPONSE = "identity_provider_invalid_response"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
