"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import SendMagicLinkRequest, UserResponse
"""

from src.schemas.auth_schemas import (
    AuthSessionResponse,
    AuthTokensResponse,
    AuthUserResponse,
    LogoutRequest,
    RefreshTokenRequest,
    SendMagicLinkRequest,
    VerifyMagicLinkRequest,
)
from src.schemas.common_schemas import MessageResponse, PageMeta
from src.schemas.emociograma_schemas import (
    AlertListResponse,
    AlertResolveRequest,
    AlertResponse,
    SubmissionCreateRequest,
    SubmissionListResponse,
    SubmissionResponse,
)
from src.schemas.lgpd_schemas import (
    AuditEntryResponse,
    AuditTrailResponse,
    DataDeletionConfirmRequest,
    LgpdActionResponse,
    UserDataExportResponse,
)
from src.schemas.user_schemas import (
    UserCreateRequest,
    UserListResponse,
    UserPreferencesUpdate,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    # Common
    "MessageResponse",
    "PageMeta",
    # Auth
    "AuthSessionResponse",
    "AuthTokensResponse",
    "AuthUserResponse",
    "LogoutRequest",
    "RefreshTokenRequest",
    "SendMagicLinkRequest",
    "VerifyMagicLinkRequest",
    # Users
    "UserCreateRequest",
    "UserListResponse",
    "UserPreferencesUpdate",
    "UserResponse",
    "UserUpdateRequest",
    # LGPD
    "AuditEntryResponse",
    "AuditTrailResponse",
    "DataDeletionConfirmRequest",
    "LgpdActionResponse",
    "UserDataExportResponse",
    # Emociograma
    "AlertListResponse",
    "AlertResolveRequest",
    "AlertResponse",
    "SubmissionCreateRequest",
    "SubmissionListResponse",
    "SubmissionResponse",
]
