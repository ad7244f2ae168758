"""LGPD request/response schemas (data subject rights)."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DataDeletionConfirmRequest(BaseModel):
    """Request schema for confirming data deletion.

    POST /api/v1/users/data-deletion/confirm
    """

    token: str = Field(..., min_length=1, description="Token from the confirmation email")


class UserDataExportResponse(BaseModel):
    """Portable copy of the user's data (LGPD Art. 18, V)."""

    model_config = ConfigDict(from_attributes=True)

    profile: dict[str, Any]
    submissions: list[dict[str, Any]]
    exported_at: datetime
    format: str = "json"


class LgpdActionResponse(BaseModel):
    """Result of an anonymization, deletion request or erasure."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    affected_records: int = 0


class AuditEntryResponse(BaseModel):
    """One audit trail entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    action: str
    user_id: UUID | None = None
    organization_id: UUID | None = None
    performed_by: UUID | None = None
    resource_type: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class AuditTrailResponse(BaseModel):
    """Audit trail page, newest first."""

    model_config = ConfigDict(from_attributes=True)

    data: list[AuditEntryResponse]
    total: int
