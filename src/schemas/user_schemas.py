"""User request/response schemas.

Field limits mirror the handler checks: first_name 2-50, last_name up to 50,
bio up to 500 characters.
"""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.enums import UserRole
from src.schemas.common_schemas import PageMeta


class UserPreferencesUpdate(BaseModel):
    """Partial preferences update. Unset fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    language: str | None = Field(None, examples=["pt-BR"])
    theme: Literal["light", "dark", "system"] | None = None
    notifications: bool | None = None
    timezone: str | None = Field(None, examples=["America/Sao_Paulo"])


class UserCreateRequest(BaseModel):
    """Request schema for user creation by a gestor/admin.

    POST /api/v1/users
    Returns: 201 Created
    """

    email: EmailStr = Field(..., examples=["nova.pessoa@empresa.com.br"])
    first_name: str = Field(..., min_length=2, max_length=50, examples=["Maria"])
    last_name: str | None = Field(None, max_length=50, examples=["Silva"])
    bio: str | None = Field(None, max_length=500)
    organization_id: UUID | None = None
    role: UserRole = UserRole.COLABORADOR


class UserUpdateRequest(BaseModel):
    """Request schema for profile updates.

    PUT /api/v1/users/{id}
    """

    first_name: str | None = Field(None, min_length=2, max_length=50)
    last_name: str | None = Field(None, max_length=50)
    bio: str | None = Field(None, max_length=500)
    photo_url: str | None = Field(None, max_length=2048)
    preferences: UserPreferencesUpdate | None = None


class UserResponse(BaseModel):
    """User resource."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    photo_url: str | None = None
    bio: str | None = None
    preferences: dict[str, Any] = Field(default_factory=dict)
    organization_id: UUID | None = None
    role: str
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class UserListResponse(PageMeta):
    """Paginated user list."""

    model_config = ConfigDict(from_attributes=True)

    data: list[UserResponse]
