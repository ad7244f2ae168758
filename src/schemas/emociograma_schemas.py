"""Emociograma request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common_schemas import PageMeta


class SubmissionCreateRequest(BaseModel):
    """Request schema for an emotional check-in.

    POST /api/v1/emociograma/submissions
    Returns: 201 Created

    Levels 1-5 are positive to neutral; 6-10 notify the managers.
    """

    emotion_level: int = Field(..., ge=1, le=10, examples=[7])
    category_id: UUID | None = None
    is_anonymous: bool = False
    comment: str | None = Field(None, max_length=1000)
    department: str | None = Field(None, max_length=100)
    team: str | None = Field(None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "emotion_level": 7,
                "is_anonymous": True,
                "comment": "Semana puxada com prazos apertados",
                "department": "Tecnologia",
            }
        }
    )


class AlertResolveRequest(BaseModel):
    """Request schema for alert resolution.

    POST /api/v1/emociograma/alerts/{id}/resolution
    """

    notes: str | None = Field(None, max_length=500)


class SubmissionResponse(BaseModel):
    """Submission as seen by its reader (author masked if anonymous)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    user_id: UUID | str | None = None
    emotion_level: int
    emotion_emoji: str
    category_id: UUID | None = None
    is_anonymous: bool
    comment: str | None = None
    comment_flagged: bool
    submitted_at: datetime
    department: str | None = None
    team: str | None = None


class SubmissionListResponse(PageMeta):
    """Paginated submissions."""

    model_config = ConfigDict(from_attributes=True)

    data: list[SubmissionResponse]


class AlertResponse(BaseModel):
    """Emotional alert resource."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    submission_id: UUID
    alert_type: str
    severity: str
    message: str
    is_resolved: bool
    resolved_at: datetime | None = None
    resolved_by: UUID | None = None
    resolution_notes: str | None = None
    notified_users: list[UUID] = Field(default_factory=list)
    notification_sent_at: datetime | None = None
    created_at: datetime


class AlertListResponse(PageMeta):
    """Paginated alerts."""

    model_config = ConfigDict(from_attributes=True)

    data: list[AlertResponse]


class AlertStatisticsResponse(BaseModel):
    """Alert counters of an organization."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    unresolved: int
    resolved_today: int
    by_severity: dict[str, int]


class AlertDashboardResponse(BaseModel):
    """Alert dashboard.

    GET /api/v1/emociograma/alerts/dashboard
    """

    model_config = ConfigDict(from_attributes=True)

    statistics: AlertStatisticsResponse
    recent_alerts: list[AlertResponse]


class CategoryCreateRequest(BaseModel):
    """Request schema for a new emotion category.

    POST /api/v1/emociograma/categories
    Returns: 201 Created
    """

    name: str = Field(..., min_length=2, max_length=50, examples=["Trabalho"])
    description: str | None = Field(None, max_length=500)
    icon: str | None = Field(None, max_length=50)
    display_order: int = Field(0, ge=0)


class CategoryUpdateRequest(BaseModel):
    """Request schema for partial category updates.

    PATCH /api/v1/emociograma/categories/{id}

    An empty description or icon clears it.
    """

    name: str | None = Field(None, min_length=2, max_length=50)
    description: str | None = Field(None, max_length=500)
    icon: str | None = Field(None, max_length=50)
    display_order: int | None = Field(None, ge=0)


class CategoryResponse(BaseModel):
    """Emotion category resource."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    icon: str | None = None
    display_order: int
    is_active: bool
