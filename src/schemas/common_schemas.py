"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Human-readable result")


class PageMeta(BaseModel):
    """Page-number pagination fields shared by list responses.

    Attributes:
        total: Total items matching the query.
        page: Current page number (1-indexed).
        limit: Items per page.
        total_pages: Total number of pages.
    """

    total: int = Field(..., ge=0, description="Total items available")
    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, description="Items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
