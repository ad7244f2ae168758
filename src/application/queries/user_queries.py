"""User queries (CQRS read operations).

Queries represent requests for data without side effects.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.protocols.user_repository import SortOrder, UserSortField


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch one user by id.

    Attributes:
        user_id: User to fetch.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """List users page by page.

    Attributes:
        page: 1-based page number.
        limit: Page size (1-100).
        sort_by: created_at, email, first_name or last_name.
        sort_order: ASC or DESC.
        organization_id: Restrict to one organization.
    """

    page: int = 1
    limit: int = 20
    sort_by: UserSortField = "created_at"
    sort_order: SortOrder = "DESC"
    organization_id: UUID | None = None
