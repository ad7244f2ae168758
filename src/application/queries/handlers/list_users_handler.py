"""List Users query handler."""

from src.application.dtos import UserPage, UserResult
from src.application.errors import ApplicationError
from src.application.queries.user_queries import ListUsers
from src.application.validation import check_pagination, total_pages, validation_error
from src.core.result import Failure, Result, Success
from src.domain.protocols import UserRepository

SORT_FIELDS = frozenset({"created_at", "email", "first_name", "last_name"})
SORT_ORDERS = frozenset({"ASC", "DESC"})


class ListUsersHandler:
    """Handler for ListUsers query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[UserPage, ApplicationError]:
        """List one page of users.

        Returns:
            Success(UserPage) or Failure(ApplicationError) for bad paging
            or sorting parameters.
        """
        invalid = check_pagination(query.page, query.limit)
        if invalid is not None:
            return Failure(error=invalid)
        if query.sort_by not in SORT_FIELDS:
            return Failure(error=validation_error("Unsupported sort field", "sort_by"))
        if query.sort_order not in SORT_ORDERS:
            return Failure(error=validation_error("sort_order must be ASC or DESC", "sort_order"))

        users, total = await self._user_repo.find_all(
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
            organization_id=query.organization_id,
        )
        return Success(
            value=UserPage(
                data=[UserResult.from_entity(user) for user in users],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=total_pages(total, query.limit),
            )
        )
