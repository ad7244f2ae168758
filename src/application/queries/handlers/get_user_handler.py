"""Get User query handler (also serves /auth/me and /users/me)."""

from src.application.dtos import UserResult
from src.application.errors import ApplicationError
from src.application.queries.user_queries import GetUser
from src.core.result import Failure, Result, Success
from src.domain.protocols import UserRepository


class GetUserHandler:
    """Handler for GetUser query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[UserResult, ApplicationError]:
        """Fetch one user.

        Returns:
            Success(UserResult) or Failure(ApplicationError) with NOT_FOUND.
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", query.user_id))
        return Success(value=UserResult.from_entity(user))
