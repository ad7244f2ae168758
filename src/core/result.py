"""Result types for railway-oriented programming.

Handlers and adapters return a Result instead of raising for expected
failures (user not found, expired magic link, provider rejection). The
presentation layer pattern-matches on the outcome.

Usage:
    async def handle(self, cmd: GetUser) -> Result[UserDTO, ApplicationError]:
        user = await self._users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError(...))
        return Success(value=UserDTO.from_entity(user))

    match await handler.handle(cmd):
        case Success(value=user):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
