"""Sync User With Provider handler.

Maps a verified identity provider user to the local user table:

- Known provider id: record the login
- Known email without provider id (created by a manager): link the identity
  and record the login
- Unknown: create an active colaborador from the provider profile (names
  longer than the profile columns are cut to fit)
- Email held by a deleted account: refuse (the address stays reserved)

Disabled or deleted users are returned untouched so the caller can refuse
the login.
"""

from src.application.commands.auth_commands import SyncUserWithProvider
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.validation import NAME_MAX_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.protocols import LoggerProtocol, UserRepository


def _fit_name(value: str | None) -> str | None:
    """Trim a provider supplied name to the profile column size."""
    if value is None:
        return None
    value = value.strip()[:NAME_MAX_LENGTH].rstrip()
    return value or None


class SyncUserWithProviderHandler:
    """Handler for SyncUserWithProvider command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(
        self, cmd: SyncUserWithProvider
    ) -> Result[User, ApplicationError]:
        """Find or create the local user and record the login.

        Returns:
            Success(User) with the local user.
            Failure(ApplicationError) with UNAUTHORIZED for deleted accounts.
        """
        identity = cmd.identity_user

        user = await self._user_repo.find_by_identity_provider_id(identity.id)
        if user is None:
            user = await self._user_repo.find_by_email(identity.email)
            if user is not None:
                user.link_identity(identity.id)
                self._logger.info(
                    "Linked identity provider account", user_id=str(user.id)
                )

        if user is None and await self._user_repo.exists_by_email(identity.email):
            self._logger.warning("Login refused for deleted account")
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="User account is disabled",
                )
            )

        if user is None:
            user = User.create(
                email=identity.email,
                first_name=_fit_name(identity.first_name)
                or _fit_name(identity.email.split("@")[0]),
                last_name=_fit_name(identity.last_name),
                identity_provider_user_id=identity.id,
            )
            user.record_login()
            await self._user_repo.save(user)
            self._logger.info("User created from identity provider", user_id=str(user.id))
            return Success(value=user)

        if user.can_authenticate():
            user.record_login()
        await self._user_repo.update(user)
        return Success(value=user)
