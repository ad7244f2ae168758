"""Update User handler (profile fields and preferences)."""

from src.application.commands.user_commands import UpdateUser
from src.application.dtos import UserResult
from src.application.errors import ApplicationError
from src.application.services.audit_recorder import record_audit
from src.application.validation import check_profile_fields, validation_error
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol, UserRepository


class UpdateUserHandler:
    """Handler for UpdateUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[UserResult, ApplicationError]:
        """Handle UpdateUser command.

        Returns:
            Success(UserResult) with the updated user.
            Failure(ApplicationError): NOT_FOUND or COMMAND_VALIDATION_FAILED.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        invalid = check_profile_fields(
            first_name=cmd.first_name, last_name=cmd.last_name, bio=cmd.bio
        )
        if invalid is not None:
            return Failure(error=invalid)

        if cmd.preferences:
            merged = user.update_preferences(**cmd.preferences)
            if isinstance(merged, Failure):
                return Failure(error=validation_error(merged.error, "preferences"))

        user.update_profile(
            first_name=cmd.first_name.strip() if cmd.first_name else None,
            last_name=cmd.last_name.strip() if cmd.last_name is not None else None,
            bio=cmd.bio,
            photo_url=cmd.photo_url,
        )
        await self._user_repo.update(user)

        changed = sorted(
            name
            for name in ("first_name", "last_name", "bio", "photo_url", "preferences")
            if getattr(cmd, name) is not None
        )
        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_UPDATED,
            user_id=user.id,
            organization_id=user.organization_id,
            performed_by=cmd.updated_by,
            resource_type="user",
            context={"fields": changed},
        )

        return Success(value=UserResult.from_entity(user))
