"""Create User handler.

Flow:
1. Validate email and profile fields
2. Reject duplicate emails (soft-deleted accounts included)
3. Create and persist the user
4. Audit user_created (best effort)
"""

from src.application.commands.user_commands import CreateUser
from src.application.dtos import UserResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services.audit_recorder import record_audit
from src.application.validation import check_profile_fields, validation_error
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol, UserRepository
from src.domain.value_objects import Email

EMAIL_TAKEN = "User with this email already exists"


class CreateUserHandler:
    """Handler for CreateUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UserResult, ApplicationError]:
        """Handle CreateUser command.

        Returns:
            Success(UserResult) for the new user.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED or CONFLICT.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(error=validation_error(str(e), "email"))

        invalid = check_profile_fields(
            first_name=cmd.first_name, last_name=cmd.last_name, bio=cmd.bio
        )
        if invalid is not None:
            return Failure(error=invalid)

        if await self._user_repo.exists_by_email(email.value):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message=EMAIL_TAKEN,
                    details={"field": "email"},
                )
            )

        user = User.create(
            email=email.value,
            first_name=cmd.first_name.strip(),
            last_name=cmd.last_name.strip() if cmd.last_name else None,
            organization_id=cmd.organization_id,
            role=cmd.role,
        )
        if cmd.bio:
            user.update_profile(bio=cmd.bio)
        await self._user_repo.save(user)

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_CREATED,
            user_id=user.id,
            organization_id=user.organization_id,
            performed_by=cmd.created_by,
            resource_type="user",
            context={"role": user.role.value},
        )

        self._logger.info("User created", user_id=str(user.id), role=user.role.value)
        return Success(value=UserResult.from_entity(user))
