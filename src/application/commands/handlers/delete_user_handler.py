"""Delete User handler.

Flow:
1. Find the user, soft-deleted rows included (404 if missing)
2. Delete the identity provider account (best effort, failure logged)
3. Already soft-deleted or hard_delete requested: remove the row
   (sessions cascade); otherwise soft delete and revoke sessions
4. Audit user_deleted (best effort)
"""

from src.application.commands.user_commands import DeleteUser
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError
from src.application.services.audit_recorder import record_audit
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import (
    AuditProtocol,
    IdentityProviderProtocol,
    LoggerProtocol,
    SessionRepository,
    UserRepository,
)


class DeleteUserHandler:
    """Handler for DeleteUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        identity_provider: IdentityProviderProtocol,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._identity_provider = identity_provider
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[MessageResult, ApplicationError]:
        """Handle DeleteUser command.

        Returns:
            Success(MessageResult).
            Failure(ApplicationError) with NOT_FOUND.
        """
        user = await self._user_repo.find_by_id_with_deleted(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        if user.identity_provider_user_id:
            remote = await self._identity_provider.delete_user(
                user.identity_provider_user_id
            )
            if isinstance(remote, Failure):
                # Local deletion proceeds; the provider account can be cleaned up later.
                self._logger.warning(
                    "Identity provider user deletion failed",
                    user_id=str(user.id),
                    error_code=remote.error.code.value,
                    error_message=remote.error.message,
                )

        hard = cmd.hard_delete or user.is_deleted()
        if hard:
            await self._user_repo.delete(user.id)
            message = "User permanently deleted"
        else:
            user.soft_delete()
            await self._user_repo.update(user)
            await self._session_repo.revoke_all_for_user(user.id)
            message = "User deleted successfully"

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_DELETED,
            user_id=user.id,
            organization_id=user.organization_id,
            performed_by=cmd.deleted_by,
            resource_type="user",
            context={"hard_delete": hard},
        )

        self._logger.info("User deleted", user_id=str(user.id), hard_delete=hard)
        return Success(value=MessageResult(message=message))
