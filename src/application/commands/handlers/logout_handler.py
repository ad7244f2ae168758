"""Logout handler.

With a refresh token, revokes that session. Without one, revokes every
session of the user. Access tokens are not stored and expire on their own.
"""

from src.application.commands.auth_commands import Logout
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError
from src.application.services.audit_recorder import record_audit
from src.core.result import Result, Success
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol, SessionRepository

SESSION_REVOKED = "Session revoked successfully"
ALL_SESSIONS_REVOKED = "All sessions revoked successfully"


class LogoutHandler:
    """Handler for Logout command."""

    def __init__(
        self,
        session_repo: SessionRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._session_repo = session_repo
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: Logout) -> Result[MessageResult, ApplicationError]:
        """Handle Logout command.

        Unknown tokens still succeed; the caller wanted to be logged out.

        Returns:
            Success(MessageResult).
        """
        if cmd.refresh_token:
            revoked = await self._session_repo.revoke_by_refresh_token(
                cmd.user_id, cmd.refresh_token
            )
            message = SESSION_REVOKED
            context = {"scope": "session", "revoked": int(revoked)}
        else:
            count = await self._session_repo.revoke_all_for_user(cmd.user_id)
            message = ALL_SESSIONS_REVOKED
            context = {"scope": "all", "revoked": count}

        await record_audit(
            self._audit,
            self._logger,
            action=AuditAction.USER_LOGOUT,
            user_id=cmd.user_id,
            resource_type="session",
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
            context=context,
        )

        self._logger.info("User logged out", user_id=str(cmd.user_id), **context)
        return Success(value=MessageResult(message=message))
