"""LGPD handler factories.

Request-scoped handlers for data subject rights (LGPD Art. 18):
export, anonymization, two-step deletion and audit trail access.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_audit,
    get_db_session,
    get_email_service,
    get_logger,
    get_token_service,
)
from src.domain.protocols import AuditProtocol

if TYPE_CHECKING:
    from src.application.commands.handlers.anonymize_user_data_handler import (
        AnonymizeUserDataHandler,
    )
    from src.application.commands.handlers.confirm_data_deletion_handler import (
        ConfirmDataDeletionHandler,
    )
    from src.application.commands.handlers.export_user_data_handler import (
        ExportUserDataHandler,
    )
    from src.application.commands.handlers.request_data_deletion_handler import (
        RequestDataDeletionHandler,
    )
    from src.application.queries.handlers.get_audit_trail_handler import (
        GetAuditTrailHandler,
    )


async def get_export_user_data_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "ExportUserDataHandler":
    """Get ExportUserDataHandler instance (right to portability).

    Args:
        session: Database session for the business transaction.
        audit: Audit adapter with its own session.

    Returns:
        ExportUserDataHandler instance.
    """
    from src.application.commands.handlers.export_user_data_handler import (
        ExportUserDataHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SubmissionRepository,
        UserRepository,
    )

    return ExportUserDataHandler(
        user_repo=UserRepository(session=session),
        submission_repo=SubmissionRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )


async def get_anonymize_user_data_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "AnonymizeUserDataHandler":
    """Get AnonymizeUserDataHandler instance (right to anonymization)."""
    from src.application.commands.handlers.anonymize_user_data_handler import (
        AnonymizeUserDataHandler,
    )
    from src.infrastructure.persistence.repositories import SubmissionRepository

    return AnonymizeUserDataHandler(
        submission_repo=SubmissionRepository(session=session),
        audit=audit,
        logger=get_logger(),
    )


async def get_request_data_deletion_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "RequestDataDeletionHandler":
    """Get RequestDataDeletionHandler instance.

    Step one of deletion: emails a signed, single-purpose confirmation link
    to the account address.

    Args:
        session: Database session for the business transaction.
        audit: Audit adapter with its own session.

    Returns:
        RequestDataDeletionHandler instance.
    """
    from src.application.commands.handlers.request_data_deletion_handler import (
        RequestDataDeletionHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RequestDataDeletionHandler(
        user_repo=UserRepository(session=session),
        token_service=get_token_service(),
        email_service=get_email_service(),
        audit=audit,
        logger=get_logger(),
        frontend_url=settings.frontend_url,
    )


async def get_confirm_data_deletion_handler(
    session: AsyncSession = Depends(get_db_session),
    audit: AuditProtocol = Depends(get_audit),
) -> "ConfirmDataDeletionHandler":
    """Get ConfirmDataDeletionHandler instance (right to erasure)."""
    from src.application.commands.handlers.confirm_data_deletion_handler import (
        ConfirmDataDeletionHandler,
    )
    from src.infrastructure.persistence.repositories import SubmissionRepository

    return ConfirmDataDeletionHandler(
        submission_repo=SubmissionRepository(session=session),
        token_service=get_token_service(),
        audit=audit,
        logger=get_logger(),
    )


async def get_audit_trail_handler(
    audit: AuditProtocol = Depends(get_audit),
) -> "GetAuditTrailHandler":
    """Get GetAuditTrailHandler instance (right to access)."""
    from src.application.queries.handlers.get_audit_trail_handler import (
        GetAuditTrailHandler,
    )

    return GetAuditTrailHandler(audit=audit)
