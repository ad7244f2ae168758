"""Dependency injection container.

Composition root for the PsicoZen API. Provides:
- Application-scoped singletons (database, logger, token service,
  email, identity provider, rate limiter)
- Request-scoped dependencies (database session, audit adapter)
- Handler factories for every use case, consumed with ``Depends()``

Usage:
    from src.core.container import get_send_magic_link_handler

    @router.post("/auth/send-magic-link")
    async def send_magic_link(
        handler: SendMagicLinkHandler = Depends(get_send_magic_link_handler),
    ): ...
"""

from src.core.container.auth_handlers import (
    get_logout_handler,
    get_refresh_token_handler,
    get_send_magic_link_handler,
    get_verify_magic_link_handler,
)
from src.core.container.emociograma_handlers import (
    dispatch_emotional_alert,
    get_alert_dashboard_handler,
    get_create_category_handler,
    get_deactivate_category_handler,
    get_get_alert_handler,
    get_get_submission_handler,
    get_list_alerts_handler,
    get_list_categories_handler,
    get_list_my_submissions_handler,
    get_list_team_submissions_handler,
    get_resolve_alert_handler,
    get_submit_emociograma_handler,
    get_update_category_handler,
)
from src.core.container.infrastructure import (
    get_audit,
    get_audit_session,
    get_database,
    get_db_session,
    get_email_service,
    get_identity_provider,
    get_logger,
    get_rate_limit,
    get_token_service,
)
from src.core.container.lgpd_handlers import (
    get_anonymize_user_data_handler,
    get_audit_trail_handler,
    get_confirm_data_deletion_handler,
    get_export_user_data_handler,
    get_request_data_deletion_handler,
)
from src.core.container.repositories import (
    get_session_repository,
    get_user_repository,
)
from src.core.container.user_handlers import (
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_update_user_handler,
)

__all__ = [
    # Infrastructure
    "get_audit",
    "get_audit_session",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_identity_provider",
    "get_logger",
    "get_rate_limit",
    "get_token_service",
    # Repositories
    "get_session_repository",
    "get_user_repository",
    # Auth
    "get_logout_handler",
    "get_refresh_token_handler",
    "get_send_magic_link_handler",
    "get_verify_magic_link_handler",
    # Users
    "get_create_user_handler",
    "get_delete_user_handler",
    "get_get_user_handler",
    "get_list_users_handler",
    "get_update_user_handler",
    # LGPD
    "get_anonymize_user_data_handler",
    "get_audit_trail_handler",
    "get_confirm_data_deletion_handler",
    "get_export_user_data_handler",
    "get_request_data_deletion_handler",
    # Emociograma
    "dispatch_emotional_alert",
    "get_alert_dashboard_handler",
    "get_create_category_handler",
    "get_deactivate_category_handler",
    "get_get_alert_handler",
    "get_get_submission_handler",
    "get_list_alerts_handler",
    "get_list_categories_handler",
    "get_list_my_submissions_handler",
    "get_list_team_submissions_handler",
    "get_resolve_alert_handler",
    "get_submit_emociograma_handler",
    "get_update_category_handler",
]
