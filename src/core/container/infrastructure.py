"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL via asyncpg, SQLite in tests)
- Token generation (JWT)
- Email (Resend, or stub when no API key is configured)
- Identity provider (Supabase Auth)
- Rate limiting (Redis fixed window)
- Logging (structlog console/JSON)

Request-scoped dependencies:
- Database session (business transaction)
- Audit session and adapter (separate session, commits immediately)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        AuditProtocol,
        EmailProtocol,
        IdentityProviderProtocol,
        LoggerProtocol,
        RateLimitProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_audit_session() -> AsyncGenerator[AsyncSession, None]:
    """Get audit session (request-scoped, independent lifecycle).

    Separate from get_db_session() so audit entries are committed on their
    own and survive a rollback of the business transaction (LGPD
    accountability).

    Yields:
        Database session for audit operations only.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_audit(
    audit_session: AsyncSession = Depends(get_audit_session),
) -> "AuditProtocol":
    """Get audit trail adapter (request-scoped with separate session).

    Args:
        audit_session: Independent database session for audit operations.

    Returns:
        Audit adapter implementing AuditProtocol.
    """
    from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

    return PostgresAuditAdapter(session=audit_session, logger=get_logger())


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService (HS256) with lifetimes from settings
    (JWT_ACCESS_EXPIRES_IN, JWT_REFRESH_EXPIRES_IN).

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        access_expires_in=settings.jwt_access_expires_in,
        refresh_expires_in=settings.jwt_refresh_expires_in,
    )


# ============================================================================
# External Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Container owns factory logic - decides which adapter to use:
        - RESEND_API_KEY set: ResendEmailService (real delivery)
        - otherwise: StubEmailService (logs only)

    Returns:
        Email service implementing EmailProtocol.
    """
    from src.infrastructure.email import ResendEmailService, StubEmailService

    if settings.email_delivery_enabled and settings.resend_api_key:
        return ResendEmailService(
            api_key=settings.resend_api_key,
            sender=settings.email_from,
        )
    return StubEmailService(logger=get_logger())


@lru_cache()
def get_identity_provider() -> "IdentityProviderProtocol":
    """Get identity provider singleton (app-scoped).

    Returns:
        SupabaseAuthClient implementing IdentityProviderProtocol.
    """
    from src.infrastructure.providers.supabase import SupabaseAuthClient

    return SupabaseAuthClient(
        base_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        service_role_key=settings.supabase_service_role_key,
        timeout=settings.supabase_timeout_seconds,
    )


# ============================================================================
# Rate Limiting (Application-Scoped)
# ============================================================================


@lru_cache()
def get_rate_limit() -> "RateLimitProtocol":
    """Get rate limiter singleton (app-scoped).

    Fail-Open Design:
        Rate limit checks return allowed=True on Redis failures. Rate
        limiting should never cause denial of service.

    Returns:
        Rate limiter implementing RateLimitProtocol.
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.rate_limit import RedisFixedWindowLimiter

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=20,
        decode_responses=True,
        socket_connect_timeout=2,
        socket_timeout=2,
        retry_on_timeout=False,
    )
    return RedisFixedWindowLimiter(
        redis_client=Redis(connection_pool=pool),
        logger=get_logger(),
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON, one event per line)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
