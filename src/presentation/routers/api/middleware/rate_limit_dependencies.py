"""Fixed window rate limit checks for unauthenticated auth endpoints.

Rules:
    auth_magic_link: MAGIC_LINK_RATE_LIMIT per window, keyed by email
        (client IP when no email is available)
    auth_callback: CALLBACK_RATE_LIMIT per window, keyed by client IP

Fail-Open Design:
    The limiter allows requests when Redis is unavailable; this module only
    turns a deny decision into HTTP 429 with Retry-After.
"""

from fastapi import HTTPException, Request, status

from src.core.config import settings
from src.core.result import Success
from src.domain.protocols import RateLimitProtocol
from src.domain.value_objects.rate_limit_rule import RateLimitRule

MAGIC_LINK_RULE = RateLimitRule(
    name="auth_magic_link",
    limit=settings.magic_link_rate_limit,
    window_seconds=settings.magic_link_rate_window_seconds,
)
CALLBACK_RULE = RateLimitRule(
    name="auth_callback",
    limit=settings.callback_rate_limit,
    window_seconds=settings.magic_link_rate_window_seconds,
)


def client_ip(request: Request) -> str:
    """Best-known client address (first X-Forwarded-For hop, else peer)."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


async def enforce_rate_limit(
    rate_limit: RateLimitProtocol,
    *,
    rule: RateLimitRule,
    identifier: str,
) -> None:
    """Count a request against a rule.

    Args:
        rate_limit: Limiter from the container.
        rule: Rule to apply.
        identifier: Email address or client IP.

    Raises:
        HTTPException 429: Limit exceeded (with Retry-After header).
    """
    result = await rate_limit.is_allowed(rule=rule, identifier=identifier)
    if isinstance(result, Success) and not result.value.allowed:
        decision = result.value
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many requests. Please try again later.",
            headers={
                "Retry-After": str(decision.retry_after),
                "X-RateLimit-Limit": str(decision.limit),
                "X-RateLimit-Remaining": "0",
            },
        )
