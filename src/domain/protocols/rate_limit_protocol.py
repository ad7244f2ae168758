"""Rate Limit protocol (port) for fixed window rate limiting.

Usage:
    from src.domain.protocols import RateLimitProtocol

    result = await rate_limit.is_allowed(rule=MAGIC_LINK_RULE, identifier=email)
    match result:
        case Success(value=decision) if not decision.allowed:
            raise HTTPException(
                status_code=429,
                headers={"Retry-After": str(decision.retry_after)},
            )
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import RateLimitError
from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule


class RateLimitProtocol(Protocol):
    """Protocol for rate limiting systems.

    Fail-Open Design:
        On infrastructure errors (Redis down) implementations return
        Success(RateLimitResult(allowed=True)). Failure is reserved for
        programming errors and should be rare.
    """

    async def is_allowed(
        self, *, rule: RateLimitRule, identifier: str
    ) -> Result[RateLimitResult, RateLimitError]:
        """Count one request and decide whether it is allowed.

        Args:
            rule: Limit and window to apply.
            identifier: Email address or client IP.

        Returns:
            Success(RateLimitResult) with the decision.
        """
        ...
