"""Fixed window rate limiter backed by Redis.

Each (rule, identifier) pair owns one counter key. The first request of a
window creates the key with the window as TTL; later requests increment it.
When the counter exceeds the rule limit the request is denied and the key TTL
becomes ``retry_after``.

Fail-open policy:
    Redis errors never deny traffic. ``is_allowed`` logs the failure and
    returns an allowed decision.

Architecture:
    Domain Protocol <- RedisFixedWindowLimiter -> redis.asyncio -> Redis
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from src.core.result import Result, Success
from src.domain.errors import RateLimitError
from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols.logger_protocol import LoggerProtocol

KEY_PREFIX = "rate_limit"


class RedisFixedWindowLimiter:
    """Rate limiter implementing RateLimitProtocol.

    Args:
        redis_client: Async Redis client.
        logger: Structured logger.
    """

    def __init__(self, *, redis_client: Redis, logger: LoggerProtocol) -> None:
        self._redis = redis_client
        self._logger = logger

    async def is_allowed(
        self, *, rule: RateLimitRule, identifier: str
    ) -> Result[RateLimitResult, RateLimitError]:
        """Count one request against the window and decide.

        Args:
            rule: Limit and window to apply.
            identifier: Email address or client IP.

        Returns:
            Success(RateLimitResult). Allowed on Redis failure.
        """
        if not rule.enabled:
            return Success(
                value=RateLimitResult(
                    allowed=True, remaining=rule.limit, limit=rule.limit
                )
            )

        key = f"{KEY_PREFIX}:{rule.key_for(identifier)}"

        try:
            pipe = self._redis.pipeline(transaction=True)
            pipe.incr(key)
            pipe.expire(key, rule.window_seconds, nx=True)
            pipe.ttl(key)
            count, _, ttl = await pipe.execute()
        except (RedisError, OSError) as e:
            self._logger.warning(
                "Rate limit check failed, allowing request",
                rule=rule.name,
                error=str(e),
            )
            return Success(
                value=RateLimitResult(
                    allowed=True, remaining=rule.limit, limit=rule.limit
                )
            )

        count = int(count)
        if count > rule.limit:
            # A key without TTL (-1) or already gone (-2) waits a full window.
            retry_after = int(ttl) if int(ttl) > 0 else rule.window_seconds
            self._logger.info(
                "Rate limit exceeded",
                rule=rule.name,
                retry_after=retry_after,
            )
            return Success(
                value=RateLimitResult(
                    allowed=False,
                    retry_after=retry_after,
                    remaining=0,
                    limit=rule.limit,
                )
            )

        return Success(
            value=RateLimitResult(
                allowed=True,
                remaining=rule.limit - count,
                limit=rule.limit,
            )
        )
