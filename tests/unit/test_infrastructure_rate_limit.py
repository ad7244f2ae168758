"""Unit tests for RedisFixedWindowLimiter.

Tests cover:
- Allowed and denied decisions from the pipeline counters
- TTL fallback when the key has no expiry
- Fail-open on Redis errors
- Disabled rules

Architecture:
- Redis client mocked (MagicMock pipeline with AsyncMock execute)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.result import Success
from src.domain.value_objects import RateLimitRule
from src.infrastructure.rate_limit.redis_fixed_window import RedisFixedWindowLimiter

RULE = RateLimitRule(name="auth_magic_link", limit=3, window_seconds=60)


def make_redis(execute_result=None, execute_error=None):
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=execute_result, side_effect=execute_error)
    redis = MagicMock()
    redis.pipeline.return_value = pipe
    return redis, pipe


@pytest.mark.unit
class TestRedisFixedWindowLimiter:
    """Test rate limit decisions."""

    @pytest.mark.asyncio
    async def test_first_request_allowed(self, mock_logger):
        redis, pipe = make_redis(execute_result=[1, True, 60])
        limiter = RedisFixedWindowLimiter(redis_client=redis, logger=mock_logger)

        result = await limiter.is_allowed(rule=RULE, identifier="Ana@Example.com")

        assert isinstance(result, Success)
        assert result.value.allowed is True
        assert result.value.remaining == 2
        assert result.value.limit == 3
        key = "rate_limit:auth_magic_link:ana@example.com"
        pipe.incr.assert_called_once_with(key)
        pipe.expire.assert_called_once_with(key, 60, nx=True)
        pipe.ttl.assert_called_once_with(key)

    @pytest.mark.asyncio
    async def test_over_limit_denied(self, mock_logger):
        redis, _ = make_redis(execute_result=[4, False, 42])
        limiter = RedisFixedWindowLimiter(redis_client=redis, logger=mock_logger)

        result = await limiter.is_allowed(rule=RULE, identifier="ana@example.com")

        assert result.value.allowed is False
        assert result.value.retry_after == 42
        assert result.value.remaining == 0

    @pytest.mark.asyncio
    async def test_missing_ttl_waits_full_window(self, mock_logger):
        redis, _ = make_redis(execute_result=[9, False, -1])
        limiter = RedisFixedWindowLimiter(redis_client=redis, logger=mock_logger)

        result = await limiter.is_allowed(rule=RULE, identifier="ana@example.com")

        assert result.value.retry_after == 60

    @pytest.mark.asyncio
    async def test_redis_failure_fails_open(self, mock_logger):
        redis, _ = make_redis(execute_error=RedisConnectionError("down"))
        limiter = RedisFixedWindowLimiter(redis_client=redis, logger=mock_logger)

        result = await limiter.is_allowed(rule=RULE, identifier="ana@example.com")

        assert result.value.allowed is True
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_disabled_rule_skips_redis(self, mock_logger):
        redis, _ = make_redis()
        limiter = RedisFixedWindowLimiter(redis_client=redis, logger=mock_logger)
        rule = RateLimitRule(name="off", limit=1, window_seconds=60, enabled=False)

        result = await limiter.is_allowed(rule=rule, identifier="x")

        assert result.value.allowed is True
        redis.pipeline.assert_not_called()
