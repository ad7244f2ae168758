"""Rate limiting infrastructure (Redis fixed window)."""

from src.infrastructure.rate_limit.redis_fixed_window import RedisFixedWindowLimiter

__all__ = ["RedisFixedWindowLimiter"]
