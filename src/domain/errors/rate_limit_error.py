"""Rate limit error type.

Only returned for real infrastructure faults. Rate limiting is fail-open:
when Redis is unreachable the limiter allows the request.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitError(DomainError):
    """Rate limiter failure (not a "limit exceeded" decision)."""
