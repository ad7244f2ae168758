"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.email import Email
from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule

__all__ = [
    "Email",
    "RateLimitResult",
    "RateLimitRule",
]
