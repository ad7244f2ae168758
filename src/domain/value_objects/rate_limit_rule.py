"""Rate limit rule and decision value objects.

Fixed window limiting: at most ``limit`` requests per ``window_seconds`` for
one key. Keys are built by the caller (e.g. ``magic-link:ana@example.com``).

Usage:
    from src.domain.value_objects import RateLimitRule

    MAGIC_LINK_RULE = RateLimitRule(name="magic-link", limit=3, window_seconds=60)
    key = MAGIC_LINK_RULE.key_for("ana@example.com")
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitRule:
    """Rate limit rule configuration (value object).

    Attributes:
        name: Rule identifier, used as key prefix.
        limit: Maximum requests per window.
        window_seconds: Window length in seconds.
        enabled: Whether the rule is enforced.
    """

    name: str
    limit: int
    window_seconds: int
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate rule parameters.

        Raises:
            ValueError: If limit or window is not positive.
        """
        if self.limit <= 0:
            raise ValueError("limit must be positive")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

    def key_for(self, identifier: str) -> str:
        """Build the storage key for an identifier.

        Args:
            identifier: Email address, IP address, or user id.

        Returns:
            str: ``{name}:{identifier}`` with the identifier lowercased.
        """
        return f"{self.name}:{identifier.strip().lower()}"


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Result of a rate limit check.

    Attributes:
        allowed: Whether the request is allowed.
        retry_after: Seconds until the window resets (0 if allowed).
        remaining: Requests left in the current window.
        limit: Maximum requests per window.
    """

    allowed: bool
    retry_after: int = 0
    remaining: int = 0
    limit: int = 0
