"""User domain errors.

Error value constants for user entity operations. Returned inside
``Failure`` or raised as ``ValueError`` from ``__post_init__``.

Usage:
    from src.domain.errors import UserError
    from src.core.result import Failure

    if theme not in SUPPORTED_THEMES:
        return Failure(error=UserError.UNSUPPORTED_THEME)
"""


class UserError:
    """User error constants."""

    INVALID_EMAIL = "Email cannot be empty"
    UNKNOWN_PREFERENCE = "Unknown preference key"
    UNSUPPORTED_THEME = "Theme must be one of: light, dark, system"
    ALREADY_DELETED = "User is already deleted"
