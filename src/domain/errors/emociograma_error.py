"""Emociograma domain errors.

Error value constants for submission, alert and category entities.

Architecture:
    - Construction errors are raised as ``ValueError`` from ``__post_init__``
      (invalid input that should have been rejected at the edge)
    - State transition errors are returned as ``Failure(error=...)``
"""


class EmociogramaError:
    """Submission and alert error constants.

    Error Categories:
        - Submission validation: INVALID_EMOTION_LEVEL, COMMENT_TOO_LONG
        - Alert validation: MISSING_RESOLVER, NO_NOTIFIED_USERS
        - Alert state: ALERT_ALREADY_RESOLVED
        - Category validation: INVALID_CATEGORY_NAME, INVALID_DISPLAY_ORDER
    """

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    INVALID_EMOTION_LEVEL = "Emotion level must be an integer between 1 and 10"
    COMMENT_TOO_LONG = "Comment cannot exceed 1000 characters"
    MISSING_ORGANIZATION = "Organization ID is required"

    # -------------------------------------------------------------------------
    # Alert
    # -------------------------------------------------------------------------

    EMPTY_ALERT_MESSAGE = "Alert message is required"
    MISSING_RESOLVER = "Resolver user ID is required"
    ALERT_ALREADY_RESOLVED = "Alert is already resolved"
    NO_NOTIFIED_USERS = "At least one user must be notified"

    # -------------------------------------------------------------------------
    # Category
    # -------------------------------------------------------------------------

    INVALID_CATEGORY_NAME = "Category name must be between 2 and 50 characters"
    INVALID_DISPLAY_ORDER = "Display order must be a non-negative integer"
    CATEGORY_NOT_AVAILABLE = "Category does not exist or is inactive"
