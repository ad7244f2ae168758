"""Field rules shared by user handlers.

Request schemas enforce the same limits; handlers re-check them so commands
built outside HTTP (jobs, tests) cannot bypass them.
"""

from src.application.errors import ApplicationError

FIRST_NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500
RESOLUTION_NOTES_MAX_LENGTH = 500


def validation_error(message: str, field: str) -> ApplicationError:
    """Build a COMMAND_VALIDATION_FAILED error for one field."""
    return ApplicationError.invalid(message, field)


def check_profile_fields(
    *,
    first_name: str | None,
    last_name: str | None,
    bio: str | None,
) -> ApplicationError | None:
    """Validate profile field lengths. ``None`` fields are skipped.

    Returns:
        The first violation, or None when every field is valid.
    """
    if first_name is not None and not (
        FIRST_NAME_MIN_LENGTH <= len(first_name.strip()) <= NAME_MAX_LENGTH
    ):
        return validation_error(
            f"first_name must be between {FIRST_NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters",
            "first_name",
        )
    if last_name is not None and len(last_name.strip()) > NAME_MAX_LENGTH:
        return validation_error(
            f"last_name must be at most {NAME_MAX_LENGTH} characters", "last_name"
        )
    if bio is not None and len(bio) > BIO_MAX_LENGTH:
        return validation_error(f"bio must be at most {BIO_MAX_LENGTH} characters", "bio")
    return None


MAX_PAGE_SIZE = 100


def check_pagination(
    page: int, limit: int, *, max_limit: int = MAX_PAGE_SIZE
) -> ApplicationError | None:
    """Validate 1-based page and page size."""
    if page < 1:
        return validation_error("page must be at least 1", "page")
    if not 1 <= limit <= max_limit:
        return validation_error(f"limit must be between 1 and {max_limit}", "limit")
    return None


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` rows."""
    return (total + limit - 1) // limit if total else 0
