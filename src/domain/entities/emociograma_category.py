"""Emociograma category domain entity.

Optional label an employee attaches to a check-in ("Trabalho", "Saúde").
Categories are global, managed by admins, and never deleted: deactivated
categories stay referenced by old submissions but cannot be chosen again.
"""

import re
import unicodedata
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors.emociograma_error import EmociogramaError

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 50
CATEGORY_ICON_MAX_LENGTH = 50

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Build the lowercase ASCII slug of a category name.

    Examples:
        >>> slugify("Ansiedade e Estresse")
        'ansiedade_e_estresse'
        >>> slugify("Motivação")
        'motivacao'
    """
    decomposed = unicodedata.normalize("NFD", name.strip().lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _NON_ALNUM.sub("_", ascii_only).strip("_")


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _check_name(name: str) -> str:
    name = name.strip()
    if not CATEGORY_NAME_MIN_LENGTH <= len(name) <= CATEGORY_NAME_MAX_LENGTH:
        raise ValueError(EmociogramaError.INVALID_CATEGORY_NAME)
    return name


def _check_display_order(display_order: int) -> int:
    if isinstance(display_order, bool) or not isinstance(display_order, int):
        raise ValueError(EmociogramaError.INVALID_DISPLAY_ORDER)
    if display_order < 0:
        raise ValueError(EmociogramaError.INVALID_DISPLAY_ORDER)
    return display_order


@dataclass(slots=True, kw_only=True)
class EmociogramaCategory:
    """Emotion category.

    Attributes:
        id: Unique category identifier.
        name: Display name (2-50 characters, trimmed).
        slug: Unique key derived from the name.
        description: Optional description.
        icon: Optional icon name or emoji.
        display_order: Position in pickers (>= 0, ascending).
        is_active: Whether new submissions may use the category.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    slug: str
    display_order: int
    description: str | None = None
    icon: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate name and display order.

        Raises:
            ValueError: If the name length or display order is invalid.
        """
        _check_name(self.name)
        _check_display_order(self.display_order)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        display_order: int,
        description: str | None = None,
        icon: str | None = None,
    ) -> "EmociogramaCategory":
        """Create an active category.

        Raises:
            ValueError: If the name length or display order is invalid.
        """
        name = _check_name(name)
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            name=name,
            slug=slugify(name),
            display_order=display_order,
            description=_optional(description),
            icon=_optional(icon),
            created_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        icon: str | None = None,
        display_order: int | None = None,
    ) -> None:
        """Apply a partial update. ``None`` leaves a field unchanged.

        An empty description or icon clears it. Renaming regenerates the
        slug. Nothing changes when any value is invalid.

        Raises:
            ValueError: If the new name or display order is invalid.
        """
        new_name = _check_name(name) if name is not None else None
        if display_order is not None:
            _check_display_order(display_order)

        if new_name is not None:
            self.name = new_name
            self.slug = slugify(new_name)
        if description is not None:
            self.description = _optional(description)
        if icon is not None:
            self.icon = _optional(icon)
        if display_order is not None:
            self.display_order = display_order
        self.updated_at = datetime.now(UTC)

    def activate(self) -> None:
        """Make the category selectable again."""
        self.is_active = True
        self.updated_at = datetime.now(UTC)

    def deactivate(self) -> None:
        """Hide the category from new submissions. Idempotent."""
        self.is_active = False
        self.updated_at = datetime.now(UTC)
