"""CategoryRepository protocol for emociograma categories.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.emociograma_category import EmociogramaCategory


class CategoryRepository(Protocol):
    """Emociograma category repository protocol (port).

    Categories are global (not scoped to an organization).
    """

    async def save(self, category: EmociogramaCategory) -> None:
        """Persist a new category.

        Args:
            category: Category entity.
        """
        ...

    async def update(self, category: EmociogramaCategory) -> None:
        """Persist changes to an existing category.

        Args:
            category: Category entity with updated fields.
        """
        ...

    async def find_by_id(self, category_id: UUID) -> EmociogramaCategory | None:
        """Find a category, active or not.

        Args:
            category_id: Category identifier.

        Returns:
            Category if found, None otherwise.
        """
        ...

    async def find_all(
        self, *, include_inactive: bool = False
    ) -> list[EmociogramaCategory]:
        """List categories by display order, then name.

        Args:
            include_inactive: Include deactivated categories.

        Returns:
            Categories (may be empty).
        """
        ...

    async def exists_by_slug(
        self, slug: str, *, exclude_id: UUID | None = None
    ) -> bool:
        """Check whether another category already uses a slug.

        Args:
            slug: Slug to look up.
            exclude_id: Category ignored by the check (the one being renamed).

        Returns:
            True if the slug is taken.
        """
        ...
