"""CategoryRepository - SQLAlchemy implementation of CategoryRepository.

Adapter for hexagonal architecture.
Maps between EmociogramaCategory entities and the categories table.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.emociograma_category import EmociogramaCategory
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.emociograma_category import (
    EmociogramaCategory as CategoryModel,
)


class CategoryRepository:
    """SQLAlchemy implementation of CategoryRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, category: EmociogramaCategory) -> None:
        """Persist a new category.

        Raises:
            IntegrityError: If the slug is already taken.
        """
        self.session.add(self._to_model(category))
        await self.session.commit()

    async def update(self, category: EmociogramaCategory) -> None:
        """Persist changes to an existing category.

        Raises:
            NoResultFound: If the category doesn't exist.
        """
        result = await self.session.execute(
            select(CategoryModel).where(CategoryModel.id == category.id)
        )
        model = result.scalar_one()
        model.name = category.name
        model.slug = category.slug
        model.description = category.description
        model.icon = category.icon
        model.display_order = category.display_order
        model.is_active = category.is_active
        model.updated_at = category.updated_at
        await self.session.commit()

    async def find_by_id(self, category_id: UUID) -> EmociogramaCategory | None:
        result = await self.session.execute(
            select(CategoryModel).where(CategoryModel.id == category_id)
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_all(
        self, *, include_inactive: bool = False
    ) -> list[EmociogramaCategory]:
        stmt = select(CategoryModel)
        if not include_inactive:
            stmt = stmt.where(CategoryModel.is_active.is_(True))
        result = await self.session.execute(
            stmt.order_by(CategoryModel.display_order, CategoryModel.name)
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def exists_by_slug(
        self, slug: str, *, exclude_id: UUID | None = None
    ) -> bool:
        stmt = select(CategoryModel.id).where(CategoryModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(CategoryModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    def _to_domain(self, model: CategoryModel) -> EmociogramaCategory:
        return EmociogramaCategory(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            icon=model.icon,
            display_order=model.display_order,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, category: EmociogramaCategory) -> CategoryModel:
        return CategoryModel(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            icon=category.icon,
            display_order=category.display_order,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
