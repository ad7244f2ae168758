"""Unit tests for emotion category handlers.

Tests cover:
- CreateCategoryHandler: creation, slug conflicts, validation fields
- UpdateCategoryHandler: partial update, rename conflicts, not found
- DeactivateCategoryHandler: deactivation, idempotence, not found

Architecture:
- Unit tests for application handlers (mocked repository)
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.emociograma_commands import (
    CreateCategory,
    DeactivateCategory,
    UpdateCategory,
)
from src.application.commands.handlers.category_handlers import (
    CATEGORY_EXISTS,
    CreateCategoryHandler,
    DeactivateCategoryHandler,
    UpdateCategoryHandler,
)
from src.application.errors import ApplicationErrorCode
from src.core.result import Success
from src.domain.entities import EmociogramaCategory
from src.domain.errors import EmociogramaError


@pytest.fixture
def category():
    return EmociogramaCategory.create(name="Trabalho", display_order=1)


@pytest.fixture
def category_repo(category):
    repo = AsyncMock()
    repo.find_by_id.return_value = category
    repo.exists_by_slug.return_value = False
    return repo


@pytest.mark.unit
class TestCreateCategoryHandler:
    @pytest.mark.asyncio
    async def test_creates_category(self, category_repo, mock_logger):
        handler = CreateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            CreateCategory(name="Ansiedade e Estresse", display_order=4, icon="😰")
        )

        assert isinstance(result, Success)
        assert result.value.slug == "ansiedade_e_estresse"
        assert result.value.is_active is True
        category_repo.exists_by_slug.assert_awaited_once_with("ansiedade_e_estresse")
        category_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts(self, category_repo, mock_logger):
        category_repo.exists_by_slug.return_value = True
        handler = CreateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(CreateCategory(name="trabalho"))

        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == CATEGORY_EXISTS
        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "display_order", "field"),
        [("x", 0, "name"), ("Trabalho", -1, "display_order")],
    )
    async def test_invalid_input_names_field(
        self, category_repo, mock_logger, name, display_order, field
    ):
        handler = CreateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            CreateCategory(name=name, display_order=display_order)
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.field == field
        category_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestUpdateCategoryHandler:
    @pytest.mark.asyncio
    async def test_partial_update(self, category, category_repo, mock_logger):
        handler = UpdateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            UpdateCategory(category_id=category.id, description="Rotina e prazos")
        )

        assert result.value.description == "Rotina e prazos"
        assert result.value.name == "Trabalho"
        category_repo.exists_by_slug.assert_not_awaited()
        category_repo.update.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_rename_checks_other_categories(
        self, category, category_repo, mock_logger
    ):
        handler = UpdateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            UpdateCategory(category_id=category.id, name="Carreira")
        )

        assert result.value.slug == "carreira"
        category_repo.exists_by_slug.assert_awaited_once_with(
            "carreira", exclude_id=category.id
        )

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(
        self, category, category_repo, mock_logger
    ):
        category_repo.exists_by_slug.return_value = True
        handler = UpdateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            UpdateCategory(category_id=category.id, name="Saúde")
        )

        assert result.error.code == ApplicationErrorCode.CONFLICT
        category_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_display_order(self, category, category_repo, mock_logger):
        handler = UpdateCategoryHandler(category_repo=category_repo, logger=mock_logger)

        result = await handler.handle(
            UpdateCategory(category_id=category.id, display_order=-3)
        )

        assert result.error.message == EmociogramaError.INVALID_DISPLAY_ORDER
        assert result.error.field == "display_order"

    @pytest.mark.asyncio
    async def test_not_found(self, category_repo, mock_logger):
        category_repo.find_by_id.return_value = None
        handler = UpdateCategoryHandler(category_repo=category_repo, logger=mock_logger)
        category_id = uuid7()

        result = await handler.handle(
            UpdateCategory(category_id=category_id, name="Novo")
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.details == {"category_id": str(category_id)}


@pytest.mark.unit
class TestDeactivateCategoryHandler:
    @pytest.mark.asyncio
    async def test_deactivates(self, category, category_repo, mock_logger):
        handler = DeactivateCategoryHandler(
            category_repo=category_repo, logger=mock_logger
        )

        result = await handler.handle(DeactivateCategory(category_id=category.id))

        assert result.value.is_active is False
        category_repo.update.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_already_inactive_is_noop(self, category, category_repo, mock_logger):
        category.deactivate()
        handler = DeactivateCategoryHandler(
            category_repo=category_repo, logger=mock_logger
        )

        result = await handler.handle(DeactivateCategory(category_id=category.id))

        assert result.value.is_active is False
        category_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_found(self, category_repo, mock_logger):
        category_repo.find_by_id.return_value = None
        handler = DeactivateCategoryHandler(
            category_repo=category_repo, logger=mock_logger
        )

        result = await handler.handle(DeactivateCategory(category_id=uuid7()))

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
