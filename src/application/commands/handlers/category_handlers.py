"""Emotion category handlers (admin).

Slugs are unique across active and inactive categories, so a deactivated
category still blocks its name.
"""

from src.application.commands.emociograma_commands import (
    CreateCategory,
    DeactivateCategory,
    UpdateCategory,
)
from src.application.dtos import CategoryResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.validation import validation_error
from src.core.result import Failure, Result, Success
from src.domain.entities import EmociogramaCategory
from src.domain.errors import EmociogramaError
from src.domain.protocols import CategoryRepository, LoggerProtocol

CATEGORY_EXISTS = "A category with this name already exists"

_FIELDS = {
    EmociogramaError.INVALID_CATEGORY_NAME: "name",
    EmociogramaError.INVALID_DISPLAY_ORDER: "display_order",
}


def _invalid(error: ValueError) -> ApplicationError:
    message = str(error)
    return validation_error(message, _FIELDS.get(message, "name"))


def _name_taken() -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message=CATEGORY_EXISTS,
        details={"field": "name"},
    )


class CreateCategoryHandler:
    """Handler for CreateCategory command."""

    def __init__(
        self, category_repo: CategoryRepository, logger: LoggerProtocol
    ) -> None:
        self._category_repo = category_repo
        self._logger = logger

    async def handle(
        self, cmd: CreateCategory
    ) -> Result[CategoryResult, ApplicationError]:
        """Handle CreateCategory command.

        Returns:
            Success(CategoryResult) for the new category.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED or CONFLICT.
        """
        try:
            category = EmociogramaCategory.create(
                name=cmd.name,
                display_order=cmd.display_order,
                description=cmd.description,
                icon=cmd.icon,
            )
        except ValueError as e:
            return Failure(error=_invalid(e))

        if await self._category_repo.exists_by_slug(category.slug):
            return Failure(error=_name_taken())

        await self._category_repo.save(category)
        self._logger.info(
            "Category created", category_id=str(category.id), slug=category.slug
        )
        return Success(value=CategoryResult.from_entity(category))


class UpdateCategoryHandler:
    """Handler for UpdateCategory command."""

    def __init__(
        self, category_repo: CategoryRepository, logger: LoggerProtocol
    ) -> None:
        self._category_repo = category_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateCategory
    ) -> Result[CategoryResult, ApplicationError]:
        """Handle UpdateCategory command.

        Returns:
            Success(CategoryResult) with the updated category.
            Failure(ApplicationError): NOT_FOUND, COMMAND_VALIDATION_FAILED or
                CONFLICT.
        """
        category = await self._category_repo.find_by_id(cmd.category_id)
        if category is None:
            return Failure(
                error=ApplicationError.not_found("Category", cmd.category_id)
            )

        try:
            category.update_details(
                name=cmd.name,
                description=cmd.description,
                icon=cmd.icon,
                display_order=cmd.display_order,
            )
        except ValueError as e:
            return Failure(error=_invalid(e))

        if cmd.name is not None and await self._category_repo.exists_by_slug(
            category.slug, exclude_id=category.id
        ):
            return Failure(error=_name_taken())

        await self._category_repo.update(category)
        self._logger.info("Category updated", category_id=str(category.id))
        return Success(value=CategoryResult.from_entity(category))


class DeactivateCategoryHandler:
    """Handler for DeactivateCategory command."""

    def __init__(
        self, category_repo: CategoryRepository, logger: LoggerProtocol
    ) -> None:
        self._category_repo = category_repo
        self._logger = logger

    async def handle(
        self, cmd: DeactivateCategory
    ) -> Result[CategoryResult, ApplicationError]:
        """Deactivate a category. Deactivating twice succeeds.

        Returns:
            Success(CategoryResult) with ``is_active`` False.
            Failure(ApplicationError): NOT_FOUND.
        """
        category = await self._category_repo.find_by_id(cmd.category_id)
        if category is None:
            return Failure(
                error=ApplicationError.not_found("Category", cmd.category_id)
            )

        if category.is_active:
            category.deactivate()
            await self._category_repo.update(category)
            self._logger.info("Category deactivated", category_id=str(category.id))
        return Success(value=CategoryResult.from_entity(category))
