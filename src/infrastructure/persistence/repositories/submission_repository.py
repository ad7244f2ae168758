"""SubmissionRepository - SQLAlchemy implementation of SubmissionRepository.

Adapter for hexagonal architecture.
Maps between EmociogramaSubmission entities and the submissions table.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.emociograma_submission import EmociogramaSubmission
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.emociograma_submission import (
    EmociogramaSubmission as SubmissionModel,
)


class SubmissionRepository:
    """SQLAlchemy implementation of SubmissionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, submission: EmociogramaSubmission) -> None:
        """Persist a new submission."""
        self.session.add(self._to_model(submission))
        await self.session.commit()

    async def find_by_id(
        self, submission_id: UUID, organization_id: UUID
    ) -> EmociogramaSubmission | None:
        """Find a submission inside an organization."""
        result = await self.session.execute(
            select(SubmissionModel).where(
                SubmissionModel.id == submission_id,
                SubmissionModel.organization_id == organization_id,
            )
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_user(
        self,
        user_id: UUID,
        organization_id: UUID,
        *,
        limit: int,
        offset: int = 0,
    ) -> tuple[list[EmociogramaSubmission], int]:
        """List a user's submissions, newest first.

        Returns:
            Tuple of (submissions in page, total).
        """
        conditions = (
            SubmissionModel.user_id == user_id,
            SubmissionModel.organization_id == organization_id,
        )
        count_stmt = select(func.count()).select_from(SubmissionModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        result = await self.session.execute(
            select(SubmissionModel)
            .where(*conditions)
            .order_by(SubmissionModel.submitted_at.desc(), SubmissionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def find_by_organization(
        self,
        organization_id: UUID,
        *,
        limit: int,
        offset: int = 0,
        department: str | None = None,
        team: str | None = None,
    ) -> tuple[list[EmociogramaSubmission], int]:
        """List an organization's submissions, newest first.

        Returns:
            Tuple of (submissions in page, total).
        """
        conditions = [SubmissionModel.organization_id == organization_id]
        if department is not None:
            conditions.append(SubmissionModel.department == department)
        if team is not None:
            conditions.append(SubmissionModel.team == team)

        count_stmt = select(func.count()).select_from(SubmissionModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        result = await self.session.execute(
            select(SubmissionModel)
            .where(*conditions)
            .order_by(SubmissionModel.submitted_at.desc(), SubmissionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def anonymize_by_user(self, user_id: UUID, organization_id: UUID) -> int:
        """Detach all of a user's submissions from the user.

        Returns:
            Number of submissions anonymized.
        """
        result = await self.session.execute(
            update(SubmissionModel)
            .where(
                SubmissionModel.user_id == user_id,
                SubmissionModel.organization_id == organization_id,
            )
            .values(
                user_id=None,
                is_anonymous=True,
                comment=None,
                comment_flagged=False,
                updated_at=datetime.now(UTC),
            )
        )
        await self.session.commit()
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def delete_by_user(self, user_id: UUID, organization_id: UUID) -> int:
        """Hard delete all of a user's submissions (alerts cascade).

        Returns:
            Number of submissions deleted.
        """
        result = await self.session.execute(
            delete(SubmissionModel).where(
                SubmissionModel.user_id == user_id,
                SubmissionModel.organization_id == organization_id,
            )
        )
        await self.session.commit()
        return result.rowcount or 0  # type: ignore[attr-defined]

    def _to_domain(self, model: SubmissionModel) -> EmociogramaSubmission:
        return EmociogramaSubmission(
            id=model.id,
            organization_id=model.organization_id,
            user_id=model.user_id,
            emotion_level=model.emotion_level,
            emotion_emoji=model.emotion_emoji,
            category_id=model.category_id,
            is_anonymous=model.is_anonymous,
            comment=model.comment,
            comment_flagged=model.comment_flagged,
            submitted_at=ensure_utc(model.submitted_at),  # type: ignore[arg-type]
            department=model.department,
            team=model.team,
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, submission: EmociogramaSubmission) -> SubmissionModel:
        return SubmissionModel(
            id=submission.id,
            organization_id=submission.organization_id,
            user_id=submission.user_id,
            emotion_level=submission.emotion_level,
            emotion_emoji=submission.emotion_emoji,
            category_id=submission.category_id,
            is_anonymous=submission.is_anonymous,
            comment=submission.comment,
            comment_flagged=submission.comment_flagged,
            submitted_at=submission.submitted_at,
            department=submission.department,
            team=submission.team,
            created_at=submission.created_at,
            updated_at=submission.updated_at,
        )
