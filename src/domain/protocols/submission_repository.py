"""SubmissionRepository protocol for emociograma submissions.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.emociograma_submission import EmociogramaSubmission


class SubmissionRepository(Protocol):
    """Emociograma submission repository protocol (port).

    All queries are scoped to an organization.
    """

    async def save(self, submission: EmociogramaSubmission) -> None:
        """Persist a new submission.

        Args:
            submission: Submission entity.
        """
        ...

    async def find_by_id(
        self, submission_id: UUID, organization_id: UUID
    ) -> EmociogramaSubmission | None:
        """Find a submission inside an organization.

        Args:
            submission_id: Submission identifier.
            organization_id: Organization scope.

        Returns:
            Submission if found, None otherwise.
        """
        ...

    async def find_by_user(
        self,
        user_id: UUID,
        organization_id: UUID,
        *,
        limit: int,
        offset: int = 0,
    ) -> tuple[list[EmociogramaSubmission], int]:
        """List a user's submissions, newest first.

        Args:
            user_id: Author.
            organization_id: Organization scope.
            limit: Page size.
            offset: Rows to skip.

        Returns:
            Tuple of (submissions in page, total submissions of the user).
        """
        ...

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

        Args:
            organization_id: Organization scope.
            limit: Page size.
            offset: Rows to skip.
            department: Only this department (exact match).
            team: Only this team (exact match).

        Returns:
            Tuple of (submissions in page, total matching submissions).
        """
        ...

    async def anonymize_by_user(self, user_id: UUID, organization_id: UUID) -> int:
        """Detach every submission of a user from the user (LGPD Art. 18, II).

        Drops ``user_id`` and ``comment``; keeps level, emoji, category and
        timestamps.

        Args:
            user_id: Author.
            organization_id: Organization scope.

        Returns:
            Number of submissions anonymized.
        """
        ...

    async def delete_by_user(self, user_id: UUID, organization_id: UUID) -> int:
        """Hard delete every submission of a user (LGPD Art. 18, VI).

        Alerts referencing the submissions are deleted by cascade.

        Args:
            user_id: Author.
            organization_id: Organization scope.

        Returns:
            Number of submissions deleted.
        """
        ...
