"""Integration tests for PostgresAuditAdapter.

Tests cover:
- Recording entries with full context
- Querying by user, organization and action, newest first, with paging
- Retention purge by cutoff date
"""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import update
from uuid_extensions import uuid7

from src.core.result import Success
from src.domain.enums import AuditAction
from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from src.infrastructure.persistence.models.audit_log import AuditLog


@pytest.mark.integration
class TestAuditRecord:
    @pytest.mark.asyncio
    async def test_record_persists_entry(self, test_database, mock_logger):
        user_id = uuid7()
        organization_id = uuid7()

        async with test_database.get_session() as session:
            result = await PostgresAuditAdapter(session=session, logger=mock_logger).record(
                action=AuditAction.USER_DATA_EXPORTED,
                user_id=user_id,
                organization_id=organization_id,
                resource_type="user",
                ip_address="203.0.113.9",
                user_agent="pytest",
                context={"submission_count": 4},
            )

        async with test_database.get_session() as session:
            page = await PostgresAuditAdapter(session=session).query(user_id=user_id)

        assert isinstance(result, Success)
        assert isinstance(page, Success)
        assert page.value.total == 1
        entry = page.value.entries[0]
        assert entry.action == "user_data_exported"
        assert entry.organization_id == organization_id
        assert entry.context == {"submission_count": 4}
        assert entry.is_lgpd_action()
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_non_lgpd_action_not_logged(self, test_database, mock_logger):
        async with test_database.get_session() as session:
            await PostgresAuditAdapter(session=session, logger=mock_logger).record(
                action=AuditAction.USER_LOGIN, user_id=uuid7()
            )

        mock_logger.warning.assert_not_called()


@pytest.mark.integration
class TestAuditQuery:
    @pytest.mark.asyncio
    async def test_filters_and_paging(self, test_database):
        user_id = uuid7()
        organization_id = uuid7()
        actions = [
            AuditAction.USER_LOGIN,
            AuditAction.USER_DATA_EXPORTED,
            AuditAction.USER_LOGOUT,
            AuditAction.USER_LOGIN,
        ]
        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            for action in actions:
                await adapter.record(
                    action=action, user_id=user_id, organization_id=organization_id
                )
            await adapter.record(action=AuditAction.USER_LOGIN, user_id=uuid7())

        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            logins = await adapter.query(user_id=user_id, action=AuditAction.USER_LOGIN)
            first_page = await adapter.query(user_id=user_id, limit=3)
            second_page = await adapter.query(user_id=user_id, limit=3, offset=3)
            other_org = await adapter.query(user_id=user_id, organization_id=uuid7())

        assert logins.value.total == 2
        assert first_page.value.total == 4
        assert len(first_page.value.entries) == 3
        assert len(second_page.value.entries) == 1
        assert second_page.value.entries[0].action == "user_login"
        assert other_org.value.total == 0

    @pytest.mark.asyncio
    async def test_newest_first(self, test_database):
        user_id = uuid7()
        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            await adapter.record(action=AuditAction.USER_LOGIN, user_id=user_id)
            await adapter.record(action=AuditAction.USER_LOGOUT, user_id=user_id)

        async with test_database.get_session() as session:
            page = await PostgresAuditAdapter(session=session).query(user_id=user_id)

        assert [e.action for e in page.value.entries] == ["user_logout", "user_login"]


@pytest.mark.integration
class TestAuditPurge:
    @pytest.mark.asyncio
    async def test_purge_older_than_cutoff(self, test_database):
        old_user = uuid7()
        recent_user = uuid7()
        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            await adapter.record(action=AuditAction.USER_LOGIN, user_id=old_user)
            await adapter.record(action=AuditAction.USER_LOGIN, user_id=recent_user)

        three_years_ago = datetime.now(UTC) - timedelta(days=3 * 365)
        async with test_database.get_session() as session:
            await session.execute(
                update(AuditLog)
                .where(AuditLog.user_id == old_user)
                .values(created_at=three_years_ago)
            )

        cutoff = datetime.now(UTC) - timedelta(days=2 * 365)
        async with test_database.get_session() as session:
            purged = await PostgresAuditAdapter(session=session).purge_older_than(cutoff)

        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            old = await adapter.query(user_id=old_user)
            recent = await adapter.query(user_id=recent_user)

        assert purged == Success(value=1)
        assert old.value.total == 0
        assert recent.value.total == 1
