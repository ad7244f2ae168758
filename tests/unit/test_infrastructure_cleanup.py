"""Unit tests for the expired data cleanup job (psicozen-maintenance)."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.dtos import PurgeResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Success
from src.infrastructure.jobs import cleanup

PURGED = PurgeResult(expired_sessions_deleted=3, audit_entries_deleted=7)


def _database():
    @asynccontextmanager
    async def get_session():
        yield MagicMock()

    database = MagicMock()
    database.get_session.side_effect = get_session
    database.close = AsyncMock()
    return database


@pytest.mark.unit
class TestParseArgs:
    def test_defaults(self):
        args = cleanup._parse_args([])

        assert args.retention_years is None

    def test_retention_override(self):
        args = cleanup._parse_args(["--retention-years", "5"])

        assert args.retention_years == 5

    def test_rejects_non_integer(self):
        with pytest.raises(SystemExit):
            cleanup._parse_args(["--retention-years", "dois"])


@pytest.mark.unit
class TestRunCleanup:
    async def test_uses_settings_retention_by_default(self, mock_logger):
        handler = MagicMock()
        handler.handle = AsyncMock(return_value=Success(value=PURGED))

        with (
            patch.object(cleanup, "get_database", return_value=_database()),
            patch.object(cleanup, "get_logger", return_value=mock_logger),
            patch.object(
                cleanup, "PurgeExpiredDataHandler", return_value=handler
            ),
        ):
            result = await cleanup.run_cleanup()

        assert result == Success(value=PURGED)
        command = handler.handle.await_args.args[0]
        assert command.audit_retention_years == cleanup.settings.audit_retention_years

    async def test_retention_override(self, mock_logger):
        handler = MagicMock()
        handler.handle = AsyncMock(return_value=Success(value=PURGED))

        with (
            patch.object(cleanup, "get_database", return_value=_database()),
            patch.object(cleanup, "get_logger", return_value=mock_logger),
            patch.object(
                cleanup, "PurgeExpiredDataHandler", return_value=handler
            ),
        ):
            await cleanup.run_cleanup(retention_years=5)

        command = handler.handle.await_args.args[0]
        assert command.audit_retention_years == 5


@pytest.mark.unit
class TestMain:
    async def test_success_exit_code(self):
        database = _database()

        with (
            patch.object(cleanup, "get_database", return_value=database),
            patch.object(
                cleanup, "run_cleanup", AsyncMock(return_value=Success(value=PURGED))
            ),
        ):
            exit_code = await cleanup._main(None)

        assert exit_code == 0
        database.close.assert_awaited_once()

    async def test_failure_exit_code(self):
        database = _database()
        error = ApplicationError(
            code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
            message="Purge failed",
        )

        with (
            patch.object(cleanup, "get_database", return_value=database),
            patch.object(
                cleanup, "run_cleanup", AsyncMock(return_value=Failure(error=error))
            ),
        ):
            exit_code = await cleanup._main(2)

        assert exit_code == 1
        database.close.assert_awaited_once()

    async def test_database_closed_when_purge_raises(self):
        database = _database()

        with (
            patch.object(cleanup, "get_database", return_value=database),
            patch.object(
                cleanup, "run_cleanup", AsyncMock(side_effect=RuntimeError("boom"))
            ),
            pytest.raises(RuntimeError),
        ):
            await cleanup._main(None)

        database.close.assert_awaited_once()

    def test_main_passes_parsed_retention(self):
        with patch.object(cleanup, "_main", AsyncMock(return_value=0)) as run:
            exit_code = cleanup.main(["--retention-years", "3"])

        assert exit_code == 0
        run.assert_awaited_once_with(3)
