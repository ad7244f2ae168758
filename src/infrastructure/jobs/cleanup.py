"""Expired data cleanup job.

Purges refresh token sessions past their expiry and audit entries older
than the retention period. Exit code is 0 on success and 1 when the purge
fails, so schedulers can alert on it.
"""

import argparse
import asyncio
import sys

from src.application.commands.handlers.purge_expired_data_handler import (
    PurgeExpiredDataHandler,
)
from src.application.commands.maintenance_commands import PurgeExpiredData
from src.application.dtos import PurgeResult
from src.application.errors import ApplicationError
from src.core.config import settings
from src.core.container import get_database, get_logger
from src.core.result import Result, Success
from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from src.infrastructure.persistence.repositories import SessionRepository


async def run_cleanup(
    retention_years: int | None = None,
) -> Result[PurgeResult, ApplicationError]:
    """Run the purge once.

    Args:
        retention_years: Audit retention override (defaults to settings).

    Returns:
        Handler result with deleted row counts.
    """
    logger = get_logger()
    years = retention_years or settings.audit_retention_years
    database = get_database()

    async with database.get_session() as session, database.get_session() as audit_session:
        handler = PurgeExpiredDataHandler(
            session_repo=SessionRepository(session=session),
            audit=PostgresAuditAdapter(session=audit_session, logger=logger),
            logger=logger,
        )
        return await handler.handle(PurgeExpiredData(audit_retention_years=years))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="psicozen-maintenance",
        description="Purge expired sessions and audit entries past retention.",
    )
    parser.add_argument(
        "--retention-years",
        type=int,
        default=None,
        help="Audit log retention in years (default: AUDIT_RETENTION_YEARS)",
    )
    return parser.parse_args(argv)


async def _main(retention_years: int | None) -> int:
    try:
        result = await run_cleanup(retention_years)
    finally:
        await get_database().close()

    if isinstance(result, Success):
        return 0
    return 1


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = _parse_args(argv)
    return asyncio.run(_main(args.retention_years))


if __name__ == "__main__":
    sys.exit(main())
