"""Pytest configuration shared by all test suites.

This configuration ensures:
1. Required settings exist before ``src`` is imported (settings load at import)
2. Markers are registered (unit, api, integration, smoke)
3. Integration tests get a fresh in-memory SQLite database per test
4. Common test doubles (logger, audit) are available as fixtures
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-psicozen-api-0123456789")
os.environ.setdefault("API_BASE_URL", "http://testserver")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.core.result import Success  # noqa: E402

TEST_SECRET_KEY = "test-secret-key-for-psicozen-api-0123456789"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests against the FastAPI app")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")


@pytest.fixture
def mock_logger():
    """Logger double accepting any structured call.

    ``bind`` returns the same mock so bound calls can be asserted on it.
    """
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def mock_audit():
    """Audit double whose record() always succeeds."""
    audit = AsyncMock()
    audit.record.return_value = Success(value=None)
    return audit


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database for integration tests.

    Returns a Database instance that can create multiple independent sessions,
    so tests can write in one session and verify in another.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    try:
        yield db
    finally:
        await db.drop_all()
        await db.close()
