"""Pytest configuration for async testing.

This configuration ensures:
1. Test settings are in the environment before any src module reads them
2. Async tests are marked automatically
3. Cached container singletons are reset between tests
4. Database fixtures use an isolated SQLite file per test
"""

import asyncio
import base64
import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

# Test settings must be in place before src.core.config is imported anywhere.
TEST_ENCRYPTION_KEY = base64.urlsafe_b64encode(b"session-guard-test-cookie-key!!!").decode()
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="session_guard_tests_"))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("ENCRYPTION_KEY", TEST_ENCRYPTION_KEY)
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'app.db'}")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("REDIS_URL", None)

from src.core.config import get_settings  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI app")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reload settings for every test (tests may patch the environment)."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def encryption_key() -> str:
    """Valid cookie encryption key."""
    return TEST_ENCRYPTION_KEY


@pytest_asyncio.fixture
async def database(tmp_path):
    """Provide a fresh SQLite database with all tables created.

    Each test gets its own database file, so no data persists between tests.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()

    yield db

    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    """Provide a database session bound to the per-test database."""
    async with database.get_session() as session:
        yield session
