import os

# Settings are read at import time; these must be in place before `src` is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123456789")
os.environ["APP_ENV"] = "test"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_JSON", "false")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from passlib.context import CryptContext

from src.core.application import create_application
from src.core.config.settings import Settings
from src.domain.entities.user import User  # noqa: F401  registers the table on the metadata
from src.infrastructure.database.pool import ConnectionPool


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'hostel_test.db'}"


@pytest.fixture
def test_settings(database_url):
    return Settings(
        DATABASE_URL=database_url,
        DB_POOL_SIZE=2,
        DB_POOL_TIMEOUT=2.0,
        BCRYPT_ROUNDS=4,
        RATE_LIMIT_ENABLED=True,
        RATE_LIMIT_STORAGE="memory",
    )


@pytest.fixture
def pwd_context():
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=4)


@pytest_asyncio.fixture
async def pool(database_url):
    """A small pool over a fresh SQLite file with the schema created."""
    connection_pool = ConnectionPool(database_url, pool_size=2, pool_timeout=2.0)
    await connection_pool.create_tables()
    yield connection_pool
    await connection_pool.dispose()


@pytest.fixture
def client(test_settings):
    """HTTP client over a fresh application; the lifespan creates the schema."""
    app = create_application(test_settings)
    with TestClient(app) as test_client:
        yield test_client
