"""Test fixtures and configuration."""

import os

# Settings are read at import time, so the environment must be in place first
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEBUG"] = "false"
os.environ["ENVIRONMENT"] = "testing"

import asyncio  # noqa: E402
import logging  # noqa: E402
import sys  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
import structlog  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from cureconnect import database  # noqa: E402
from cureconnect.config import Settings  # noqa: E402
from cureconnect.database import Base  # noqa: E402
from cureconnect.logger import get_logger  # noqa: E402
from cureconnect.models import User  # noqa: E402
from cureconnect.security import create_access_token, hash_password  # noqa: E402

logger = get_logger(__name__)

TEST_PASSWORD = "pw123"


# --- Structlog Configuration for Tests ---
@pytest.fixture(autouse=True, scope="session")
def configure_structlog_for_tests():
    """Configure structlog for proper capsys/caplog capture in tests."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(),
        foreign_pre_chain=processors[:-1],
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield

    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any .env file on the machine."""
    return Settings(
        _env_file=None,
        JWT_SECRET="unit-test-secret-key-with-32-bytes-min",
        DATABASE_URL="sqlite+aiosqlite://",
        BCRYPT_ROUNDS=4,
    )


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Fresh SQLite database per test, wired into the app's get_db dependency.

    Uses NullPool so every session opens its own aiosqlite connection and
    nothing is left bound to a finished event loop.
    """
    url = f"sqlite+aiosqlite:///{tmp_path / 'cureconnect_test.db'}"
    engine = create_async_engine(url, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    previous = database.set_test_session_maker(maker)

    yield engine

    database.set_test_session_maker(previous)
    try:
        await asyncio.wait_for(engine.dispose(), timeout=10.0)
    except asyncio.TimeoutError:
        logger.error("Engine disposal timed out")


@pytest_asyncio.fixture
async def db(db_engine):
    """Session on the per-test database."""
    async with AsyncSession(db_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture
async def test_user(db_engine) -> User:
    """Committed user 'alee' with password ``TEST_PASSWORD``."""
    async with AsyncSession(db_engine, expire_on_commit=False) as session:
        user = User(
            first_name="Ann",
            last_name="Lee",
            username="alee",
            email="ann@x.com",
            password=hash_password(TEST_PASSWORD, rounds=4),
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def public_client(db_engine):
    """Create async test client without auth headers."""
    from cureconnect.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def client(db_engine, test_user):
    """Async test client carrying a bearer token for ``test_user``."""
    from cureconnect.main import app

    token = create_access_token(test_user.id, test_user.username)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {token}"},
    ) as client_instance:
        yield client_instance
