"""Database configuration and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from cureconnect.config import Settings, settings
from cureconnect.logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


def build_engine(config: Settings = settings) -> AsyncEngine:
    """Create the pooled async engine described by ``config``."""
    engine_kwargs: dict[str, Any] = {"echo": config.debug, "pool_pre_ping": True}
    if not config.is_sqlite:
        engine_kwargs.update(
            pool_size=config.db_pool_size,  # Max persistent connections
            max_overflow=config.db_max_overflow,  # Additional transient connections under load
            pool_recycle=config.db_pool_recycle,
        )
    return create_async_engine(config.database_url, **engine_kwargs)


engine = build_engine()

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Test hook to override session maker
_test_session_maker: async_sessionmaker[AsyncSession] | None = None


def set_test_session_maker(
    maker: async_sessionmaker[AsyncSession] | None,
) -> async_sessionmaker[AsyncSession] | None:
    """Set test session maker and return the previous value."""
    global _test_session_maker
    previous = _test_session_maker
    _test_session_maker = maker
    return previous


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database session."""
    maker = _test_session_maker or async_session_maker
    async with maker() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(config: Settings = settings, bind: AsyncEngine | None = None) -> None:
    """Prepare the schema.

    Tables are normally owned by the Alembic migrations under ``migrations/``.
    With AUTO_CREATE_SCHEMA enabled the ORM metadata is created directly.
    """
    if not config.auto_create_schema:
        logger.info("Database initialized (schema managed by migrations)")
        return

    import cureconnect.models  # noqa: F401  registers tables on Base.metadata

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created from models")


async def dispose_engine() -> None:
    await engine.dispose()
    logger.info("Database pool disposed")
