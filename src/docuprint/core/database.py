"""
Database Configuration

Async SQLAlchemy engine, session factory and declarative base.

The default URL is an in-memory SQLite database. In-memory SQLite needs a
single shared connection (StaticPool), otherwise every session would see an
empty database. That connection also carries a single transaction, so
sessions on it must not overlap: `session_scope` holds a lock for the
lifetime of each session when the database is in memory.
"""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from sqlalchemy import DateTime, TypeDecorator
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from docuprint.core.config import settings


class Base(DeclarativeBase):
    """Declarative base for all models."""


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime column.

    SQLite drops tzinfo on the way back, so values are normalised to UTC
    on write and re-tagged as UTC on read.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


def is_memory_database(database_url: str) -> bool:
    return database_url.startswith("sqlite") and ":memory:" in database_url


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with pooling suited to the database URL."""
    if is_memory_database(database_url):
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


engine = create_engine(settings.database_url, echo=settings.db_echo)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Every session on the shared in-memory connection shares its transaction
_session_lock: asyncio.Lock | None = (
    asyncio.Lock() if is_memory_database(settings.database_url) else None
)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """
    Open a session from `async_session_maker`.

    With an in-memory database only one session is open at a time, so a
    session closing without commit cannot roll back another's flushed work.
    """
    if _session_lock is None:
        async with async_session_maker() as session:
            yield session
        return

    async with _session_lock:
        async with async_session_maker() as session:
            yield session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields a database session.

    Rolls back if the request handler raises.
    """
    async with session_scope() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables. Call on application startup."""
    # Register every model on Base.metadata
    import docuprint.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine's connections."""
    await engine.dispose()
