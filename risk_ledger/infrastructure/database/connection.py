"""Database connection and session management."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from risk_ledger.core.config import settings

from .models import Base


class DatabaseSessionManager:
    """
    Manages database connections and sessions.

    Uses SQLAlchemy async engine for non-blocking database operations.
    Mutating ledger operations go through serialized_session(), which holds
    one process-wide lock from the first read until commit, so no two
    writes ever interleave.
    """

    def __init__(self):
        self._engine = None
        self._sessionmaker = None
        self._write_lock: asyncio.Lock | None = None

    def init(self, database_url: str | None = None):
        """
        Initialize the database engine and session factory.

        Args:
            database_url: Optional override for the database URL
        """
        url = database_url or settings.database_url

        # Convert postgres:// to postgresql+asyncpg://
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

        engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.db_pool_size
            engine_kwargs["max_overflow"] = settings.db_max_overflow

        self._engine = create_async_engine(url, **engine_kwargs)

        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        self._write_lock = asyncio.Lock()

    async def create_tables(self):
        """Create any missing ledger tables."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        """Close the database engine."""
        if self._engine:
            await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope around operations.

        Yields:
            An async database session
        """
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def serialized_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope that excludes every other writer.

        The lock is released only after commit or rollback.

        Yields:
            An async database session
        """
        if self._write_lock is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        async with self._write_lock:
            async with self.session() as session:
                yield session


db_manager = DatabaseSessionManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for read-only database sessions.

    Yields:
        An async database session
    """
    async with db_manager.session() as session:
        yield session


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for sessions of mutating ledger operations.

    Yields:
        An async database session holding the global write lock
    """
    async with db_manager.serialized_session() as session:
        yield session
