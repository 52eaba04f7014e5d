import contextlib
import logging
from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,  # type: ignore[attr-defined]
    create_async_engine,
)
from sqlmodel import SQLModel

# Table models must be imported so create_all sees them
from florascan.species.models import Observation, Species  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseService:
    """Provides an interface for database operations, including initialization."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self.db_url = f"sqlite+aiosqlite:///{self.db_path}"

        self.async_engine = create_async_engine(
            self.db_url,
            pool_pre_ping=True,
            pool_recycle=3600,  # Recycle connections every hour
        )

        self.async_session_local = async_sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.async_engine,
            class_=AsyncSession,
        )

        # Tables are created by initialize(), which must be awaited after construction

    async def initialize(self) -> None:
        """Create tables and apply connection pragmas."""
        async with self.async_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        await self._apply_startup_optimizations()

    @contextlib.asynccontextmanager
    async def get_async_db(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide an async database session for dependency injection."""
        async with self.async_session_local() as session:
            yield session

    async def _apply_startup_optimizations(self) -> None:
        """Apply one-time SQLite pragmas."""
        async with self.get_async_db() as session:
            try:
                await session.execute(text("PRAGMA journal_mode = WAL"))
                await session.execute(text("PRAGMA synchronous = NORMAL"))
                await session.execute(text("PRAGMA foreign_keys = ON"))
                await session.execute(text("PRAGMA temp_store = MEMORY"))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.warning("Failed to apply startup optimizations: %s", e)

    async def dispose(self) -> None:
        """Dispose of the database engine to release resources.

        This should be called when the DatabaseService is no longer needed,
        especially in tests, to prevent file descriptor leaks.
        """
        if hasattr(self, "async_engine") and self.async_engine:
            await self.async_engine.dispose()
            logger.debug("Async database engine disposed")
