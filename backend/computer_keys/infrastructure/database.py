"""Database Session Manager: async connection pool, per-request sessions, transaction boundary.

Invariants:
    - One engine (and pool) per process, created by init_db()
    - Each request checks out one AsyncSession via get_db() and always returns it
    - Any exception escaping the request (including cancellation) rolls back
    - commit_outcome() commits on Ok and rolls back on Err: no partial mutation
      of a failed operation is ever visible

Design Decisions:
    - Singleton db_manager initialized in the FastAPI lifespan: no import side effects
    - expire_on_commit=False: records stay readable for response encoding after commit
    - Pool sizing only applied to server databases (SQLite uses its own pool classes)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from computer_keys.core.outcome import Ok, Outcome
from computer_keys.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if make_url(database_url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error, transaction rolled back: {e}")
            raise
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables and indexes (no migrations)."""
        import computer_keys.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Schema ready: {sorted(Base.metadata.tables)}")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


async def commit_outcome(db: AsyncSession, outcome: Outcome) -> Outcome:
    """Transaction boundary: commit on Ok, roll back on Err. Returns the outcome unchanged."""
    if isinstance(outcome, Ok):
        await db.commit()
    else:
        await db.rollback()
    return outcome
