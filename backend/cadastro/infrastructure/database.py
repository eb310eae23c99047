"""Storage Gateway — owns the async engine for the embedded SQLite store.

Invariants:
    - Exactly one Database per process, created and closed by the app lifespan
    - init() is idempotent: CREATE TABLE IF NOT EXISTS, rows never dropped
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)

Design Decisions:
    - Instance handed to repositories explicitly instead of a module singleton:
      nothing else opens its own handle to the same file
    - expire_on_commit=False: generated ids stay readable after commit
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from cadastro.core.errors import StorageError
from cadastro.db.base import Base
import cadastro.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine; provides sessions with rollback, table setup and health checks."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_async_engine(database_url, pool_pre_ping=True)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init(self) -> None:
        """Create the store file and the users table if missing."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        except SQLAlchemyError as e:
            logger.error(
                f"DB initialization failed: {e}", extra={"operation": "init"},
            )
            raise StorageError("Could not prepare database schema", "init") from e
        logger.info("Database ready", extra={"operation": "init"})

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise StorageError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise StorageError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise StorageError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise StorageError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Release pooled connections. Safe to call more than once."""
        await self.engine.dispose()
        logger.info("Database closed", extra={"operation": "close"})
