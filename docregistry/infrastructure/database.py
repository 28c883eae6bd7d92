"""Database Session Manager - async engine, sessions with rollback, health checks.

Invariants:
    - Every session rolls back on any exception (no partial commits leak)
    - SQLAlchemy exceptions surface as DatabaseError (core/errors.py); other errors pass through
    - SQLite URLs get no pool sizing (aiosqlite :memory: engines use StaticPool)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: records stay readable after commit in async code
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from docregistry.core.errors import DatabaseError
from docregistry.db.base import Base
import docregistry.models  # noqa: F401

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError are DBAPIError subclasses
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = _to_database_error(e)
            logger.error(f"{error.message} ({type(e).__name__}: {e})")
            raise error from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create tables directly (tests and ephemeral SQLite runs; prod uses Alembic)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

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
