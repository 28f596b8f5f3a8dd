"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One manager per process, created in the FastAPI lifespan and disposed at shutdown
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy/driver/connection exceptions mapped to StorageUnavailableError
    - Every DB call bounded by pool/connect/command timeouts from settings

Design Decisions:
    - Manager lives on app.state and is injected into DatabaseStorage; no module singleton
    - expire_on_commit=False: rows stay readable after commit in async context
    - SQLite gets no pool sizing (aiosqlite uses its own pool classes)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import StorageUnavailableError
from app.db.base import Base

logger = logging.getLogger(__name__)


def build_engine_options(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 5,
    pool_timeout: float = 10.0,
    connect_timeout: float = 10.0,
    command_timeout: float = 30.0,
) -> dict:
    """Engine kwargs for the given URL's backend and driver."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return {"connect_args": {"timeout": connect_timeout}}
    options: dict = {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_timeout": pool_timeout,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }
    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {
            "timeout": connect_timeout,
            "command_timeout": command_timeout,
        }
    return options


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(self, database_url: str, **engine_kwargs):
        self.engine: AsyncEngine = create_async_engine(
            database_url, **build_engine_options(database_url, **engine_kwargs),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (tests, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await _safe_rollback(session)
            logger.error(f"DB integrity error: {e}")
            raise StorageUnavailableError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await _safe_rollback(session)
            logger.error(f"DB operational error: {e}")
            raise StorageUnavailableError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await _safe_rollback(session)
            logger.error(f"DB driver error: {e}")
            raise StorageUnavailableError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await _safe_rollback(session)
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageUnavailableError("Database operation failed", "unknown") from e
        except OSError as e:
            await _safe_rollback(session)
            logger.error(f"DB connection error: {e}")
            raise StorageUnavailableError("Database unreachable", "connect") from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create any missing tables from Base.metadata."""
        import app.models  # noqa: F401  (registers all tables on Base.metadata)

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB create_all failed: {e}")
            raise StorageUnavailableError("Could not create tables", "create_all") from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except StorageUnavailableError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def _safe_rollback(session: AsyncSession) -> None:
    """Rollback that tolerates an already-broken connection."""
    try:
        await session.rollback()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"DB rollback failed: {e}")
