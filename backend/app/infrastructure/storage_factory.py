"""Storage Selection — builds the PortfolioStorage named by settings at process start."""

import logging

from app.config import Settings
from app.core.errors import StorageUnavailableError
from app.core.repository_protocols import PortfolioStorage
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.memory_storage import InMemoryStorage
from app.infrastructure.sql_storage import DatabaseStorage

logger = logging.getLogger(__name__)


async def create_storage(
    settings: Settings,
) -> tuple[PortfolioStorage, DatabaseSessionManager | None]:
    """Return (storage, db_manager). db_manager is None for the memory backend."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage")
        return InMemoryStorage(), None

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
        connect_timeout=settings.database_connect_timeout,
        command_timeout=settings.database_command_timeout,
    )
    if settings.database_create_tables:
        try:
            await db_manager.create_tables()
        except StorageUnavailableError as e:
            # readiness probe reports it; requests fail with 503 until the DB is back
            logger.error(f"Table creation skipped: {e.message}")
    logger.info("Using database storage")
    return DatabaseStorage(db_manager), db_manager
