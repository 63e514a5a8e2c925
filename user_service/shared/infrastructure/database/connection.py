# 📄 File: user_service/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our PostgreSQL database, making sure we can talk to the
# user store and that the users table exists before the service starts answering requests.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine management with connection pooling, health checks,
# schema bootstrap and orderly disposal for the service lifecycle.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - user_service/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL async driver)
#
# 🔄 Connected Modules / Calls From:
# - user_service/shared/infrastructure/database/session.py (session management)
# - user_service/modules/user_management/infrastructure/database/models.py (table metadata)
# - user_service/main.py (startup and shutdown)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from user_service.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every table of the service."""


class DatabaseConnectionManager:
    """
    Manages PostgreSQL database connections with connection pooling,
    health monitoring, and schema creation.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy connection parameters from settings."""
        settings = self._settings
        return {
            "url": settings.database_url,
            "echo": settings.debug,
            "pool_pre_ping": True,  # Validate connections before use
            "pool_recycle": settings.database_pool_recycle,
            "pool_size": settings.database_pool_size,
            "max_overflow": settings.database_max_overflow,
            "pool_timeout": settings.database_pool_timeout,
        }

    async def initialize(self) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**self._build_connection_params())

            health = await self.health_check()
            if health["status"] != "healthy":
                raise RuntimeError(health["error"])

            logger.info(
                f"Database connection pool initialized successfully. "
                f"Pool size: {self._settings.database_pool_size}, "
                f"Max overflow: {self._settings.database_max_overflow}"
            )

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            await self.close()
            raise

    async def create_schema(self) -> None:
        """Create every declared table that does not exist yet."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema verified")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.begin() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager and the schema."""
    logger.info("Starting database initialization...")
    await db_manager.initialize()
    await db_manager.create_schema()
    logger.info("Database initialization completed successfully.")


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")

    return db_manager.engine
