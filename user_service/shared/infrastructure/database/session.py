# 📄 File: user_service/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session and that changes are saved or undone as a whole.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with dependency injection for FastAPI,
# commit-on-success / rollback-on-failure transaction handling and session lifecycle.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - user_service/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - user_service/modules/user_management/presentation/dependencies.py (FastAPI dependencies)
# - user_service/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from user_service.shared.core.exceptions import StorageError, UserServiceException
from user_service.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with database engine."""
        self._session_factory = async_sessionmaker(
            engine or get_database_engine(),
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )
        self._initialized = True
        logger.info("Database session factory initialized successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            StorageError: If the session is unavailable or the commit fails
        """
        if not self._initialized or self._session_factory is None:
            raise StorageError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

            await session.commit()
            logger.debug("Database transaction committed successfully")

        except UserServiceException:
            # Domain outcomes are already typed; keep them intact
            await session.rollback()
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise StorageError(f"Database operation failed: {e}") from e

        except Exception:
            await session.rollback()
            logger.error("Unexpected error occurred, transaction rolled back")
            raise

        finally:
            await session.close()
            logger.debug("Database session closed")

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    session_manager.initialize()


# FastAPI dependency for getting database sessions
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session
