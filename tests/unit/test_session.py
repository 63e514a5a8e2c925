"""
Unit tests for the request-scoped session manager.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from user_service.shared.core.exceptions import DuplicateKeyError, StorageError
from user_service.shared.infrastructure.database.session import DatabaseSessionManager


@pytest.fixture
def session():
    return AsyncMock()


@pytest.fixture
def manager(session):
    manager = DatabaseSessionManager()
    manager._session_factory = MagicMock(return_value=session)
    manager._initialized = True
    return manager


class TestGetSession:
    """Tests for DatabaseSessionManager.get_session"""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, manager, session):
        async with manager.get_session() as yielded:
            assert yielded is session

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_domain_errors_pass_through(self, manager, session):
        with pytest.raises(DuplicateKeyError):
            async with manager.get_session():
                raise DuplicateKeyError(constraint="users_email_key")

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_failure_becomes_storage_error(self, manager, session):
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("connection lost"))

        with pytest.raises(StorageError):
            async with manager.get_session():
                pass

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_uninitialized_manager_raises(self):
        with pytest.raises(StorageError):
            async with DatabaseSessionManager().get_session():
                pass
