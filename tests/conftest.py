"""
Shared pytest fixtures for user-service tests.
"""
from unittest.mock import AsyncMock

import pytest

from user_service.modules.user_management.domain.models.user import User
from user_service.modules.user_management.domain.repositories.user_repository import UserRepository
from user_service.modules.user_management.domain.services.user_service import UserService
from user_service.shared.core.security import PasswordHasher
from user_service.shared.infrastructure.database.executor import StatementExecutor

VALID_PASSWORD = "Passw0rd!"


@pytest.fixture
def password_hasher():
    """Low-cost hasher so bcrypt does not dominate the test run."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def make_user():
    """Factory for a user that passes every field check."""

    def _make(**overrides):
        fields = {
            "id": 0,
            "username": "jdoe123",
            "password": VALID_PASSWORD,
            "first_name": "John",
            "middle_name": "Q",
            "last_name": "Doe",
            "email": "jdoe@example.com",
            "telephone": "(555) 555-5555",
        }
        fields.update(overrides)
        return User(**fields)

    return _make


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def user_service(mock_user_repo, password_hasher):
    return UserService(mock_user_repo, password_hasher)


@pytest.fixture
def mock_executor():
    """Mock StatementExecutor with async methods."""
    return AsyncMock(spec=StatementExecutor)
