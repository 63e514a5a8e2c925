# 📄 File: user_service/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Wires the pieces of the user module together for each web request: a database session,
# the repository that uses it, the password hasher and the user service on top.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers performing explicit dependency injection of the statement
# executor, repository, password hasher and user service.
# 🔗 Dependencies:
# FastAPI Depends, SQLAlchemy AsyncSession, shared security and database modules
# 🔄 Connected Modules / Calls From:
# user_service.modules.user_management.presentation.api.v1.users

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.modules.user_management.domain.repositories.user_repository import UserRepository
from user_service.modules.user_management.domain.services.user_service import UserService
from user_service.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from user_service.shared.core.security import PasswordHasher, get_password_hasher
from user_service.shared.infrastructure.database.executor import StatementExecutor
from user_service.shared.infrastructure.database.session import get_db_session


def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    """Repository bound to the request's database session."""
    return UserRepositoryImpl(StatementExecutor(session))


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    """User service for the current request."""
    return UserService(user_repository, password_hasher)
