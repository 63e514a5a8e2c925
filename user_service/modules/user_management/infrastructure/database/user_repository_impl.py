# 📄 File: user_service/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like adding new users,
# searching for users page by page, changing their details and removing them.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy Core statements
# run through the StatementExecutor boundary, including the whitelisted filter and
# LIMIT/OFFSET query construction.
#
# 🔗 Dependencies:
# - user_service.modules.user_management.domain.repositories.user_repository (interface)
# - user_service.modules.user_management.domain.models.user (domain model)
# - user_service.modules.user_management.infrastructure.database.models (table)
# - user_service.shared.infrastructure.database.executor (statement boundary)
#
# 🔄 Connected Modules / Calls From:
# - user_service.modules.user_management.domain.services.user_service
# - user_service.modules.user_management.presentation.dependencies

"""
User Repository Implementation

Features:
- Insert with RETURNING to obtain the generated id
- Filtered, paginated reads over a fixed column list that never includes the hash
- Credential lookup by username
- Update and delete reporting affected row counts
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.sql import Select

from user_service.modules.user_management.domain.models.user import User
from user_service.modules.user_management.domain.repositories.user_repository import (
    SEARCH_ALL,
    SEARCH_FIELDS,
    UserRepository,
)
from user_service.modules.user_management.infrastructure.database.models import users_table
from user_service.shared.core.exceptions import InvalidInputError
from user_service.shared.infrastructure.database.executor import StatementExecutor

logger = logging.getLogger(__name__)

USER_GET_COLUMNS = (
    users_table.c.id,
    users_table.c.username,
    users_table.c.firstname,
    users_table.c.middlename,
    users_table.c.lastname,
    users_table.c.email,
    users_table.c.telephone,
)


def build_user_query(field: str, value: str, limit: int, offset: int) -> Select:
    """
    Build the SELECT used by get_users.

    Raises:
        InvalidInputError: If field is not searchable, or an id filter is not an integer
    """
    if field != SEARCH_ALL and field not in SEARCH_FIELDS:
        raise InvalidInputError(f"Unsupported search field |{field}|", field="field", value=field)

    stmt = select(*USER_GET_COLUMNS)

    if field != SEARCH_ALL:
        if field == "id":
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise InvalidInputError(f"Invalid ID {value}", field="id", value=value)
        stmt = stmt.where(users_table.c[field] == value)

    # A non-positive limit means unbounded; a positive offset always applies
    if limit > 0:
        stmt = stmt.limit(limit)
    if offset > 0:
        stmt = stmt.offset(offset)

    return stmt


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, executor: StatementExecutor):
        """
        Args:
            executor: Statement boundary bound to the request's session
        """
        self._executor = executor

    async def create(self, user: User) -> int:
        stmt = (
            insert(users_table)
            .values(
                username=user.username,
                password_hash=user.password,
                firstname=user.first_name,
                middlename=user.middle_name,
                lastname=user.last_name,
                email=user.email,
                telephone=user.telephone,
            )
            .returning(users_table.c.id)
        )
        user_id = await self._executor.fetch_scalar(stmt)
        logger.info(f"Created user with ID: {user_id}")
        return user_id

    async def get_users(self, field: str, value: str, limit: int, offset: int) -> List[User]:
        stmt = build_user_query(field, value, limit, offset)
        rows = await self._executor.fetch_all(stmt)

        users = [self._row_to_domain(row) for row in rows]
        logger.debug(f"Retrieved {len(users)} users (field={field}, limit={limit}, offset={offset})")
        return users

    async def get_user_credentials(self, username: str) -> str:
        stmt = select(users_table.c.password_hash).where(users_table.c.username == username)
        return await self._executor.fetch_scalar(stmt)

    async def update(self, user: User, include_password: bool) -> int:
        values = {
            "username": user.username,
            "firstname": user.first_name,
            "middlename": user.middle_name,
            "lastname": user.last_name,
            "email": user.email,
            "telephone": user.telephone,
        }
        if include_password:
            values["password_hash"] = user.password

        stmt = update(users_table).where(users_table.c.id == user.id).values(**values)
        rows = await self._executor.execute(stmt)
        logger.info(f"Updated user {user.id}: {rows} row(s) affected")
        return rows

    async def delete(self, user_id: int) -> int:
        stmt = delete(users_table).where(users_table.c.id == user_id)
        rows = await self._executor.execute(stmt)
        logger.info(f"Deleted user {user_id}: {rows} row(s) affected")
        return rows

    @staticmethod
    def _row_to_domain(row) -> User:
        return User(
            id=row.id,
            username=row.username,
            first_name=row.firstname,
            middle_name=row.middlename or "",
            last_name=row.lastname,
            email=row.email,
            telephone=row.telephone,
        )
