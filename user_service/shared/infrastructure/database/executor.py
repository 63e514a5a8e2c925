# 📄 File: user_service/shared/infrastructure/database/executor.py
#
# 🧭 Purpose (Layman Explanation):
# Runs database statements for the repositories and turns the database's raw error
# messages into clear outcomes like "that username is taken" or "no such user".
#
# 🧪 Purpose (Technical Summary):
# Statement execution boundary over an AsyncSession. It is the only place that inspects
# driver error text: unique-constraint violations become DuplicateKeyError, missing rows
# become NotFoundError and every other SQLAlchemy failure becomes StorageError.
#
# 🔗 Dependencies:
# - sqlalchemy (AsyncSession, exceptions)
# - user_service/shared/core/exceptions.py (domain error taxonomy)
#
# 🔄 Connected Modules / Calls From:
# - user_service/modules/user_management/infrastructure/database/user_repository_impl.py
# - user_service/modules/user_management/presentation/dependencies.py

import logging
import re
from typing import Any, List, Optional

from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from user_service.shared.core.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    StorageError,
    UserServiceException,
)

logger = logging.getLogger(__name__)

DUPLICATE_KEY_PATTERN = re.compile(r'duplicate key value violates unique constraint "([^"]*)"')


def duplicate_key_constraint(error_text: str) -> Optional[str]:
    """
    Extract the violated constraint name from a store error message.

    Returns:
        The constraint name, or None if the text is not a unique-constraint violation
    """
    match = DUPLICATE_KEY_PATTERN.search(error_text)
    if match is None:
        return None
    return match.group(1)


def translate_store_error(error: Exception) -> UserServiceException:
    """
    Map a SQLAlchemy error to the domain error taxonomy.

    Args:
        error: Exception raised while executing a statement

    Returns:
        DuplicateKeyError, NotFoundError or StorageError
    """
    if isinstance(error, NoResultFound):
        return NotFoundError("No matching row found")

    message = str(error.orig) if getattr(error, "orig", None) is not None else str(error)

    if isinstance(error, IntegrityError):
        constraint = duplicate_key_constraint(message)
        if constraint is not None:
            return DuplicateKeyError(constraint=constraint)

    return StorageError(message)


class StatementExecutor:
    """
    Executes SQLAlchemy statements on a session and reports typed outcomes.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _run(self, statement: Executable):
        try:
            return await self._session.execute(statement)
        except SQLAlchemyError as e:
            await self._session.rollback()
            translated = translate_store_error(e)
            logger.warning(f"Statement failed ({translated.error_code}): {translated.message}")
            raise translated from e

    async def fetch_scalar(self, statement: Executable) -> Any:
        """Return the single value of the single row produced by the statement."""
        result = await self._run(statement)
        try:
            return result.scalar_one()
        except SQLAlchemyError as e:
            raise translate_store_error(e) from e

    async def fetch_all(self, statement: Executable) -> List[Row]:
        """Return every row produced by the statement."""
        result = await self._run(statement)
        return list(result.all())

    async def execute(self, statement: Executable) -> int:
        """Run a write statement and return the number of affected rows."""
        result = await self._run(statement)
        return result.rowcount
