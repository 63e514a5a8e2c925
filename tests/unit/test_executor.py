"""
Unit tests for the statement execution boundary (store error translation).
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from user_service.shared.core.exceptions import DuplicateKeyError, NotFoundError, StorageError
from user_service.shared.infrastructure.database.executor import (
    StatementExecutor,
    duplicate_key_constraint,
    translate_store_error,
)


def integrity_error(message):
    return IntegrityError("INSERT INTO users ...", {}, Exception(message))


class TestDuplicateKeyConstraint:
    """Tests for duplicate_key_constraint"""

    @pytest.mark.parametrize("constraint", ["users_username_key", "users_email_key", "anything_at_all", ""])
    def test_extracts_any_constraint_name(self, constraint):
        message = f'duplicate key value violates unique constraint "{constraint}"'
        assert duplicate_key_constraint(message) == constraint

    def test_matches_inside_longer_driver_text(self):
        message = (
            "<class 'asyncpg.exceptions.UniqueViolationError'>: duplicate key value violates "
            'unique constraint "users_email_key"\nDETAIL:  Key (email)=(a@b) already exists.'
        )
        assert duplicate_key_constraint(message) == "users_email_key"

    @pytest.mark.parametrize(
        "message",
        [
            'null value in column "email" violates not-null constraint',
            "duplicate key value violates unique constraint",
            "connection refused",
        ],
    )
    def test_other_text_does_not_match(self, message):
        assert duplicate_key_constraint(message) is None


class TestTranslateStoreError:
    """Tests for translate_store_error"""

    def test_unique_violation_becomes_duplicate_key(self):
        error = translate_store_error(
            integrity_error('duplicate key value violates unique constraint "users_username_key"')
        )
        assert isinstance(error, DuplicateKeyError)
        assert error.constraint == "users_username_key"
        assert error.message == "Request violates uniqueness"

    def test_other_integrity_error_keeps_driver_message(self):
        message = 'null value in column "email" violates not-null constraint'
        error = translate_store_error(integrity_error(message))
        assert type(error) is StorageError
        assert error.message == message

    def test_operational_error_becomes_storage_error(self):
        error = translate_store_error(OperationalError("SELECT 1", {}, Exception("server closed")))
        assert type(error) is StorageError
        assert error.message == "server closed"

    def test_no_result_becomes_not_found(self):
        assert isinstance(translate_store_error(NoResultFound("No row was found")), NotFoundError)


@pytest.fixture
def session():
    session = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock())
    return session


class TestStatementExecutor:
    """Tests for StatementExecutor"""

    @pytest.mark.asyncio
    async def test_fetch_scalar_returns_single_value(self, session):
        session.execute.return_value.scalar_one.return_value = 42
        assert await StatementExecutor(session).fetch_scalar(select(text("1"))) == 42

    @pytest.mark.asyncio
    async def test_fetch_scalar_without_row_raises_not_found(self, session):
        session.execute.return_value.scalar_one.side_effect = NoResultFound("No row was found")
        with pytest.raises(NotFoundError):
            await StatementExecutor(session).fetch_scalar(select(text("1")))

    @pytest.mark.asyncio
    async def test_fetch_all_returns_list(self, session):
        session.execute.return_value.all.return_value = iter([("a",), ("b",)])
        rows = await StatementExecutor(session).fetch_all(select(text("1")))
        assert rows == [("a",), ("b",)]

    @pytest.mark.asyncio
    async def test_execute_returns_rowcount(self, session):
        session.execute.return_value.rowcount = 3
        assert await StatementExecutor(session).execute(text("DELETE FROM users")) == 3

    @pytest.mark.asyncio
    async def test_duplicate_key_rolls_back_and_raises(self, session):
        session.execute.side_effect = integrity_error(
            'duplicate key value violates unique constraint "users_email_key"'
        )
        with pytest.raises(DuplicateKeyError) as exc_info:
            await StatementExecutor(session).fetch_scalar(text("INSERT"))
        assert exc_info.value.constraint == "users_email_key"
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_other_failures_raise_storage_error(self, session):
        session.execute.side_effect = OperationalError("UPDATE", {}, Exception("deadlock detected"))
        with pytest.raises(StorageError) as exc_info:
            await StatementExecutor(session).execute(text("UPDATE"))
        assert exc_info.value.message == "deadlock detected"
        session.rollback.assert_awaited_once()
