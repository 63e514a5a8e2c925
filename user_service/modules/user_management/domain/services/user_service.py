# 📄 File: user_service/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business rules for managing users - checking a new account before
# it is saved, making sure nobody changes a user's id, and deciding whether a login is valid.
# 🧪 Purpose (Technical Summary):
# Domain service implementing the create/read/update/delete/authenticate operations on top
# of an injected UserRepository and PasswordHasher, translating store outcomes into the
# domain error taxonomy.
# 🔗 Dependencies:
# User domain model, UserRepository, PasswordHasher, shared exceptions
# 🔄 Connected Modules / Calls From:
# API endpoints (through presentation.dependencies), tests

import logging
from typing import List

from ..models.user import UNSET_ID, User
from ..repositories.user_repository import UserRepository
from user_service.shared.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    UserServiceException,
    ValidationError,
)
from user_service.shared.core.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.

    Holds no state between calls; every operation is a single round trip
    to the repository and nothing is retried here.
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    # =========================================================================
    # USER CREATION AND LIFECYCLE
    # =========================================================================

    async def create_user(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User with an unset id and a plaintext password

        Returns:
            User: The same user with its assigned id and the password cleared

        Raises:
            InvalidInputError: If the id is already set
            ValidationError: If any field or the password fails validation
            DuplicateKeyError: If username or email already exists
            StorageError: For any other store failure
        """
        if user.is_persisted:
            raise InvalidInputError("ID must be null when creating a User", field="id", value=user.id)

        errors = user.validation_errors()
        if errors:
            raise ValidationError(errors)

        self.password_hasher.handle_password(user)

        user.id = await self.user_repository.create(user)
        logger.info(f"User {user.id} created")
        return user.clear_password()

    async def update_user(self, user_id: int, user: User) -> User:
        """
        Overwrite the stored user identified by user_id.

        An empty password leaves the stored credential untouched.

        Raises:
            InvalidInputError: If the body id differs from user_id
            NotFoundError: If the id is unset or no row matched
            ValidationError: If any field or a new password fails validation
        """
        if user.id != user_id:
            raise InvalidInputError("changing ID is not permitted", field="id", value=user.id)

        if not user.is_persisted:
            raise NotFoundError(f"no user with id {user.id} found", resource_type="user", resource_id=user.id)

        errors = user.validation_errors()
        if errors:
            raise ValidationError(errors)

        include_password = bool(user.password)
        if include_password:
            self.password_hasher.handle_password(user)

        rows = await self.user_repository.update(user, include_password=include_password)
        if rows == 0:
            raise NotFoundError(f"no user with id {user.id} found", resource_type="user", resource_id=user.id)

        logger.info(f"User {user.id} updated")
        return user.clear_password()

    async def delete_user(self, user_id: int) -> None:
        """
        Hard delete a user.

        Raises:
            NotFoundError: If the id is unset or no row matched
        """
        if user_id == UNSET_ID:
            raise NotFoundError(f"No User with ID {user_id} found", resource_type="user", resource_id=user_id)

        rows = await self.user_repository.delete(user_id)
        if rows == 0:
            raise NotFoundError(f"No User with ID {user_id} found", resource_type="user", resource_id=user_id)

        logger.info(f"User {user_id} deleted")

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def get_users(self, field: str, value: str, limit: int, offset: int) -> List[User]:
        """List users, optionally filtered on one field; never returns credentials."""
        return await self.user_repository.get_users(field, value, limit, offset)

    async def get_user(self, user_id: int) -> User:
        """
        Get a single user by id.

        Raises:
            NotFoundError: If no user has that id
        """
        users = await self.user_repository.get_users("id", str(user_id), 1, 0)
        if not users:
            raise NotFoundError(f"No User with ID {user_id} found", resource_type="user", resource_id=user_id)
        return users[0]

    # =========================================================================
    # AUTHENTICATION
    # =========================================================================

    async def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Unknown users, empty passwords, mismatches and store failures all
        yield False so callers cannot tell whether the account exists.
        """
        try:
            hashed_password = await self.user_repository.get_user_credentials(username)
        except UserServiceException as e:
            logger.debug(f"Credential lookup failed: {e.error_code}")
            return False

        if not password:
            return False

        return self.password_hasher.check_password(hashed_password, password)
