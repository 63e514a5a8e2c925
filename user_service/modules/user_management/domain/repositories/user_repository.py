# 📄 File: user_service/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete user information in the
# database without specifying the actual database technology
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User entities following the
# Repository pattern and dependency inversion principle
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# User service, infrastructure implementation, tests (in-memory doubles)

from abc import ABC, abstractmethod
from typing import List

from ..models.user import User

# Columns a caller may filter on, plus the "no filter" keyword
SEARCH_FIELDS = ("id", "username", "firstname", "middlename", "lastname", "email", "telephone")
SEARCH_ALL = "all"


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities (User), not database models
    - Store failures surface as typed errors (DuplicateKeyError,
      NotFoundError, StorageError), never as driver exceptions
    - Each call is a single independent round trip; nothing is retried
    """

    @abstractmethod
    async def create(self, user: User) -> int:
        """
        Insert a user whose password is already hashed.

        Returns:
            The identifier assigned by the store

        Raises:
            DuplicateKeyError: If username or email already exists
            StorageError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_users(self, field: str, value: str, limit: int, offset: int) -> List[User]:
        """
        Query users, optionally filtered on one column, with pagination.

        Args:
            field: One of SEARCH_FIELDS or SEARCH_ALL
            value: Value the field must equal (ignored for SEARCH_ALL)
            limit: Maximum rows; <= 0 means unbounded
            offset: Rows to skip; only applied when > 0

        Returns:
            Matching users without credentials, possibly empty

        Raises:
            InvalidInputError: If field is not searchable
        """
        pass

    @abstractmethod
    async def get_user_credentials(self, username: str) -> str:
        """
        Fetch the stored password hash for a username.

        Raises:
            NotFoundError: If no user has that username
        """
        pass

    @abstractmethod
    async def update(self, user: User, include_password: bool) -> int:
        """
        Overwrite every field of the user with the matching id.

        Args:
            user: User entity with updated data
            include_password: Also overwrite the stored hash

        Returns:
            Number of rows affected
        """
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> int:
        """
        Hard delete user by ID.

        Returns:
            Number of rows affected
        """
        pass
