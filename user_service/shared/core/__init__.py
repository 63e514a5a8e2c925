"""
Core utilities package for the User Service.
Provides the error taxonomy and the password credential engine.
"""

from .exceptions import (
    UserServiceException,
    InvalidInputError,
    ValidationError,
    NotFoundError,
    DuplicateKeyError,
    StorageError,
    CredentialError,
)

from .security import PasswordHasher, get_password_hasher

__all__ = [
    "UserServiceException",
    "InvalidInputError",
    "ValidationError",
    "NotFoundError",
    "DuplicateKeyError",
    "StorageError",
    "CredentialError",
    "PasswordHasher",
    "get_password_hasher",
]
