"""
Security utilities for password hashing and verification.
Provides the credential engine used when users are created, updated and authenticated.
"""

import base64
import binascii
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from passlib.context import CryptContext

from ..config.settings import get_settings
from ..utils.validators import PASSWORD_POLICY_MESSAGE, validate_password
from .exceptions import CredentialError, ValidationError

if TYPE_CHECKING:
    from user_service.modules.user_management.domain.models.user import User

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Salted one-way password hashing with a text-safe encoding.

    Hashes are produced by bcrypt (self-salting, adaptive cost) and then
    base64-url encoded so they can be stored and transported as plain text.
    """

    def __init__(self, rounds: Optional[int] = None):
        if rounds is None:
            rounds = get_settings().BCRYPT_ROUNDS
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plain text password

        Returns:
            str: base64-url encoded bcrypt hash

        Raises:
            CredentialError: If the hashing backend fails
        """
        try:
            hashed = self._context.hash(password)
        except (ValueError, TypeError, RuntimeError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise CredentialError() from e

        logger.debug("Password hashed successfully")
        return base64.urlsafe_b64encode(hashed.encode("utf-8")).decode("ascii")

    def check_password(self, hashed_password: str, password: str) -> bool:
        """
        Verify a plaintext password against a stored, encoded hash.

        Args:
            hashed_password: Stored base64-url encoded hash
            password: Plain text password

        Returns:
            bool: True if password matches; False on mismatch or any malformed hash
        """
        try:
            decoded = base64.urlsafe_b64decode(hashed_password.encode("ascii")).decode("ascii")
        except (binascii.Error, ValueError):
            logger.debug("Stored password hash could not be decoded")
            return False

        try:
            is_valid = self._context.verify(password, decoded)
        except (ValueError, TypeError, RuntimeError) as e:
            logger.debug(f"Password verification error: {e}")
            return False

        if is_valid:
            logger.debug("Password verification successful")
        else:
            logger.debug("Password verification failed")
        return is_valid

    def handle_password(self, user: "User") -> None:
        """
        Validate the user's plaintext password and replace it with its hash.

        Raises:
            ValidationError: If the password does not meet the policy
            CredentialError: If hashing fails
        """
        if not validate_password(user.password):
            raise ValidationError([PASSWORD_POLICY_MESSAGE])

        user.password = self.hash_password(user.password)


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher built from settings."""
    return PasswordHasher(get_settings().BCRYPT_ROUNDS)
