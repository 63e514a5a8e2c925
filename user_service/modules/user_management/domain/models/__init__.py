"""User domain models."""

from .user import UNSET_ID, User

__all__ = ["UNSET_ID", "User"]
