"""Repository interfaces for the user management domain."""

from .user_repository import SEARCH_ALL, SEARCH_FIELDS, UserRepository

__all__ = ["SEARCH_ALL", "SEARCH_FIELDS", "UserRepository"]
