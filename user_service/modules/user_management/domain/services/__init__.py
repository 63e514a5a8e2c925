"""Domain services for user management."""

from .user_service import UserService

__all__ = ["UserService"]
