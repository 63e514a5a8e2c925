"""Request and response schemas for the user endpoints."""

from .user_schemas import MessageResponse, UserRequest, UserResponse

__all__ = ["MessageResponse", "UserRequest", "UserResponse"]
