"""API version 1."""

from .router import api_v1_router

__all__ = ["api_v1_router"]
