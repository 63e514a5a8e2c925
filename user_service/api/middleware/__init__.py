"""HTTP middleware for the User Service."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
