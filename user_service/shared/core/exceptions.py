# 📄 File: user_service/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the User Service uses to say
# what went wrong (bad input, duplicate account, missing user, database trouble)
# in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Validation and credential engines, statement executor, user repository,
# user service, API exception handler

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status


class UserServiceException(Exception):
    """
    Base exception class for the User Service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# REQUEST & VALIDATION EXCEPTIONS
# =============================================================================

class InvalidInputError(UserServiceException):
    """
    Exception raised for malformed requests.
    Used for non-integer ids, unsupported filter fields, id changes on
    update and ids supplied on create.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_INPUT"
        )


class ValidationError(UserServiceException):
    """
    Exception raised when field rules are violated.
    Carries every violated rule, not only the first one.
    """

    def __init__(
        self,
        errors: List[str],
        entity: str = "User",
        details: Optional[Dict[str, Any]] = None
    ):
        self.errors = list(errors)
        if not details:
            details = {}
        details["errors"] = self.errors

        super().__init__(
            message=f"{entity} failed validation:\n\t- " + "\n\t- ".join(self.errors),
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


# =============================================================================
# STORAGE OUTCOME EXCEPTIONS
# =============================================================================

class NotFoundError(UserServiceException):
    """
    Exception raised when requested resource is not found.
    Used for read misses and updates/deletes that affected no rows.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateKeyError(UserServiceException):
    """
    Exception raised when a unique constraint is violated.
    Mapped from the store's error text at the statement boundary.
    """

    def __init__(
        self,
        message: str = "Request violates uniqueness",
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.constraint = constraint
        if not details:
            details = {}

        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_KEY"
        )


class StorageError(UserServiceException):
    """
    Exception raised for any other persistence failure.
    The driver message is kept as-is.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "STORAGE_ERROR"
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code=error_code
        )


class CredentialError(StorageError):
    """Exception raised when hashing a password fails."""

    def __init__(
        self,
        message: str = "Failed to encode password",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            operation="hash_password",
            details=details,
            error_code="CREDENTIAL_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_client_error(exception: Exception) -> bool:
    """Check if exception represents a client error (4xx)."""
    if isinstance(exception, (UserServiceException, HTTPException)):
        return 400 <= exception.status_code < 500

    return False


def is_server_error(exception: Exception) -> bool:
    """Check if exception represents a server error (5xx)."""
    if isinstance(exception, (UserServiceException, HTTPException)):
        return 500 <= exception.status_code < 600

    return True  # Default to server error for unknown exceptions
