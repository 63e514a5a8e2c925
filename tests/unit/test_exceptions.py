"""
Unit tests for user_service.shared.core.exceptions
"""
import pytest

from user_service.shared.core.exceptions import (
    CredentialError,
    DuplicateKeyError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    ValidationError,
    is_client_error,
    is_server_error,
)


@pytest.mark.parametrize(
    "error, status_code, error_code",
    [
        (InvalidInputError("Invalid ID x"), 400, "INVALID_INPUT"),
        (ValidationError(["FirstName is not specified!"]), 400, "VALIDATION_ERROR"),
        (NotFoundError(), 404, "NOT_FOUND"),
        (DuplicateKeyError(), 409, "DUPLICATE_KEY"),
        (StorageError("boom"), 500, "STORAGE_ERROR"),
        (CredentialError(), 500, "CREDENTIAL_ERROR"),
    ],
)
def test_status_and_code(error, status_code, error_code):
    assert error.status_code == status_code
    assert error.error_code == error_code
    assert error.to_dict()["error"]["code"] == error_code


def test_credential_error_is_a_storage_error():
    assert isinstance(CredentialError(), StorageError)


def test_validation_error_lists_every_message():
    error = ValidationError(["FirstName is not specified!", "Invalid Email specified!"])
    assert error.message == (
        "User failed validation:\n\t- FirstName is not specified!\n\t- Invalid Email specified!"
    )
    assert error.details["errors"] == error.errors


def test_to_dict_carries_details():
    error = NotFoundError("No User with ID 3 found", resource_type="user", resource_id=3).to_dict()["error"]
    assert error["status_code"] == 404
    assert error["details"] == {"resource_type": "user", "resource_id": "3"}


def test_client_and_server_classification():
    assert is_client_error(DuplicateKeyError()) is True
    assert is_server_error(DuplicateKeyError()) is False
    assert is_server_error(StorageError()) is True
    assert is_server_error(RuntimeError("unknown")) is True
