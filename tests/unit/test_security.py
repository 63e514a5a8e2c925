"""
Unit tests for user_service.shared.core.security
"""
import base64

import pytest
from passlib.exc import MissingBackendError

from user_service.shared.core.exceptions import CredentialError, ValidationError
from user_service.shared.utils.validators import PASSWORD_POLICY_MESSAGE


class TestHashPassword:
    """Tests for PasswordHasher.hash_password"""

    def test_returns_url_safe_text(self, password_hasher):
        result = password_hasher.hash_password("goodPass034!!")
        assert isinstance(result, str)
        assert "+" not in result and "/" not in result

    def test_encoded_value_wraps_a_bcrypt_hash(self, password_hasher):
        result = password_hasher.hash_password("goodPass034!!")
        raw = base64.urlsafe_b64decode(result).decode("ascii")
        assert raw.startswith("$2")
        assert "$04$" in raw

    def test_different_salts_per_call(self, password_hasher):
        h1 = password_hasher.hash_password("goodPass034!!")
        h2 = password_hasher.hash_password("goodPass034!!")
        assert h1 != h2

    def test_backend_failure_raises_credential_error(self, password_hasher, monkeypatch):
        def broken_hash(secret):
            raise ValueError("backend unavailable")

        monkeypatch.setattr(password_hasher._context, "hash", broken_hash)
        with pytest.raises(CredentialError) as exc_info:
            password_hasher.hash_password("goodPass034!!")
        assert exc_info.value.message == "Failed to encode password"
        assert exc_info.value.status_code == 500


class TestCheckPassword:
    """Tests for PasswordHasher.check_password"""

    @pytest.mark.parametrize("password", ["goodPass034!!", "Passw0rd!", "Zz9{" + "a" * 21])
    def test_round_trip(self, password_hasher, password):
        hashed = password_hasher.hash_password(password)
        assert password_hasher.check_password(hashed, password) is True

    def test_wrong_password_returns_false(self, password_hasher):
        hashed = password_hasher.hash_password("goodPass034!!")
        assert password_hasher.check_password(hashed, "goodPass034!?") is False
        assert password_hasher.check_password(hashed, "") is False

    @pytest.mark.parametrize("stored", ["", "not base64 at all!", "Zm9v", "JDJiJDA0JGJyb2tlbg=="])
    def test_malformed_hash_returns_false(self, password_hasher, stored):
        assert password_hasher.check_password(stored, "goodPass034!!") is False

    def test_non_ascii_hash_returns_false(self, password_hasher):
        assert password_hasher.check_password("hé", "goodPass034!!") is False


class TestHandlePassword:
    """Tests for PasswordHasher.handle_password"""

    def test_replaces_plaintext_with_hash(self, password_hasher, make_user):
        user = make_user(password="goodPass034!!")
        password_hasher.handle_password(user)
        assert user.password != "goodPass034!!"
        assert password_hasher.check_password(user.password, "goodPass034!!") is True

    def test_policy_failure_raises_validation_error(self, password_hasher, make_user):
        user = make_user(password="weak")
        with pytest.raises(ValidationError) as exc_info:
            password_hasher.handle_password(user)
        assert exc_info.value.errors == [PASSWORD_POLICY_MESSAGE]
        assert user.password == "weak"


class TestHashingBackendFailure:
    """A missing or broken bcrypt backend surfaces as CredentialError."""

    def test_missing_backend_raises_credential_error(self, password_hasher, monkeypatch):
        def no_backend(secret):
            raise MissingBackendError("bcrypt: no backends available")

        monkeypatch.setattr(password_hasher._context, "hash", no_backend)
        with pytest.raises(CredentialError):
            password_hasher.hash_password("goodPass034!!")
