"""
Unit tests for user_service.shared.utils.validators
"""
import pytest

from user_service.shared.utils.validators import (
    validate_email,
    validate_password,
    validate_telephone,
    validate_username,
)


class TestValidateEmail:
    """Tests for validate_email"""

    def test_single_at_sign_is_valid(self):
        assert validate_email("bob@bob.win") is True

    def test_minimal_rule_accepts_bare_at(self):
        assert validate_email("a@") is True

    @pytest.mark.parametrize("email", ["nodomain.fail", "too@many@atsigns.fail", ""])
    def test_missing_or_repeated_at_sign_is_invalid(self, email):
        assert validate_email(email) is False


class TestValidateTelephone:
    """Tests for validate_telephone"""

    @pytest.mark.parametrize(
        "phone",
        ["(555) 555-5555", "(555) 555-5555x123", "(555) 555-5555 x123", "(555) 555-5555 x12345"],
    )
    def test_accepted_formats(self, phone):
        assert validate_telephone(phone) is True

    @pytest.mark.parametrize(
        "phone",
        [
            "555-555-5555",
            "(555)555-5555",
            "(555) 555-5555 x123456",
            "555 555-5555 x123456",
            "5555555555",
            "not a phone",
            "(555) 555-5555 x",
            "(555) 555-5555  x1",
            "(555) 555-5555\n",
            "(555) 555-55555",
        ],
    )
    def test_rejected_formats(self, phone):
        assert validate_telephone(phone) is False


class TestValidateUsername:
    """Tests for validate_username"""

    def test_alphanumeric_within_bounds(self):
        assert validate_username("johnny005") is True

    def test_length_bounds_are_inclusive(self):
        assert validate_username("a" * 5) is True
        assert validate_username("a" * 25) is True

    def test_too_short(self):
        assert validate_username("jon") is False

    def test_too_long(self):
        assert validate_username("a" * 26) is False

    @pytest.mark.parametrize("username", ["john_doe", "john doe", "john.doe", "jöhndoe"])
    def test_non_alphanumeric_characters_rejected(self, username):
        assert validate_username(username) is False


class TestValidatePassword:
    """Tests for validate_password"""

    def test_meets_policy(self):
        assert validate_password("goodPass034!!") is True

    def test_every_listed_symbol_counts_as_special(self):
        for symbol in "!@#$%&?+.,*^-_=<>[](){}":
            assert validate_password(f"Passw0rd{symbol}") is True, symbol

    def test_empty_password(self):
        assert validate_password("") is False

    def test_length_bounds(self):
        assert validate_password("Pa0!abcd") is True
        assert validate_password("Pa0!abc") is False
        assert validate_password("Pa0!" + "a" * 21) is True
        assert validate_password("Pa0!" + "a" * 22) is False

    @pytest.mark.parametrize(
        "password",
        [
            "password1!",  # no uppercase
            "PASSWORD1!",  # no lowercase
            "Password!!",  # no digit
            "Password11",  # no special
        ],
    )
    def test_missing_character_class(self, password):
        assert validate_password(password) is False

    @pytest.mark.parametrize("password", ["goodPass034;", "Passw0rd! ", "Passw0rd!~", "Passw0rd!é"])
    def test_characters_outside_alphabet_rejected(self, password):
        assert validate_password(password) is False
