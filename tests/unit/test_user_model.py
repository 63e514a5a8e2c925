"""
Unit tests for the User domain model.
"""
from user_service.modules.user_management.domain.models.user import User


class TestValidationErrors:
    """Tests for User.validation_errors"""

    def test_valid_user_has_no_errors(self, make_user):
        assert make_user().validation_errors() == []

    def test_middle_name_is_optional(self, make_user):
        assert make_user(middle_name="").validation_errors() == []

    def test_empty_user_reports_every_missing_field_in_order(self):
        assert User().validation_errors() == [
            "FirstName is not specified!",
            "LastName is not specified!",
            "Email is not specified!",
            "Telephone is not specified!",
            "Username is not specified!",
        ]

    def test_malformed_fields_reported_together(self, make_user):
        user = make_user(email="nodomain.fail", telephone="555-5555", username="jon")
        assert user.validation_errors() == [
            "Invalid Email specified!",
            "Invalid Telephone specified! Accepts (###) ###-####[[ ]x#####]",
            "Invalid Username: must be between 5 and 25 characters and be only alphanumeric",
        ]

    def test_missing_field_yields_only_the_missing_message(self, make_user):
        errors = make_user(email="").validation_errors()
        assert errors == ["Email is not specified!"]

    def test_password_is_not_checked(self, make_user):
        assert make_user(password="weak").validation_errors() == []


class TestSerialization:
    """The credential never leaves the model through a dump."""

    def test_dump_excludes_password(self, make_user):
        data = make_user().model_dump(by_alias=True)
        assert "password" not in data
        assert data["firstname"] == "John"
        assert data["middlename"] == "Q"
        assert data["lastname"] == "Doe"

    def test_repr_hides_password(self, make_user):
        assert "Passw0rd" not in repr(make_user())

    def test_accepts_wire_aliases(self):
        user = User(firstname="Ann", lastname="Lee")
        assert user.first_name == "Ann"
        assert user.last_name == "Lee"

    def test_clear_password(self, make_user):
        user = make_user()
        assert user.clear_password() is user
        assert user.password == ""

    def test_is_persisted(self, make_user):
        assert make_user().is_persisted is False
        assert make_user(id=7).is_persisted is True
