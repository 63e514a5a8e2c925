# 📄 File: user_service/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in the User Service - their login name, password, names,
# email and phone number - and the rules each of those must follow.
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity with aggregate field validation; the password
# attribute is write-only and excluded from every serialization.
# 🔗 Dependencies:
# pydantic, user_service.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository_impl.py, credential engine, API schemas

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from user_service.shared.utils.validators import (
    validate_email,
    validate_telephone,
    validate_username,
)

UNSET_ID = 0


class User(BaseModel):
    """
    User domain model.

    `id` is 0 until the store assigns one on creation. `password` holds the
    plaintext on input and the encoded hash once handled by the credential
    engine; it is never part of a dump.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = UNSET_ID
    username: str = ""
    password: str = Field(default="", exclude=True, repr=False)
    first_name: str = Field(default="", alias="firstname")
    middle_name: str = Field(default="", alias="middlename")
    last_name: str = Field(default="", alias="lastname")
    email: str = ""
    telephone: str = ""

    @property
    def is_persisted(self) -> bool:
        return self.id != UNSET_ID

    def validation_errors(self) -> List[str]:
        """
        Check every required field and return all failure messages.

        Order is first name, last name, email, telephone, username. The
        password is validated separately together with hashing.
        """
        errors: List[str] = []

        if not self.first_name:
            errors.append("FirstName is not specified!")

        if not self.last_name:
            errors.append("LastName is not specified!")

        if not self.email:
            errors.append("Email is not specified!")
        elif not validate_email(self.email):
            errors.append("Invalid Email specified!")

        if not self.telephone:
            errors.append("Telephone is not specified!")
        elif not validate_telephone(self.telephone):
            errors.append("Invalid Telephone specified! Accepts (###) ###-####[[ ]x#####]")

        if not self.username:
            errors.append("Username is not specified!")
        elif not validate_username(self.username):
            errors.append(
                "Invalid Username: must be between 5 and 25 characters and be only alphanumeric"
            )

        return errors

    def clear_password(self) -> "User":
        """Drop the credential before handing the user back to a caller."""
        self.password = ""
        return self
