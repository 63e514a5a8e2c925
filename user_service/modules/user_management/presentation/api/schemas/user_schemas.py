# 📄 File: user_service/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the exact shape of the user data the API accepts and sends back, making sure a
# password can be sent in but is never sent back out.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the user endpoints with conversion to and from the
# User domain model; the response schema has no credential field at all.
# 🔗 Dependencies:
# pydantic, user_service.modules.user_management.domain.models.user
# 🔄 Connected Modules / Calls From:
# user_service.modules.user_management.presentation.api.v1.users

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from user_service.modules.user_management.domain.models.user import User


class UserRequest(BaseModel):
    """Body of create and update requests."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=0, description="Must be 0 (or omitted) on create and match the path on update")
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, description="Plaintext; empty on update keeps the current password")
    firstname: Optional[str] = None
    middlename: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    telephone: Optional[str] = None

    def to_domain(self) -> User:
        return User(
            id=self.id or 0,
            username=self.username or "",
            password=self.password or "",
            first_name=self.firstname or "",
            middle_name=self.middlename or "",
            last_name=self.lastname or "",
            email=self.email or "",
            telephone=self.telephone or "",
        )


class UserResponse(BaseModel):
    """User as returned to clients; credentials are never included."""

    id: int
    username: str
    firstname: str
    middlename: str
    lastname: str
    email: str
    telephone: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.model_dump(by_alias=True))


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    message: str
