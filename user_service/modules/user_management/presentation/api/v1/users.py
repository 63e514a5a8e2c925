# 📄 File: user_service/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for managing user accounts: listing users, creating an
# account, looking one up, changing it, deleting it, and checking a username and password.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user endpoints. Thin adapters only: they parse ids and pagination parameters,
# enforce JSON bodies, call UserService and shape responses; domain errors are turned into
# HTTP responses by the application-level exception handler.
#
# 🔗 Dependencies:
# - FastAPI router, HTTPBasic security, status codes
# - user_service.modules.user_management.presentation.dependencies (service injection)
# - user_service.modules.user_management.presentation.api.schemas.user_schemas
#
# 🔄 Connected Modules / Calls From:
# - user_service.api.v1.router (router inclusion)

"""
Users API Endpoints

Endpoints:
- GET /user: List users (limit/offset pagination)
- POST /user: Create a user
- GET /user/{id}: Get one user
- PUT /user/{id}: Update a user
- DELETE /user/{id}: Delete a user
- POST /user/auth: Check HTTP Basic credentials
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from user_service.modules.user_management.domain.repositories.user_repository import SEARCH_ALL
from user_service.modules.user_management.domain.services.user_service import UserService
from user_service.modules.user_management.presentation.api.schemas.user_schemas import (
    MessageResponse,
    UserRequest,
    UserResponse,
)
from user_service.modules.user_management.presentation.dependencies import get_user_service
from user_service.shared.config.settings import get_settings
from user_service.shared.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

users_router = APIRouter(prefix="/user", tags=["Users"])

basic_auth = HTTPBasic(auto_error=False)


# =========================================================================
# REQUEST HELPERS
# =========================================================================

async def require_json(request: Request) -> None:
    """Reject bodies that are not declared as application/json."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip() != "application/json":
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Illegal Request Content-Type. Only accepts application/json. Received: {content_type}",
        )


def parse_user_id(raw_id: str) -> int:
    try:
        return int(raw_id)
    except ValueError:
        raise InvalidInputError(f"Invalid ID {raw_id}", field="id", value=raw_id)


def parse_int_query(name: str, raw_value: Optional[str], default: int) -> int:
    if raw_value is None or raw_value == "":
        return default
    try:
        return int(raw_value)
    except ValueError:
        raise InvalidInputError(
            f'query "{name}" only accepts integers: received {raw_value}', field=name, value=raw_value
        )


# =========================================================================
# USER ENDPOINTS
# =========================================================================

@users_router.get("", response_model=List[UserResponse], summary="List users")
async def get_all_users(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    settings = get_settings()
    page_limit = parse_int_query("limit", limit, settings.DEFAULT_PAGE_LIMIT)
    page_offset = parse_int_query("offset", offset, settings.DEFAULT_PAGE_OFFSET)

    users = await user_service.get_users(SEARCH_ALL, "", page_limit, page_offset)
    return [UserResponse.from_domain(user) for user in users]


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json)],
    summary="Create a user",
)
async def create_user(
    body: UserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.create_user(body.to_domain())
    return UserResponse.from_domain(user)


@users_router.post("/auth", response_model=MessageResponse, summary="Check credentials")
async def authenticate_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    if credentials is not None and await user_service.authenticate(
        credentials.username, credentials.password
    ):
        return MessageResponse(message="Success")

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")


@users_router.get("/{user_id}", response_model=UserResponse, summary="Get a user")
async def get_user_by_id(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.get_user(parse_user_id(user_id))
    return UserResponse.from_domain(user)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(require_json)],
    summary="Update a user",
)
async def update_user(
    user_id: str,
    body: UserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.update_user(parse_user_id(user_id), body.to_domain())
    return UserResponse.from_domain(user)


@users_router.delete("/{user_id}", response_model=MessageResponse, summary="Delete a user")
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    parsed_id = parse_user_id(user_id)
    await user_service.delete_user(parsed_id)
    return MessageResponse(message=f"User ID {parsed_id} deleted")
