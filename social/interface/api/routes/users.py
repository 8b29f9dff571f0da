"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, field_validator

from social.application.usecase.dto import UserDto
from social.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUsersUseCase,
    GetUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from social.domain.service import AuthService
from social.domain.value import UserId, Username
from social.domain.value.types import validate_password
from social.interface.api.results import to_response
from social.interface.api.security import bearer_scheme, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """API request carrying a username and password."""

    username: Username
    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=str)
async def register_user(
    request: CredentialsAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> Response:
    """Register a new user with an empty profile.

    Returns:
        201 with the new user's id, or 400 if the username is taken

    Example:
        POST /users
        {"username": "qwerty0", "password": "password0"}

        Response: "0b8f0a54-8d0c-4d47-b7a2-5d9a1f0a3c11"
    """
    result = await register_user_use_case.execute(
        RegisterUserRequest(username=request.username, password=request.password)
    )
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.get("", response_model=list[UserDto])
async def get_users(get_users_use_case: FromDishka[GetUsersUseCase]) -> Response:
    """List every user."""
    return to_response(await get_users_use_case.execute())


@router.get("/{user_id}", response_model=UserDto)
async def get_user(
    user_id: UserId, get_user_use_case: FromDishka[GetUserUseCase]
) -> Response:
    """Get a single user.

    Returns:
        200 with the user DTO, or 404
    """
    return to_response(await get_user_use_case.execute(GetUserRequest(user_id=user_id)))


@router.put("/{user_id}")
async def update_user(
    user_id: UserId,
    request: CredentialsAPIRequest,
    auth_service: FromDishka[AuthService],
    update_user_use_case: FromDishka[UpdateUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Change username and password of the caller's own account.

    Any change revokes every refresh token of the user.

    Returns:
        200, 400 (username taken), 401, 403 (not the owner) or 404
    """
    requester_id = await require_user(credentials, auth_service)
    result = await update_user_use_case.execute(
        UpdateUserRequest(
            requester_id=requester_id,
            user_id=user_id,
            username=request.username,
            password=request.password,
        )
    )
    return to_response(result)


@router.delete("/{user_id}")
async def delete_user(
    user_id: UserId,
    auth_service: FromDishka[AuthService],
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Delete the caller's own account.

    Returns:
        200, 401, 403 (not the owner) or 404
    """
    requester_id = await require_user(credentials, auth_service)
    result = await delete_user_use_case.execute(
        DeleteUserRequest(requester_id=requester_id, user_id=user_id)
    )
    return to_response(result)
