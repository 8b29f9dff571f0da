"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .get_users import GetUserRequest, GetUsersUseCase, GetUserUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "GetUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
]
