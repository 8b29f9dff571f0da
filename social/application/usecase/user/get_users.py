"""List and get user use cases."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.dto import UserDto
from social.domain.result import NotFound, Success
from social.domain.service import UserService
from social.domain.value import UserId


class GetUsersUseCase(BaseUseCase):
    """Use case for listing every user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: None = None) -> Success[list[UserDto]]:
        result = await self.user_service.get_all()
        return Success([UserDto.from_user(user) for user in result.payload])


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UserId


class GetUserUseCase(BaseUseCase):
    """Use case for reading a single user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> Success[UserDto] | NotFound:
        """Look up a user by id.

        Args:
            request: Request with the user id

        Returns:
            User DTO, or NotFound
        """
        result = await self.user_service.get_by_id(request.user_id)
        if isinstance(result, Success):
            return Success(UserDto.from_user(result.payload))
        return result
