"""Register user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import Success, ValidationError
from social.domain.service import UserService
from social.domain.value import Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: Username
    password: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account with an empty profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: RegisterUserRequest
    ) -> Success[str] | ValidationError:
        """Create the user.

        Args:
            request: Username and password

        Returns:
            The new user's id as a string, or a field error if the username
            is taken
        """
        result = await self.user_service.register(request.username, request.password)
        if isinstance(result, Success):
            return Success(str(result.payload))
        return result
