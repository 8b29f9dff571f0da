"""Update user credentials use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import AccessViolation, NotFound, Success, ValidationError
from social.domain.service import UserService
from social.domain.value import UserId, Username


class UpdateUserRequest(BaseModel):
    """Update user request."""

    requester_id: UserId  # From authenticated user
    user_id: UserId
    username: Username
    password: str


class UpdateUserUseCase(BaseUseCase):
    """Use case for changing username and password.

    Any actual change logs the user out of every session.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserRequest
    ) -> Success[None] | NotFound | ValidationError | AccessViolation:
        return await self.user_service.update_credentials(
            requester_id=request.requester_id,
            user_id=request.user_id,
            username=request.username,
            password=request.password,
        )
