"""Get current user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.dto import UserDto
from social.domain.result import NotFound, Success
from social.domain.service import AuthService
from social.domain.service.social_graph_service import USER_NOT_FOUND
from social.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UserId  # From the verified access token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated user."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> Success[UserDto] | NotFound:
        """Load the user behind the access token.

        The auth service reports a vanished user as ``Success(None)``; that
        case is turned into NotFound here.

        Args:
            request: Request with the authenticated user id

        Returns:
            User DTO, or NotFound
        """
        result = await self.auth_service.get_user_info(request.user_id)
        if result.payload is None:
            return NotFound(USER_NOT_FOUND)
        return Success(UserDto.from_user(result.payload))
