"""Delete user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import AccessViolation, NotFound, Success
from social.domain.service import UserService
from social.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    requester_id: UserId  # From authenticated user
    user_id: UserId


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting an account.

    The user disappears from every other profile's likes and its refresh
    tokens stop working.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: DeleteUserRequest
    ) -> Success[None] | NotFound | AccessViolation:
        return await self.user_service.delete(request.requester_id, request.user_id)
