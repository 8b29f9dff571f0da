"""Logout everywhere use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import Success
from social.domain.service import AuthService
from social.domain.value import UserId


class LogoutAllRequest(BaseModel):
    """Logout-all request."""

    user_id: UserId


class LogoutAllUseCase(BaseUseCase):
    """Use case for revoking every refresh token of the caller.

    Access tokens already handed out stay valid until they expire.
    """

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LogoutAllRequest) -> Success[None]:
        await self.auth_service.revoke_all_tokens(request.user_id)
        return Success(None)
