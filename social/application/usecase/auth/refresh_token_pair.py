"""Refresh token pair use case."""

from pydantic import BaseModel, Field

from social.application.usecase.base import BaseUseCase
from social.domain.result import Success, Unauthorized
from social.domain.service import AuthService, TokenPair


class RefreshTokenPairRequest(BaseModel):
    """Refresh token to be consumed."""

    refresh: str = Field(min_length=1)


class RefreshTokenPairUseCase(BaseUseCase):
    """Use case for rotating a refresh token into a new pair."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(
        self, request: RefreshTokenPairRequest
    ) -> Success[TokenPair] | Unauthorized:
        """Consume the refresh token and issue a new pair.

        Args:
            request: Request with the refresh token

        Returns:
            New token pair, or Unauthorized(refresh=True)
        """
        return await self.auth_service.refresh_token_pair(request.refresh)
