"""Issue token pair use case."""

from pydantic import BaseModel, Field

from social.application.usecase.base import BaseUseCase
from social.domain.result import Success, ValidationError
from social.domain.service import AuthService, TokenPair


class IssueTokenPairRequest(BaseModel):
    """Credentials exchanged for a token pair."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class IssueTokenPairUseCase(BaseUseCase):
    """Use case for logging in with username and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize issue token pair use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: IssueTokenPairRequest
    ) -> Success[TokenPair] | ValidationError:
        """Verify credentials and issue a new pair.

        Args:
            request: Username and password

        Returns:
            Token pair, or field errors if the credentials are wrong
        """
        return await self.auth_service.issue_token_pair(
            request.username, request.password
        )
