"""Get profile use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.dto import ProfileDto
from social.domain.result import NotFound, Success
from social.domain.service import SocialGraphService
from social.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: UserId


class GetProfileUseCase(BaseUseCase):
    """Use case for reading a user's profile."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: GetProfileRequest
    ) -> Success[ProfileDto] | NotFound:
        result = await self.social_graph_service.get_profile(request.user_id)
        if isinstance(result, Success):
            return Success(ProfileDto.from_profile(result.payload))
        return result
