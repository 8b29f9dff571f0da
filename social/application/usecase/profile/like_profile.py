"""Like and unlike profile use cases."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import Conflict, NotFound, Success
from social.domain.service import SocialGraphService
from social.domain.value import UserId


class ProfileLikeRequest(BaseModel):
    """Like or unlike request."""

    requester_id: UserId  # From authenticated user
    target_id: UserId


class LikeProfileUseCase(BaseUseCase):
    """Use case for liking a profile."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: ProfileLikeRequest
    ) -> Success[None] | NotFound | Conflict:
        return await self.social_graph_service.like(
            request.requester_id, request.target_id
        )


class UnlikeProfileUseCase(BaseUseCase):
    """Use case for taking a like back."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: ProfileLikeRequest
    ) -> Success[None] | NotFound | Conflict:
        return await self.social_graph_service.unlike(
            request.requester_id, request.target_id
        )
