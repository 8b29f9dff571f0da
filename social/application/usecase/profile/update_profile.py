"""Update profile use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.result import AccessViolation, NotFound, Success
from social.domain.service import SocialGraphService
from social.domain.value import Contact, UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    All three fields replace the stored ones; omitted headline or bio clears it.
    """

    requester_id: UserId  # From authenticated user
    user_id: UserId
    headline: str | None = None
    bio: str | None = None
    contacts: list[Contact] = []


class UpdateProfileUseCase(BaseUseCase):
    """Use case for overwriting the owner's profile."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        """Initialize update profile use case.

        Args:
            social_graph_service: Social graph domain service
        """
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: UpdateProfileRequest
    ) -> Success[None] | NotFound | AccessViolation:
        return await self.social_graph_service.update_user_profile(
            requester_id=request.requester_id,
            user_id=request.user_id,
            headline=request.headline,
            bio=request.bio,
            contacts=request.contacts,
        )
