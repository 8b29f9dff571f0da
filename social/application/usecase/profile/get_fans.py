"""Fans and favorites use cases."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.dto import UserDto
from social.domain.result import NotFound, Success
from social.domain.service import SocialGraphService
from social.domain.value import UserId


class ProfileRelationsRequest(BaseModel):
    """Request for one side of a profile's like relation."""

    user_id: UserId


class GetFansUseCase(BaseUseCase):
    """Use case for listing the users that like a profile."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: ProfileRelationsRequest
    ) -> Success[list[UserDto]] | NotFound:
        result = await self.social_graph_service.get_fans(request.user_id)
        if isinstance(result, Success):
            return Success([UserDto.from_user(user) for user in result.payload])
        return result


class GetFavoritesUseCase(BaseUseCase):
    """Use case for listing the profiles a user likes."""

    def __init__(self, social_graph_service: SocialGraphService) -> None:
        self.social_graph_service = social_graph_service

    async def execute(
        self, request: ProfileRelationsRequest
    ) -> Success[list[UserDto]] | NotFound:
        result = await self.social_graph_service.get_favorites(request.user_id)
        if isinstance(result, Success):
            return Success([UserDto.from_user(user) for user in result.payload])
        return result
