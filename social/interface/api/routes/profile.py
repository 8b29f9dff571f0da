"""Profile and social graph routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from social.application.usecase.dto import ProfileDto, UserDto
from social.application.usecase.profile import (
    GetFansUseCase,
    GetFavoritesUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    LikeProfileUseCase,
    ProfileLikeRequest,
    ProfileRelationsRequest,
    UnlikeProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from social.domain.service import AuthService
from social.domain.value import Contact, UserId
from social.interface.api.results import to_response
from social.interface.api.security import bearer_scheme, require_user

router = APIRouter(prefix="/users", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for overwriting a profile."""

    headline: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=4000)
    contacts: list[Contact]


@router.get("/{user_id}/profile", response_model=ProfileDto)
async def get_profile(
    user_id: UserId, get_profile_use_case: FromDishka[GetProfileUseCase]
) -> Response:
    """Get a user's profile.

    Returns:
        200 with the profile DTO, or 404
    """
    return to_response(
        await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))
    )


@router.put("/{user_id}/profile")
async def update_profile(
    user_id: UserId,
    request: UpdateProfileAPIRequest,
    auth_service: FromDishka[AuthService],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Overwrite headline, bio and contacts of the caller's own profile.

    Returns:
        200, 401, 403 (not the owner) or 404

    Example:
        PUT /users/{user_id}/profile
        {"headline": "Hello", "contacts": [{"type": "email", "value": "a@b.c"}]}
    """
    requester_id = await require_user(credentials, auth_service)
    result = await update_profile_use_case.execute(
        UpdateProfileRequest(
            requester_id=requester_id,
            user_id=user_id,
            headline=request.headline,
            bio=request.bio,
            contacts=request.contacts,
        )
    )
    return to_response(result)


@router.post("/{user_id}/profile/like")
@router.post("/{user_id}/like", include_in_schema=False)
async def like_profile(
    user_id: UserId,
    auth_service: FromDishka[AuthService],
    like_profile_use_case: FromDishka[LikeProfileUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Like a user's profile.

    Returns:
        200 with an empty body, 400 if already liked, 401 or 404
    """
    requester_id = await require_user(credentials, auth_service)
    result = await like_profile_use_case.execute(
        ProfileLikeRequest(requester_id=requester_id, target_id=user_id)
    )
    return to_response(result)


@router.post("/{user_id}/profile/unlike")
@router.post("/{user_id}/unlike", include_in_schema=False)
async def unlike_profile(
    user_id: UserId,
    auth_service: FromDishka[AuthService],
    unlike_profile_use_case: FromDishka[UnlikeProfileUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Take back a like.

    Returns:
        200 with an empty body, 400 if not liked before, 401 or 404
    """
    requester_id = await require_user(credentials, auth_service)
    result = await unlike_profile_use_case.execute(
        ProfileLikeRequest(requester_id=requester_id, target_id=user_id)
    )
    return to_response(result)


@router.get("/{user_id}/profile/fans", response_model=list[UserDto])
async def get_fans(
    user_id: UserId, get_fans_use_case: FromDishka[GetFansUseCase]
) -> Response:
    """List the users that like a profile, in the order they liked it."""
    return to_response(
        await get_fans_use_case.execute(ProfileRelationsRequest(user_id=user_id))
    )


@router.get("/{user_id}/profile/favorites", response_model=list[UserDto])
async def get_favorites(
    user_id: UserId, get_favorites_use_case: FromDishka[GetFavoritesUseCase]
) -> Response:
    """List the profiles a user likes, in the order they were liked."""
    return to_response(
        await get_favorites_use_case.execute(ProfileRelationsRequest(user_id=user_id))
    )
