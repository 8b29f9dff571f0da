"""Profile and social graph use cases."""

from .get_fans import GetFansUseCase, GetFavoritesUseCase, ProfileRelationsRequest
from .get_profile import GetProfileRequest, GetProfileUseCase
from .like_profile import LikeProfileUseCase, ProfileLikeRequest, UnlikeProfileUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "GetFansUseCase",
    "GetFavoritesUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "LikeProfileUseCase",
    "ProfileLikeRequest",
    "ProfileRelationsRequest",
    "UnlikeProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
