"""Application layer DI providers."""

from dishka import Scope, provide

from social.application.usecase.auth import (
    GetCurrentUserUseCase,
    IssueTokenPairUseCase,
    LogoutAllUseCase,
    RefreshTokenPairUseCase,
)
from social.application.usecase.profile import (
    GetFansUseCase,
    GetFavoritesUseCase,
    GetProfileUseCase,
    LikeProfileUseCase,
    UnlikeProfileUseCase,
    UpdateProfileUseCase,
)
from social.application.usecase.user import (
    DeleteUserUseCase,
    GetUsersUseCase,
    GetUserUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from social.domain.service import AuthService, SocialGraphService, UserService
from social.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_issue_token_pair_use_case(
        self, auth_service: AuthService
    ) -> IssueTokenPairUseCase:
        """Provide issue token pair use case."""
        return IssueTokenPairUseCase(auth_service=auth_service)

    @provide
    def get_refresh_token_pair_use_case(
        self, auth_service: AuthService
    ) -> RefreshTokenPairUseCase:
        """Provide refresh token pair use case."""
        return RefreshTokenPairUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    @provide
    def get_logout_all_use_case(self, auth_service: AuthService) -> LogoutAllUseCase:
        """Provide logout-all use case."""
        return LogoutAllUseCase(auth_service=auth_service)

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)

    @provide
    def get_get_users_use_case(self, user_service: UserService) -> GetUsersUseCase:
        """Provide list users use case."""
        return GetUsersUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Profile use cases
    @provide
    def get_get_profile_use_case(
        self, social_graph_service: SocialGraphService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(social_graph_service=social_graph_service)

    @provide
    def get_update_profile_use_case(
        self, social_graph_service: SocialGraphService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(social_graph_service=social_graph_service)

    @provide
    def get_like_profile_use_case(
        self, social_graph_service: SocialGraphService
    ) -> LikeProfileUseCase:
        """Provide like profile use case."""
        return LikeProfileUseCase(social_graph_service=social_graph_service)

    @provide
    def get_unlike_profile_use_case(
        self, social_graph_service: SocialGraphService
    ) -> UnlikeProfileUseCase:
        """Provide unlike profile use case."""
        return UnlikeProfileUseCase(social_graph_service=social_graph_service)

    @provide
    def get_get_fans_use_case(
        self, social_graph_service: SocialGraphService
    ) -> GetFansUseCase:
        """Provide fans use case."""
        return GetFansUseCase(social_graph_service=social_graph_service)

    @provide
    def get_get_favorites_use_case(
        self, social_graph_service: SocialGraphService
    ) -> GetFavoritesUseCase:
        """Provide favorites use case."""
        return GetFavoritesUseCase(social_graph_service=social_graph_service)
