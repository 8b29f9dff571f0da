"""Use case tests against the in-memory test container."""

from uuid import UUID

import pytest

from social.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    IssueTokenPairRequest,
    IssueTokenPairUseCase,
    LogoutAllRequest,
    LogoutAllUseCase,
    RefreshTokenPairRequest,
    RefreshTokenPairUseCase,
)
from social.application.usecase.dto import ProfileDto, UserDto
from social.application.usecase.profile import (
    GetFansUseCase,
    GetFavoritesUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    LikeProfileUseCase,
    ProfileLikeRequest,
    ProfileRelationsRequest,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from social.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUsersUseCase,
    GetUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from social.domain.repository import UserRepository
from social.domain.result import NotFound, Success, Unauthorized
from social.domain.service import TokenPair
from social.domain.value import Contact, UserId, Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _register(env, username: str) -> UserId:
    use_case = await env.get(RegisterUserUseCase)
    result = await use_case.execute(
        RegisterUserRequest(username=Username(username), password="password0")
    )
    assert isinstance(result, Success)
    return UserId(UUID(result.payload))


class TestAuthUseCases:
    """Login, refresh, current user and logout-all."""

    @pytest.mark.asyncio
    async def test_login_refresh_and_logout_all(self, unit_env):
        user_id = await _register(unit_env, "qwerty0")
        issue = await unit_env.get(IssueTokenPairUseCase)
        refresh = await unit_env.get(RefreshTokenPairUseCase)
        logout_all = await unit_env.get(LogoutAllUseCase)

        pair = await issue.execute(
            IssueTokenPairRequest(username="qwerty0", password="password0")
        )
        assert isinstance(pair.payload, TokenPair)

        rotated = await refresh.execute(RefreshTokenPairRequest(refresh=pair.payload.refresh))
        assert isinstance(rotated, Success)

        await logout_all.execute(LogoutAllRequest(user_id=user_id))

        again = await refresh.execute(
            RefreshTokenPairRequest(refresh=rotated.payload.refresh)
        )
        assert again == Unauthorized(refresh=True)

    @pytest.mark.asyncio
    async def test_current_user(self, unit_env):
        user_id = await _register(unit_env, "qwerty0")
        use_case = await unit_env.get(GetCurrentUserUseCase)

        result = await use_case.execute(GetCurrentUserRequest(user_id=user_id))

        assert result == Success(
            UserDto(id=str(user_id), username="qwerty0", headline=None, likes=0)
        )

    @pytest.mark.asyncio
    async def test_current_user_vanished(self, unit_env):
        user = make_user()
        use_case = await unit_env.get(GetCurrentUserUseCase)

        result = await use_case.execute(GetCurrentUserRequest(user_id=user.id))

        assert isinstance(result, NotFound)


class TestUserUseCases:
    """Listing, reading and deleting users."""

    @pytest.mark.asyncio
    async def test_list_and_get(self, unit_env):
        first = await _register(unit_env, "qwerty0")
        await _register(unit_env, "qwerty1")
        get_users = await unit_env.get(GetUsersUseCase)
        get_user = await unit_env.get(GetUserUseCase)

        listed = await get_users.execute()
        single = await get_user.execute(GetUserRequest(user_id=first))

        assert [dto.username for dto in listed.payload] == ["qwerty0", "qwerty1"]
        assert single.payload.id == str(first)

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        user_id = await _register(unit_env, "qwerty0")
        delete = await unit_env.get(DeleteUserUseCase)
        repository = await unit_env.get(UserRepository)

        result = await delete.execute(DeleteUserRequest(requester_id=user_id, user_id=user_id))

        assert result == Success(None)
        assert await repository.find_by_id(user_id) is None


class TestProfileUseCases:
    """Profile reads, updates and likes."""

    @pytest.mark.asyncio
    async def test_update_then_get_profile(self, unit_env):
        user_id = await _register(unit_env, "qwerty0")
        update = await unit_env.get(UpdateProfileUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)

        await update.execute(
            UpdateProfileRequest(
                requester_id=user_id,
                user_id=user_id,
                headline="Researcher",
                bio="Likes graphs",
                contacts=[Contact(type="site", value="https://example.com")],
            )
        )
        result = await get_profile.execute(GetProfileRequest(user_id=user_id))

        assert result.payload == ProfileDto(
            headline="Researcher",
            bio="Likes graphs",
            likes=0,
            contacts=[{"type": "site", "value": "https://example.com"}],
        )

    @pytest.mark.asyncio
    async def test_like_shows_in_fans_and_favorites(self, unit_env):
        alice = await _register(unit_env, "alice00")
        bob = await _register(unit_env, "bob000")
        like = await unit_env.get(LikeProfileUseCase)
        fans = await unit_env.get(GetFansUseCase)
        favorites = await unit_env.get(GetFavoritesUseCase)

        await like.execute(ProfileLikeRequest(requester_id=alice, target_id=bob))

        bob_fans = await fans.execute(ProfileRelationsRequest(user_id=bob))
        alice_favorites = await favorites.execute(ProfileRelationsRequest(user_id=alice))
        assert [dto.id for dto in bob_fans.payload] == [str(alice)]
        assert [dto.username for dto in alice_favorites.payload] == ["bob000"]
        assert alice_favorites.payload[0].likes == 1
