"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from social.domain.result import (
    AccessViolation,
    NotFound,
    Success,
    Unauthorized,
    ValidationError,
)
from social.domain.service import (
    AuthService,
    RefreshTokenLedgerService,
    SocialGraphService,
    TokenIssuer,
    UserService,
)
from social.domain.value import UserId, Username
from social.persistence.repository.inmemory import (
    InMemoryRefreshTokenLedgerRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_user


class Services:
    """Domain services sharing one set of in-memory repositories."""

    def __init__(self, auth_settings) -> None:
        self.user_repo = InMemoryUserRepository()
        self.ledger_repo = InMemoryRefreshTokenLedgerRepository()
        ledger_service = RefreshTokenLedgerService(self.ledger_repo)
        self.auth = AuthService(self.user_repo, ledger_service, TokenIssuer(auth_settings))
        self.graph = SocialGraphService(self.user_repo)
        self.users = UserService(self.user_repo, self.auth, ledger_service)


@pytest.fixture
def services(auth_settings) -> Services:
    return Services(auth_settings)


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_creates_user_with_empty_profile(self, services):
        result = await services.users.register(Username("qwerty0"), "password0")

        assert isinstance(result, Success)
        user = await services.user_repo.find_by_id(result.payload)
        assert user.username == Username("qwerty0")
        assert user.password == "password0"
        assert user.profile.liked == ()
        assert user.profile.liked_by == ()

    @pytest.mark.asyncio
    async def test_duplicate_username(self, services):
        await services.users.register(Username("qwerty0"), "password0")

        result = await services.users.register(Username("qwerty0"), "password1")

        assert result == ValidationError(
            {"username": "Username already taken by someone else."}
        )


class TestGet:
    """Tests for get_all() and get_by_id()."""

    @pytest.mark.asyncio
    async def test_get_all(self, services):
        first = await services.user_repo.save(make_user())
        second = await services.user_repo.save(make_user())

        result = await services.users.get_all()

        assert [u.id for u in result.payload] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, services):
        assert isinstance(await services.users.get_by_id(UserId(uuid4())), NotFound)


class TestUpdateCredentials:
    """Tests for UserService.update_credentials()."""

    async def _login(self, services: Services, username: str, password: str):
        user = await services.user_repo.save(make_user(username, password))
        pair = (await services.auth.issue_token_pair(username, password)).payload
        return user, pair

    @pytest.mark.asyncio
    async def test_password_change_revokes_refresh_tokens(self, services):
        user, pair = await self._login(services, "qwerty0", "password0")

        result = await services.users.update_credentials(
            user.id, user.id, Username("qwerty0"), "password1"
        )

        assert result == Success(None)
        assert await services.auth.refresh_token_pair(pair.refresh) == Unauthorized(
            refresh=True
        )
        stored = await services.user_repo.find_by_id(user.id)
        assert stored.password == "password1"

    @pytest.mark.asyncio
    async def test_username_change_revokes_refresh_tokens(self, services):
        user, pair = await self._login(services, "qwerty0", "password0")

        await services.users.update_credentials(
            user.id, user.id, Username("qwerty1"), "password0"
        )

        assert await services.auth.refresh_token_pair(pair.refresh) == Unauthorized(
            refresh=True
        )
        assert isinstance(
            await services.auth.issue_token_pair("qwerty1", "password0"), Success
        )

    @pytest.mark.asyncio
    async def test_unchanged_credentials_keep_sessions(self, services):
        user, pair = await self._login(services, "qwerty0", "password0")

        await services.users.update_credentials(
            user.id, user.id, Username("qwerty0"), "password0"
        )

        assert isinstance(await services.auth.refresh_token_pair(pair.refresh), Success)

    @pytest.mark.asyncio
    async def test_taken_username(self, services):
        user = await services.user_repo.save(make_user("qwerty0"))
        await services.user_repo.save(make_user("qwerty1"))

        result = await services.users.update_credentials(
            user.id, user.id, Username("qwerty1"), "password0"
        )

        assert result == ValidationError(
            {"username": "Username already taken by someone else."}
        )

    @pytest.mark.asyncio
    async def test_other_users_account(self, services):
        owner, pair = await self._login(services, "qwerty0", "password0")
        intruder = await services.user_repo.save(make_user("intruder"))

        result = await services.users.update_credentials(
            intruder.id, owner.id, Username("qwerty9"), "password9"
        )

        assert result == AccessViolation()
        assert isinstance(await services.auth.refresh_token_pair(pair.refresh), Success)

    @pytest.mark.asyncio
    async def test_missing_user(self, services):
        requester = await services.user_repo.save(make_user())

        result = await services.users.update_credentials(
            requester.id, UserId(uuid4()), Username("qwerty0"), "password0"
        )

        assert isinstance(result, NotFound)


class TestDelete:
    """Tests for UserService.delete()."""

    @pytest.mark.asyncio
    async def test_delete_removes_user_likes_and_ledger(self, services):
        alice, pair = await self._login(services)
        bob = await services.user_repo.save(make_user("bob000"))
        carol = await services.user_repo.save(make_user("carol00"))
        await services.graph.like(alice.id, bob.id)
        await services.graph.like(carol.id, alice.id)
        await services.graph.like(carol.id, bob.id)

        result = await services.users.delete(alice.id, alice.id)

        assert result == Success(None)
        assert await services.user_repo.find_by_id(alice.id) is None
        assert await services.ledger_repo.find_by_user(alice.id) is None
        for other in await services.user_repo.find_all():
            assert alice.id not in other.profile.liked
            assert alice.id not in other.profile.liked_by
        stored_bob = await services.user_repo.find_by_id(bob.id)
        assert stored_bob.profile.liked_by == (carol.id,)
        assert await services.auth.refresh_token_pair(pair.refresh) == Unauthorized(
            refresh=True
        )

    @pytest.mark.asyncio
    async def test_delete_other_users_account(self, services):
        alice = await services.user_repo.save(make_user("alice00"))
        bob = await services.user_repo.save(make_user("bob000"))

        result = await services.users.delete(bob.id, alice.id)

        assert result == AccessViolation()
        assert await services.user_repo.find_by_id(alice.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, services):
        requester = await services.user_repo.save(make_user())

        assert isinstance(
            await services.users.delete(requester.id, UserId(uuid4())), NotFound
        )

    async def _login(self, services: Services):
        user = await services.user_repo.save(make_user("alice00", "password0"))
        pair = (await services.auth.issue_token_pair("alice00", "password0")).payload
        return user, pair
