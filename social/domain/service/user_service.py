"""User domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.result import AccessViolation, NotFound, Success, ValidationError
from social.domain.value import UserId, Username

from .auth_service import AuthService
from .base import Service
from .refresh_token_ledger_service import RefreshTokenLedgerService
from .social_graph_service import USER_NOT_FOUND

USERNAME_TAKEN = "Username already taken by someone else."


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_service: AuthService,
        ledger_service: RefreshTokenLedgerService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_service: Auth service, used to revoke tokens
            ledger_service: Refresh token ledger service
        """
        self.user_repository = user_repository
        self.auth_service = auth_service
        self.ledger_service = ledger_service

    async def register(
        self, username: Username, password: str
    ) -> Success[UserId] | ValidationError:
        """Create a new user with an empty profile.

        Args:
            username: Desired username
            password: Password

        Returns:
            The new user's id, or a field error if the username is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.exists_with_username(username):
                logfire.warn("Username taken", username=username.root)
                return ValidationError({"username": USERNAME_TAKEN})

            user = User(id=UserId(uuid4()), username=username, password=password)
            await self.user_repository.save(user)

            logfire.info("User registered", user_id=str(user.id))
            return Success(user.id)

    async def get_all(self) -> Success[list[User]]:
        """List all users."""
        return Success(await self.user_repository.find_all())

    async def get_by_id(self, user_id: UserId) -> Success[User] | NotFound:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity, or NotFound
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                return NotFound(USER_NOT_FOUND)
            return Success(user)

    async def update_credentials(
        self,
        requester_id: UserId,
        user_id: UserId,
        username: Username,
        password: str,
    ) -> Success[None] | NotFound | ValidationError | AccessViolation:
        """Change a user's username and password.

        If either value actually changes, every refresh token of the user is
        revoked so existing sessions must log in again.

        Args:
            requester_id: Authenticated user
            user_id: Account being changed
            username: New username
            password: New password

        Returns:
            Success, NotFound, ValidationError (username taken) or
            AccessViolation (not the owner)
        """
        with logfire.span(
            "user_service.update_credentials",
            requester_id=str(requester_id),
            user_id=str(user_id),
        ):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return NotFound(USER_NOT_FOUND)

            if await self.user_repository.exists_with_username(username, user_id):
                return ValidationError({"username": USERNAME_TAKEN})

            if user.id != requester_id:
                logfire.warn(
                    "Credential update by non-owner",
                    requester_id=str(requester_id),
                    user_id=str(user_id),
                )
                return AccessViolation()

            if username != user.username or password != user.password:
                await self.auth_service.revoke_all_tokens(user.id)

            await self.user_repository.save(
                user.model_copy(
                    update={
                        "username": username,
                        "password": password,
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
            )
            logfire.info("Credentials updated", user_id=str(user_id))
            return Success(None)

    async def delete(
        self, requester_id: UserId, user_id: UserId
    ) -> Success[None] | NotFound | AccessViolation:
        """Delete an account and everything that hangs off it.

        The user is pulled out of every other profile's likes, its refresh
        token ledger is dropped, then the user itself.

        Args:
            requester_id: Authenticated user
            user_id: Account being deleted

        Returns:
            Success, NotFound, or AccessViolation (not the owner)
        """
        with logfire.span(
            "user_service.delete", requester_id=str(requester_id), user_id=str(user_id)
        ):
            if await self.user_repository.find_by_id(user_id) is None:
                return NotFound(USER_NOT_FOUND)

            if user_id != requester_id:
                return AccessViolation()

            await self.user_repository.remove_from_all_relations(user_id)
            await self.ledger_service.delete_by_user(user_id)
            await self.user_repository.delete(user_id)

            logfire.info("User deleted", user_id=str(user_id))
            return Success(None)
