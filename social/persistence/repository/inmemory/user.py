"""In-memory user repository for testing."""

from typing import Optional, Sequence

from social.domain.model.user import User
from social.domain.repository.user import UserRepository
from social.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Users are frozen models, so they are stored as given.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users, preserving the given order."""
        return [self._users[i] for i in user_ids if i in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Return every user in insertion order."""
        return list(self._users.values())

    async def exists_with_username(
        self, username: Username, except_id: Optional[UserId] = None
    ) -> bool:
        """Check whether a username is taken by someone other than ``except_id``."""
        return any(
            user.username == username and user.id != except_id
            for user in self._users.values()
        )

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None

    async def remove_from_all_relations(self, user_id: UserId) -> None:
        """Pull a user id out of every profile's like lists."""
        for other_id, user in list(self._users.items()):
            profile = user.profile
            if user_id not in profile.liked and user_id not in profile.liked_by:
                continue
            self._users[other_id] = user.model_copy(
                update={
                    "profile": profile.model_copy(
                        update={
                            "liked": tuple(i for i in profile.liked if i != user_id),
                            "liked_by": tuple(
                                i for i in profile.liked_by if i != user_id
                            ),
                        }
                    )
                }
            )
