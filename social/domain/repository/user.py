"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from social.domain.model.user import User
from social.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once.

        Unknown ids are skipped. Results follow the order of ``user_ids``.

        Args:
            user_ids: Identifiers to look up

        Returns:
            The users that exist
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return every user."""
        pass

    @abstractmethod
    async def exists_with_username(
        self, username: Username, except_id: Optional[UserId] = None
    ) -> bool:
        """Check whether a username is taken.

        Args:
            username: Username to check
            except_id: User to ignore (the one being updated)

        Returns:
            True if another user already has this username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted
        """
        pass

    @abstractmethod
    async def remove_from_all_relations(self, user_id: UserId) -> None:
        """Pull a user id out of every profile's liked and liked_by lists.

        Args:
            user_id: The user being removed from the graph
        """
        pass
