"""Social graph domain service.

Maintains the like relation between users. Each like is stored on both
sides (``liked`` on the requester, ``liked_by`` on the target) and written
as two separate saves, requester first. The two writes are not atomic at
this level: with a store that commits each save on its own, a failure
between them leaves the relation one-sided. The production persistence
layer runs both in the request's transaction.
"""

from collections.abc import Sequence
from datetime import datetime, timezone

import logfire

from social.domain.model import Profile, User
from social.domain.repository import UserRepository
from social.domain.result import AccessViolation, Conflict, NotFound, Success
from social.domain.value import Contact, UserId

from .base import Service

USER_NOT_FOUND = "User with provided id does not exist."


class SocialGraphService(Service):
    """Domain service for profiles and the like/unlike graph."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize social graph service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def like(
        self, requester_id: UserId, target_id: UserId
    ) -> Success[None] | NotFound | Conflict:
        """Make the requester like the target's profile.

        Self-likes are not rejected.

        Args:
            requester_id: Authenticated user
            target_id: Owner of the profile being liked

        Returns:
            Success, NotFound if either user is missing, Conflict if already liked
        """
        with logfire.span(
            "social_graph.like", requester_id=str(requester_id), target_id=str(target_id)
        ):
            target = await self.user_repository.find_by_id(target_id)
            if target is None:
                logfire.warn("Like on non-existent user", target_id=str(target_id))
                return NotFound(USER_NOT_FOUND)

            requester = await self._get_requester(requester_id, target)
            if requester is None:
                logfire.warn("Like by non-existent user", requester_id=str(requester_id))
                return NotFound(USER_NOT_FOUND)
            if target.id in requester.profile.liked:
                return Conflict("User profile is already liked by the requester.")

            requester = await self.user_repository.save(
                _with_profile(requester, liked=(*requester.profile.liked, target.id))
            )
            # Self-like: both sides live on one document, continue from the saved copy
            target = requester if target.id == requester.id else target
            await self.user_repository.save(
                _with_profile(target, liked_by=(*target.profile.liked_by, requester.id))
            )

            logfire.info(
                "Profile liked", requester_id=str(requester_id), target_id=str(target_id)
            )
            return Success(None)

    async def unlike(
        self, requester_id: UserId, target_id: UserId
    ) -> Success[None] | NotFound | Conflict:
        """Remove the requester's like from the target's profile.

        Args:
            requester_id: Authenticated user
            target_id: Owner of the profile being unliked

        Returns:
            Success, NotFound if either user is missing, Conflict if not liked
        """
        with logfire.span(
            "social_graph.unlike",
            requester_id=str(requester_id),
            target_id=str(target_id),
        ):
            target = await self.user_repository.find_by_id(target_id)
            if target is None:
                logfire.warn("Unlike on non-existent user", target_id=str(target_id))
                return NotFound(USER_NOT_FOUND)

            requester = await self._get_requester(requester_id, target)
            if requester is None:
                logfire.warn("Unlike by non-existent user", requester_id=str(requester_id))
                return NotFound(USER_NOT_FOUND)
            if target.id not in requester.profile.liked:
                return Conflict("User profile was not previously liked by the requester.")

            requester = await self.user_repository.save(
                _with_profile(
                    requester, liked=_without(requester.profile.liked, target.id)
                )
            )
            target = requester if target.id == requester.id else target
            await self.user_repository.save(
                _with_profile(
                    target, liked_by=_without(target.profile.liked_by, requester.id)
                )
            )

            logfire.info(
                "Profile unliked",
                requester_id=str(requester_id),
                target_id=str(target_id),
            )
            return Success(None)

    async def get_profile(self, user_id: UserId) -> Success[Profile] | NotFound:
        """Get a user's profile.

        Args:
            user_id: Profile owner

        Returns:
            The profile, or NotFound
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return NotFound(USER_NOT_FOUND)
        return Success(user.profile)

    async def get_fans(self, user_id: UserId) -> Success[list[User]] | NotFound:
        """Get the users that like a profile.

        Args:
            user_id: Profile owner

        Returns:
            Fans in the order they liked, or NotFound
        """
        with logfire.span("social_graph.get_fans", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return NotFound(USER_NOT_FOUND)
            return Success(await self.user_repository.find_by_ids(user.profile.liked_by))

    async def get_favorites(self, user_id: UserId) -> Success[list[User]] | NotFound:
        """Get the users whose profiles a user likes.

        Args:
            user_id: The liking user

        Returns:
            Liked users in the order they were liked, or NotFound
        """
        with logfire.span("social_graph.get_favorites", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return NotFound(USER_NOT_FOUND)
            return Success(await self.user_repository.find_by_ids(user.profile.liked))

    async def update_user_profile(
        self,
        requester_id: UserId,
        user_id: UserId,
        headline: str | None,
        bio: str | None,
        contacts: Sequence[Contact],
    ) -> Success[None] | NotFound | AccessViolation:
        """Overwrite headline, bio and contacts of a profile.

        Only the owner may do this. Likes are kept.

        Args:
            requester_id: Authenticated user
            user_id: Profile owner
            headline: New headline (None clears it)
            bio: New bio (None clears it)
            contacts: New contact list

        Returns:
            Success, NotFound, or AccessViolation for non-owners
        """
        with logfire.span(
            "social_graph.update_user_profile",
            requester_id=str(requester_id),
            user_id=str(user_id),
        ):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return NotFound(USER_NOT_FOUND)

            if user.id != requester_id:
                logfire.warn(
                    "Profile update by non-owner",
                    requester_id=str(requester_id),
                    user_id=str(user_id),
                )
                return AccessViolation()

            await self.user_repository.save(
                _with_profile(user, headline=headline, bio=bio, contacts=tuple(contacts))
            )
            logfire.info("Profile updated", user_id=str(user_id))
            return Success(None)

    async def _get_requester(self, requester_id: UserId, target: User) -> User | None:
        # None when the account was deleted after the request authenticated
        if requester_id == target.id:
            return target
        return await self.user_repository.find_by_id(requester_id)


def _with_profile(user: User, **changes: object) -> User:
    """Copy a user with some profile fields replaced."""
    return user.model_copy(
        update={
            "profile": user.profile.model_copy(update=changes),
            "updated_at": datetime.now(timezone.utc),
        }
    )


def _without(ids: tuple[UserId, ...], user_id: UserId) -> tuple[UserId, ...]:
    """Drop the first occurrence of an id."""
    items = list(ids)
    if user_id in items:
        items.remove(user_id)
    return tuple(items)
