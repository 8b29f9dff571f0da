"""User aggregate root.

A user owns its credentials and an embedded profile. The profile carries
both directions of the like relation so fans and favorites can be read
from a single document.
"""

from datetime import datetime, timezone

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import Contact, UserId, Username


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Profile(DomainModel):
    """Public profile embedded in a user.

    Invariant maintained by the social graph service: B is in A.liked
    exactly when A is in B.liked_by.
    """

    headline: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=4000)
    contacts: tuple[Contact, ...] = ()
    liked: tuple[UserId, ...] = ()  # Users this user likes
    liked_by: tuple[UserId, ...] = ()  # Users that like this user

    @property
    def likes(self) -> int:
        """Number of users that like this profile."""
        return len(self.liked_by)


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    # Stored and compared as given; no hashing in this system.
    password: str = Field(min_length=6, max_length=20)
    profile: Profile = Field(default_factory=Profile)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
