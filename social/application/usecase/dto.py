"""Response DTOs shared by several use cases."""

from pydantic import BaseModel

from social.domain.model import Profile, User
from social.domain.value import Contact


class ContactDto(BaseModel):
    """A single contact entry of a profile."""

    type: str
    value: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactDto":
        return cls(type=contact.type, value=contact.value)


class UserDto(BaseModel):
    """Public summary of a user."""

    id: str
    username: str
    headline: str | None
    likes: int  # Number of fans

    @classmethod
    def from_user(cls, user: User) -> "UserDto":
        """Build the DTO from a user aggregate."""
        return cls(
            id=str(user.id),
            username=user.username.root,
            headline=user.profile.headline,
            likes=user.profile.likes,
        )


class ProfileDto(BaseModel):
    """Public view of a profile."""

    headline: str | None
    bio: str | None
    likes: int
    contacts: list[ContactDto]

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileDto":
        """Build the DTO from an embedded profile."""
        return cls(
            headline=profile.headline,
            bio=profile.bio,
            likes=profile.likes,
            contacts=[ContactDto.from_contact(c) for c in profile.contacts],
        )
