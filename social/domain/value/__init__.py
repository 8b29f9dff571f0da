"""Domain value objects."""

from social.domain.value.identifiers import RefreshTokenId, UserId
from social.domain.value.types import Contact, Username

__all__ = [
    # Identifiers
    "UserId",
    "RefreshTokenId",
    # Types
    "Username",
    "Contact",
]
