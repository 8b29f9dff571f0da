"""Domain model entities."""

from social.domain.model.refresh_token_ledger import RefreshTokenLedger
from social.domain.model.user import Profile, User

__all__ = [
    "User",
    "Profile",
    "RefreshTokenLedger",
]
