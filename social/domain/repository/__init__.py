"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from social.domain.repository.refresh_token_ledger import RefreshTokenLedgerRepository
from social.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "RefreshTokenLedgerRepository",
]
