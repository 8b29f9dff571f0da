"""In-memory repository implementations for testing."""

from .refresh_token_ledger import InMemoryRefreshTokenLedgerRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryRefreshTokenLedgerRepository",
    "InMemoryUserRepository",
]
