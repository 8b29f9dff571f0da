"""PostgreSQL repository implementations."""

from social.persistence.repository.refresh_token_ledger import (
    PostgresRefreshTokenLedgerRepository,
)
from social.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresRefreshTokenLedgerRepository",
    "PostgresUserRepository",
]
