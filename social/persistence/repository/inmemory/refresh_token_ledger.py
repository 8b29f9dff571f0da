"""In-memory refresh token ledger repository for testing."""

from typing import Optional

from social.domain.model.refresh_token_ledger import RefreshTokenLedger
from social.domain.repository.refresh_token_ledger import (
    RefreshTokenLedgerRepository,
)
from social.domain.value import RefreshTokenId, UserId


class InMemoryRefreshTokenLedgerRepository(RefreshTokenLedgerRepository):
    """In-memory implementation of RefreshTokenLedgerRepository for testing.

    Ledgers are mutable, so copies go in and out; changing a loaded ledger
    has no effect until it is saved.
    """

    def __init__(self) -> None:
        self._ledgers: dict[UserId, RefreshTokenLedger] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[RefreshTokenLedger]:
        """Find the ledger of a user."""
        ledger = self._ledgers.get(user_id)
        return ledger.model_copy(deep=True) if ledger else None

    async def save(self, ledger: RefreshTokenLedger) -> RefreshTokenLedger:
        """Create or overwrite a ledger."""
        self._ledgers[ledger.user_id] = ledger.model_copy(deep=True)
        return ledger

    async def replace_token(
        self,
        user_id: UserId,
        old_token_id: RefreshTokenId,
        new_token_id: RefreshTokenId,
    ) -> bool:
        """Swap a token id; check and set run without yielding to the loop."""
        ledger = self._ledgers.get(user_id)
        if ledger is None or old_token_id not in ledger.token_ids:
            return False
        ledger.token_ids.discard(old_token_id)
        ledger.token_ids.add(new_token_id)
        return True

    async def append_token(self, user_id: UserId, token_id: RefreshTokenId) -> None:
        """Add a token id to the stored ledger, creating it if needed."""
        ledger = self._ledgers.setdefault(user_id, RefreshTokenLedger(user_id=user_id))
        ledger.token_ids.add(token_id)

    async def clear_tokens(self, user_id: UserId) -> None:
        """Empty the stored ledger, if any."""
        ledger = self._ledgers.get(user_id)
        if ledger is not None:
            ledger.token_ids.clear()

    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove a user's ledger."""
        self._ledgers.pop(user_id, None)
