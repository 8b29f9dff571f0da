"""Refresh token ledger repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model.refresh_token_ledger import RefreshTokenLedger
from social.domain.value import RefreshTokenId, UserId


class RefreshTokenLedgerRepository(ABC):
    """Repository for refresh token ledgers, keyed by user id."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[RefreshTokenLedger]:
        """Find the ledger of a user.

        Args:
            user_id: Owner of the ledger

        Returns:
            The ledger if one was ever created, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, ledger: RefreshTokenLedger) -> RefreshTokenLedger:
        """Create or overwrite a ledger.

        Args:
            ledger: Ledger to persist

        Returns:
            The saved ledger
        """
        pass

    @abstractmethod
    async def replace_token(
        self,
        user_id: UserId,
        old_token_id: RefreshTokenId,
        new_token_id: RefreshTokenId,
    ) -> bool:
        """Swap one token id for another in a single conditional step.

        The swap only happens while ``old_token_id`` is still in the stored
        ledger, so of two concurrent rotations of the same token at most one
        succeeds.

        Args:
            user_id: Owner of the ledger
            old_token_id: Token id being consumed
            new_token_id: Token id replacing it

        Returns:
            True if the swap happened, False if the old id was already gone
        """
        pass

    @abstractmethod
    async def append_token(self, user_id: UserId, token_id: RefreshTokenId) -> None:
        """Add a token id to the stored ledger in a single step.

        Creates the ledger if the user has none. Ids already in the stored
        ledger, and ids removed from it meanwhile, are left as they are.

        Args:
            user_id: Owner of the ledger
            token_id: New token id
        """
        pass

    @abstractmethod
    async def clear_tokens(self, user_id: UserId) -> None:
        """Empty the stored ledger in a single step; no-op without a ledger.

        Args:
            user_id: Owner of the ledger
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove a user's ledger entirely.

        Args:
            user_id: Owner of the ledger
        """
        pass
