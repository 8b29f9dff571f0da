"""Refresh token ledger domain service."""

import logfire

from social.domain.model.refresh_token_ledger import (
    RefreshTokenLedger,
    new_refresh_token_id,
)
from social.domain.repository import RefreshTokenLedgerRepository
from social.domain.value import RefreshTokenId, UserId

from .base import Service


class RefreshTokenLedgerService(Service):
    """Domain service for refresh token ledger operations."""

    def __init__(self, ledger_repository: RefreshTokenLedgerRepository) -> None:
        """Initialize ledger service.

        Args:
            ledger_repository: Refresh token ledger repository
        """
        self.ledger_repository = ledger_repository

    async def find_by_user(self, user_id: UserId) -> RefreshTokenLedger | None:
        """Get a user's ledger if it exists."""
        return await self.ledger_repository.find_by_user(user_id)

    async def get_or_create(self, user_id: UserId) -> RefreshTokenLedger:
        """Get a user's ledger, creating an empty one (unsaved) if needed.

        Args:
            user_id: Owner of the ledger

        Returns:
            Existing or new ledger
        """
        ledger = await self.ledger_repository.find_by_user(user_id)
        if ledger is None:
            logfire.info("Creating refresh token ledger", user_id=str(user_id))
            ledger = RefreshTokenLedger(user_id=user_id)
        return ledger

    def add_token(self, ledger: RefreshTokenLedger) -> RefreshTokenId:
        """Add a new token id to the ledger; the caller persists it."""
        return ledger.add_token()

    def revoke_token(self, ledger: RefreshTokenLedger, token_id: RefreshTokenId) -> None:
        """Remove a token id from the ledger; the caller persists it."""
        ledger.revoke_token(token_id)

    def owns_token(self, ledger: RefreshTokenLedger, token_id: RefreshTokenId) -> bool:
        """Check whether the token id is valid in this ledger."""
        return ledger.owns_token(token_id)

    async def save(self, ledger: RefreshTokenLedger) -> RefreshTokenLedger:
        """Persist a ledger."""
        return await self.ledger_repository.save(ledger)

    async def rotate_token(
        self, ledger: RefreshTokenLedger, token_id: RefreshTokenId
    ) -> RefreshTokenId | None:
        """Consume a token id and replace it with a new one.

        The swap is applied to the stored ledger, not just the given copy,
        so a concurrent rotation of the same id loses.

        Args:
            ledger: Ledger as read by the caller
            token_id: Token id being consumed

        Returns:
            The new token id, or None if the old one was no longer valid
        """
        with logfire.span("ledger_service.rotate_token", user_id=str(ledger.user_id)):
            new_token_id = new_refresh_token_id()
            swapped = await self.ledger_repository.replace_token(
                ledger.user_id, token_id, new_token_id
            )
            if not swapped:
                logfire.warn(
                    "Refresh token already consumed", user_id=str(ledger.user_id)
                )
                return None

            ledger.revoke_token(token_id)
            ledger.token_ids.add(new_token_id)
            return new_token_id

    async def issue_token(self, user_id: UserId) -> RefreshTokenId:
        """Generate a token id and append it to the stored ledger.

        The stored ledger is extended directly rather than read, changed and
        written back, so tokens consumed or revoked in the meantime stay gone.

        Args:
            user_id: Owner of the ledger (created if missing)

        Returns:
            The new token id
        """
        token_id = new_refresh_token_id()
        await self.ledger_repository.append_token(user_id, token_id)
        return token_id

    async def revoke_all(self, user_id: UserId) -> None:
        """Invalidate every refresh token of a user.

        Args:
            user_id: Owner of the ledger
        """
        with logfire.span("ledger_service.revoke_all", user_id=str(user_id)):
            await self.ledger_repository.clear_tokens(user_id)
            logfire.info("Refresh tokens revoked", user_id=str(user_id))

    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove a user's ledger entirely."""
        with logfire.span("ledger_service.delete_by_user", user_id=str(user_id)):
            await self.ledger_repository.delete_by_user(user_id)
