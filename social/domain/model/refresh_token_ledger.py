"""Refresh token ledger aggregate.

The ledger is the sole authority on refresh token validity: a signed
refresh token is only accepted while its embedded token id is present in
the ledger of the user it names.
"""

from uuid import uuid4

from pydantic import ConfigDict, Field

from social.domain.model.common import DomainModel
from social.domain.value import RefreshTokenId, UserId


def new_refresh_token_id() -> RefreshTokenId:
    """Generate a fresh, unguessable refresh token id."""
    return RefreshTokenId(uuid4())


class RefreshTokenLedger(DomainModel):
    """Per-user set of currently valid refresh token ids.

    Unlike the other domain models the ledger is mutable: callers change it
    in place and then persist it through the repository.
    """

    model_config = ConfigDict(frozen=False)

    user_id: UserId
    token_ids: set[RefreshTokenId] = Field(default_factory=set)

    def add_token(self) -> RefreshTokenId:
        """Generate a new token id and add it to the ledger.

        Returns:
            The new token id
        """
        token_id = new_refresh_token_id()
        self.token_ids.add(token_id)
        return token_id

    def revoke_token(self, token_id: RefreshTokenId) -> None:
        """Remove a token id; absent ids are ignored."""
        self.token_ids.discard(token_id)

    def owns_token(self, token_id: RefreshTokenId) -> bool:
        """Check whether the token id is currently valid for this user."""
        return token_id in self.token_ids

    def revoke_all(self) -> None:
        """Invalidate every outstanding refresh token of the user."""
        self.token_ids.clear()
