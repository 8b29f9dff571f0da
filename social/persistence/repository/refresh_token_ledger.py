"""PostgreSQL implementation of RefreshTokenLedger repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import RefreshTokenLedger
from social.domain.repository import RefreshTokenLedgerRepository
from social.domain.value import RefreshTokenId, UserId
from social.persistence.mappers import ledger_to_dict, row_to_ledger
from social.persistence.tables import refresh_token_ledgers_table


class PostgresRefreshTokenLedgerRepository(RefreshTokenLedgerRepository):
    """PostgreSQL implementation of RefreshTokenLedgerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[RefreshTokenLedger]:
        """Find the ledger of a user.

        Args:
            user_id: Ledger owner

        Returns:
            Ledger if found, None otherwise
        """
        stmt = select(refresh_token_ledgers_table).where(
            refresh_token_ledgers_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_ledger(dict(row)) if row else None

    async def save(self, ledger: RefreshTokenLedger) -> RefreshTokenLedger:
        """Upsert a ledger.

        Args:
            ledger: Ledger to save

        Returns:
            Saved ledger
        """
        values = ledger_to_dict(ledger)
        stmt = insert(refresh_token_ledgers_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[refresh_token_ledgers_table.c.user_id],
            set_={"token_ids": stmt.excluded.token_ids},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return ledger

    async def replace_token(
        self,
        user_id: UserId,
        old_token_id: RefreshTokenId,
        new_token_id: RefreshTokenId,
    ) -> bool:
        """Swap a token id with a single conditional UPDATE.

        The row lock taken by the UPDATE serializes concurrent swaps; the
        loser re-evaluates the WHERE clause and matches nothing.

        Args:
            user_id: Ledger owner
            old_token_id: Token id being consumed
            new_token_id: Replacement token id

        Returns:
            True if the old id was present and has been replaced
        """
        table = refresh_token_ledgers_table
        array_type = table.c.token_ids.type
        stmt = (
            table.update()
            .where(table.c.user_id == user_id)
            .where(table.c.token_ids.contains([old_token_id]))
            .values(
                token_ids=func.array_append(
                    func.array_remove(table.c.token_ids, old_token_id, type_=array_type),
                    new_token_id,
                    type_=array_type,
                )
            )
            .returning(table.c.user_id)
        )
        result = await self.session.execute(stmt)
        swapped = result.first() is not None
        await self.session.flush()
        return swapped

    async def append_token(self, user_id: UserId, token_id: RefreshTokenId) -> None:
        """Append a token id with one upsert, creating the ledger if needed.

        The array is extended in place on the server, so ids consumed or
        revoked by a concurrent request stay gone.

        Args:
            user_id: Ledger owner
            token_id: New token id
        """
        table = refresh_token_ledgers_table
        stmt = insert(table).values(user_id=user_id, token_ids=[token_id])
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id],
            set_={
                "token_ids": func.array_append(
                    table.c.token_ids, token_id, type_=table.c.token_ids.type
                )
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_tokens(self, user_id: UserId) -> None:
        """Empty a user's ledger with a single UPDATE."""
        table = refresh_token_ledgers_table
        stmt = table.update().where(table.c.user_id == user_id).values(token_ids=[])
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete a user's ledger."""
        stmt = refresh_token_ledgers_table.delete().where(
            refresh_token_ledgers_table.c.user_id == user_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
