"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import UserId, Username
from social.persistence.mappers import row_to_user, user_to_dict
from social.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users, preserving the order of ``user_ids``."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        by_id = {row["id"]: row_to_user(dict(row)) for row in result.mappings()}
        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> list[User]:
        """Return every user, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def exists_with_username(
        self, username: Username, except_id: Optional[UserId] = None
    ) -> bool:
        """Check whether a username is taken by someone other than ``except_id``."""
        stmt = select(users_table.c.id).where(users_table.c.username == username.root)
        if except_id is not None:
            stmt = stmt.where(users_table.c.id != except_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        # Check if user exists
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            # Update
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            # Insert
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: User ID to delete

        Returns:
            True if a row was deleted
        """
        stmt = users_table.delete().where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def remove_from_all_relations(self, user_id: UserId) -> None:
        """Pull a user id out of every liked/liked_by array in one statement.

        Args:
            user_id: User being removed from the graph
        """
        liked_type = users_table.c.liked.type
        stmt = (
            users_table.update()
            .where(
                users_table.c.liked.contains([user_id])
                | users_table.c.liked_by.contains([user_id])
            )
            .values(
                liked=func.array_remove(users_table.c.liked, user_id, type_=liked_type),
                liked_by=func.array_remove(
                    users_table.c.liked_by, user_id, type_=liked_type
                ),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
