"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from social.domain.model import Profile, RefreshTokenLedger, User
from social.domain.value import Contact, RefreshTokenId, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password=row["password"],
        profile=Profile(
            headline=row.get("headline"),
            bio=row.get("bio"),
            contacts=tuple(Contact(**contact) for contact in row.get("contacts") or []),
            liked=tuple(UserId(_uuid(i)) for i in row.get("liked") or []),
            liked_by=tuple(UserId(_uuid(i)) for i in row.get("liked_by") or []),
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password": user.password,
        "headline": user.profile.headline,
        "bio": user.profile.bio,
        "contacts": [contact.model_dump() for contact in user.profile.contacts],
        "liked": list(user.profile.liked),
        "liked_by": list(user.profile.liked_by),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_ledger(row: Dict[str, Any]) -> RefreshTokenLedger:
    """Convert database row to RefreshTokenLedger.

    Args:
        row: Database row as dict

    Returns:
        Ledger domain model
    """
    return RefreshTokenLedger(
        user_id=UserId(_uuid(row["user_id"])),
        token_ids={RefreshTokenId(_uuid(i)) for i in row.get("token_ids") or []},
    )


def ledger_to_dict(ledger: RefreshTokenLedger) -> Dict[str, Any]:
    """Convert RefreshTokenLedger to database dict."""
    return {
        "user_id": ledger.user_id,
        "token_ids": list(ledger.token_ids),
    }
