"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from social.domain.model import RefreshTokenLedger
from social.domain.value import Contact, RefreshTokenId, UserId
from social.persistence.mappers import (
    ledger_to_dict,
    row_to_ledger,
    row_to_user,
    user_to_dict,
)
from tests.conftest import make_user


def test_user_to_dict_flattens_profile():
    fan = UserId(uuid4())
    user = make_user(
        "qwerty0",
        headline="Hello",
        contacts=(Contact(type="email", value="q@example.com"),),
        liked_by=(fan,),
    )

    row = user_to_dict(user)

    assert row["username"] == "qwerty0"
    assert row["headline"] == "Hello"
    assert row["bio"] is None
    assert row["contacts"] == [{"type": "email", "value": "q@example.com"}]
    assert row["liked"] == []
    assert row["liked_by"] == [fan]


def test_row_to_user_accepts_string_ids_and_nulls():
    user_id, fan = uuid4(), uuid4()
    now = datetime.now(timezone.utc)

    user = row_to_user(
        {
            "id": str(user_id),
            "username": "qwerty0",
            "password": "password0",
            "headline": None,
            "bio": "About me",
            "contacts": None,
            "liked": None,
            "liked_by": [str(fan)],
            "created_at": now,
            "updated_at": now,
        }
    )

    assert user.id == user_id
    assert user.profile.bio == "About me"
    assert user.profile.contacts == ()
    assert user.profile.liked == ()
    assert user.profile.liked_by == (fan,)
    assert user.profile.likes == 1


def test_ledger_mapping():
    user_id = UserId(uuid4())
    token = RefreshTokenId(uuid4())

    row = ledger_to_dict(RefreshTokenLedger(user_id=user_id, token_ids={token}))
    ledger = row_to_ledger(row)

    assert row == {"user_id": user_id, "token_ids": [token]}
    assert ledger.owns_token(token)


def test_row_to_ledger_without_tokens():
    ledger = row_to_ledger({"user_id": uuid4(), "token_ids": None})

    assert ledger.token_ids == set()
