"""Test configuration and fixtures."""

from datetime import timedelta
from uuid import uuid4

import logfire
import pytest

from social.config import AuthSettings
from social.domain.model import Profile, User
from social.domain.value import UserId, Username

# Modules under test emit spans; keep them local and quiet
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str | None = None, password: str = "password0", **profile
) -> User:
    """Helper function to build a user with an optional profile.

    Args:
        username: Username (a unique one is generated when omitted)
        password: Password
        **profile: Profile fields, e.g. ``headline="Hi"``

    Returns:
        New, unsaved user
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username or f"user{uuid4().hex[:12]}"),
        password=password,
        profile=Profile(**profile),
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret and default lifetimes."""
    return AuthSettings(
        token_secret="test-secret-0123456789abcdef0123456789",
        access_token_lifetime=timedelta(minutes=15),
        refresh_token_lifetime=timedelta(days=30),
    )
