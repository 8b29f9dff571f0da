"""JWT token utilities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from social.config import AuthSettings


@dataclass(frozen=True)
class TokenVerifyError:
    """Token could not be verified.

    ``reason`` is for logs only and must not reach API responses.
    """

    reason: str


def encode_token(subject: str | list[str], lifetime: timedelta, settings: AuthSettings) -> str:
    """Sign a token carrying only ``sub`` and ``exp``.

    Args:
        subject: Subject claim (a string or a list of strings)
        lifetime: Time until the token expires
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": subject,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, settings.token_secret, algorithm=settings.token_algorithm)


def decode_token(token: str, settings: AuthSettings) -> dict[str, Any] | TokenVerifyError:
    """Verify signature and expiry of a token and return its claims.

    Subject shape is left to the caller: refresh tokens carry a list
    subject, which PyJWT would otherwise reject.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Claims if valid, TokenVerifyError otherwise
    """
    try:
        return jwt.decode(
            token,
            settings.token_secret,
            algorithms=[settings.token_algorithm],
            options={"require": ["exp", "sub"], "verify_sub": False},
        )
    except jwt.ExpiredSignatureError:
        return TokenVerifyError("Token has expired")
    except jwt.InvalidTokenError as e:
        return TokenVerifyError(f"Invalid token: {e}")


def parse_uuid(value: Any) -> UUID | None:
    """Parse a claim value as UUID, or None if it is not one."""
    if not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None
