"""Token issuing domain service."""

from dataclasses import dataclass

import logfire
from pydantic import BaseModel

from social.config import AuthSettings
from social.domain.value import RefreshTokenId, UserId
from social.util.jwt import TokenVerifyError, decode_token, encode_token, parse_uuid

from .base import Service


class TokenPair(BaseModel):
    """Access/refresh token pair handed to clients."""

    access: str
    refresh: str


@dataclass(frozen=True)
class AccessClaims:
    """Verified access token subject."""

    user_id: UserId


@dataclass(frozen=True)
class RefreshClaims:
    """Verified refresh token subject."""

    user_id: UserId
    token_id: RefreshTokenId


class TokenIssuer(Service):
    """Signs and verifies access/refresh tokens.

    Access tokens carry ``sub=user_id``; refresh tokens carry
    ``sub=[user_id, refresh_token_id]``. No I/O happens here.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token issuer.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue_pair(self, user_id: UserId, refresh_token_id: RefreshTokenId) -> TokenPair:
        """Create a signed token pair.

        Args:
            user_id: Subject of both tokens
            refresh_token_id: Ledger entry the refresh token is bound to

        Returns:
            New token pair
        """
        access = encode_token(
            str(user_id), self.auth_settings.access_token_lifetime, self.auth_settings
        )
        refresh = encode_token(
            [str(user_id), str(refresh_token_id)],
            self.auth_settings.refresh_token_lifetime,
            self.auth_settings,
        )
        logfire.info("Token pair issued", user_id=str(user_id))
        return TokenPair(access=access, refresh=refresh)

    def verify_access_token(self, token: str) -> AccessClaims | TokenVerifyError:
        """Verify an access token and extract its user id.

        Args:
            token: Access token string

        Returns:
            Claims if valid, TokenVerifyError otherwise
        """
        claims = decode_token(token, self.auth_settings)
        if isinstance(claims, TokenVerifyError):
            return claims

        user_id = parse_uuid(claims.get("sub"))
        if user_id is None:
            return TokenVerifyError("Access token subject is not a user id")
        return AccessClaims(user_id=UserId(user_id))

    def verify_refresh_token(self, token: str) -> RefreshClaims | TokenVerifyError:
        """Verify a refresh token and extract its [user id, token id] subject.

        Args:
            token: Refresh token string

        Returns:
            Claims if valid, TokenVerifyError otherwise
        """
        claims = decode_token(token, self.auth_settings)
        if isinstance(claims, TokenVerifyError):
            return claims

        subject = claims.get("sub")
        if not isinstance(subject, list) or len(subject) != 2:
            return TokenVerifyError("Refresh token subject is not a pair")

        user_id, token_id = (parse_uuid(part) for part in subject)
        if user_id is None or token_id is None:
            return TokenVerifyError("Refresh token subject contains invalid ids")
        return RefreshClaims(user_id=UserId(user_id), token_id=RefreshTokenId(token_id))
