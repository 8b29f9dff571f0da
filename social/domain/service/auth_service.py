"""Authentication domain service.

Covers the whole token lifecycle:

- issuing a pair for valid credentials (adds a ledger entry),
- refreshing a pair (rotates the ledger entry, so refresh tokens are single use),
- authenticating access tokens,
- revoking everything on logout-all or credential change.
"""

import logfire

from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.result import Success, Unauthorized, ValidationError
from social.domain.value import UserId, Username
from social.util.jwt import TokenVerifyError

from .base import Service
from .refresh_token_ledger_service import RefreshTokenLedgerService
from .token_issuer import TokenIssuer, TokenPair


class AuthService(Service):
    """Domain service for credential verification and token rotation."""

    def __init__(
        self,
        user_repository: UserRepository,
        ledger_service: RefreshTokenLedgerService,
        token_issuer: TokenIssuer,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            ledger_service: Refresh token ledger service
            token_issuer: Token issuer
        """
        self.user_repository = user_repository
        self.ledger_service = ledger_service
        self.token_issuer = token_issuer

    async def issue_token_pair(
        self, username: str, password: str
    ) -> Success[TokenPair] | ValidationError:
        """Exchange credentials for a new token pair.

        Args:
            username: Login name
            password: Plain password

        Returns:
            Token pair, or field errors for unknown user / wrong password
        """
        with logfire.span("auth_service.issue_token_pair"):
            user = await self._find_by_username(username)
            if user is None:
                logfire.warn("Token requested for unknown username")
                return ValidationError(
                    {"username": "User with such username does not exist."}
                )
            if password != user.password:
                logfire.warn("Token requested with wrong password", user_id=str(user.id))
                return ValidationError({"password": "Incorrect password provided."})

            token_id = await self.ledger_service.issue_token(user.id)

            return Success(self.token_issuer.issue_pair(user.id, token_id))

    async def refresh_token_pair(
        self, refresh_token: str
    ) -> Success[TokenPair] | Unauthorized:
        """Exchange a refresh token for a new pair, consuming the old one.

        Every failure (bad signature, expiry, malformed subject, unknown or
        already used token id) maps to the same ``Unauthorized(refresh=True)``.

        Args:
            refresh_token: Refresh token string

        Returns:
            New token pair bound to a new ledger entry, or Unauthorized
        """
        with logfire.span("auth_service.refresh_token_pair"):
            claims = self.token_issuer.verify_refresh_token(refresh_token)
            if isinstance(claims, TokenVerifyError):
                logfire.warn("Refresh token rejected", reason=claims.reason)
                return Unauthorized(refresh=True)

            ledger = await self.ledger_service.find_by_user(claims.user_id)
            if ledger is None or not self.ledger_service.owns_token(
                ledger, claims.token_id
            ):
                logfire.warn(
                    "Refresh token not in ledger", user_id=str(claims.user_id)
                )
                return Unauthorized(refresh=True)

            new_token_id = await self.ledger_service.rotate_token(
                ledger, claims.token_id
            )
            if new_token_id is None:
                return Unauthorized(refresh=True)

            return Success(self.token_issuer.issue_pair(claims.user_id, new_token_id))

    async def authenticate(self, access_token: str) -> Success[UserId] | Unauthorized:
        """Resolve an access token to an existing user.

        Args:
            access_token: Bearer token from the request

        Returns:
            The user id, or Unauthorized(access=True)
        """
        claims = self.token_issuer.verify_access_token(access_token)
        if isinstance(claims, TokenVerifyError):
            logfire.debug("Access token rejected", reason=claims.reason)
            return Unauthorized(access=True)

        if await self.user_repository.find_by_id(claims.user_id) is None:
            logfire.warn("Access token for missing user", user_id=str(claims.user_id))
            return Unauthorized(access=True)

        return Success(claims.user_id)

    async def get_user_info(self, user_id: UserId) -> Success[User | None]:
        """Look up the user behind an authenticated request.

        A missing user is not reported as a failure here; the payload is
        simply None.

        Args:
            user_id: Authenticated user id

        Returns:
            The user, or None if it no longer exists
        """
        with logfire.span("auth_service.get_user_info", user_id=str(user_id)):
            return Success(await self.user_repository.find_by_id(user_id))

    async def revoke_all_tokens(self, user_id: UserId) -> None:
        """Invalidate every refresh token of a user, forcing re-login.

        Args:
            user_id: User whose tokens to revoke
        """
        await self.ledger_service.revoke_all(user_id)

    async def _find_by_username(self, username: str) -> User | None:
        try:
            parsed = Username(username)
        except ValueError:
            # Can't be a stored username
            return None
        return await self.user_repository.find_by_username(parsed)
