"""Domain layer DI providers."""

from dishka import Scope, provide

from social.config import AuthSettings
from social.domain.repository import RefreshTokenLedgerRepository, UserRepository
from social.domain.service import (
    AuthService,
    RefreshTokenLedgerService,
    SocialGraphService,
    TokenIssuer,
    UserService,
)
from social.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_issuer(self, auth_settings: AuthSettings) -> TokenIssuer:
        """Provide token issuer; stateless, so shared for the app lifetime."""
        return TokenIssuer(auth_settings=auth_settings)

    @provide
    def get_ledger_service(
        self, ledger_repository: RefreshTokenLedgerRepository
    ) -> RefreshTokenLedgerService:
        """Provide refresh token ledger domain service."""
        return RefreshTokenLedgerService(ledger_repository=ledger_repository)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        ledger_service: RefreshTokenLedgerService,
        token_issuer: TokenIssuer,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            ledger_service=ledger_service,
            token_issuer=token_issuer,
        )

    @provide
    def get_social_graph_service(
        self, user_repository: UserRepository
    ) -> SocialGraphService:
        """Provide social graph domain service."""
        return SocialGraphService(user_repository=user_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        auth_service: AuthService,
        ledger_service: RefreshTokenLedgerService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            auth_service=auth_service,
            ledger_service=ledger_service,
        )
