"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .refresh_token_ledger_service import RefreshTokenLedgerService
from .social_graph_service import SocialGraphService
from .token_issuer import AccessClaims, RefreshClaims, TokenIssuer, TokenPair
from .user_service import UserService

__all__ = [
    "AccessClaims",
    "AuthService",
    "RefreshClaims",
    "RefreshTokenLedgerService",
    "Service",
    "SocialGraphService",
    "TokenIssuer",
    "TokenPair",
    "UserService",
]
