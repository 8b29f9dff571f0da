"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .issue_token_pair import IssueTokenPairRequest, IssueTokenPairUseCase
from .logout_all import LogoutAllRequest, LogoutAllUseCase
from .refresh_token_pair import RefreshTokenPairRequest, RefreshTokenPairUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "IssueTokenPairRequest",
    "IssueTokenPairUseCase",
    "LogoutAllRequest",
    "LogoutAllUseCase",
    "RefreshTokenPairRequest",
    "RefreshTokenPairUseCase",
]
