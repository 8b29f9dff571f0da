"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response
from fastapi.security import HTTPAuthorizationCredentials

from social.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    IssueTokenPairRequest,
    IssueTokenPairUseCase,
    LogoutAllRequest,
    LogoutAllUseCase,
    RefreshTokenPairRequest,
    RefreshTokenPairUseCase,
)
from social.application.usecase.dto import UserDto
from social.domain.service import AuthService, TokenPair
from social.interface.api.results import to_response
from social.interface.api.security import bearer_scheme, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/token", response_model=TokenPair)
async def issue_token_pair(
    request: IssueTokenPairRequest,
    issue_token_pair_use_case: FromDishka[IssueTokenPairUseCase],
) -> Response:
    """Exchange username and password for an access/refresh token pair.

    Args:
        request: Credentials
        issue_token_pair_use_case: Issue token pair use case from DI

    Returns:
        200 with ``{access, refresh}``, or 400 with ``{username?, password?}``

    Example:
        POST /auth/token
        {"username": "qwerty0", "password": "password0"}
    """
    return to_response(await issue_token_pair_use_case.execute(request))


@router.post("/refresh", response_model=TokenPair)
async def refresh_token_pair(
    request: RefreshTokenPairRequest,
    refresh_token_pair_use_case: FromDishka[RefreshTokenPairUseCase],
) -> Response:
    """Exchange a refresh token for a new pair.

    Refresh tokens are single use: the token sent here stops working.

    Returns:
        200 with ``{access, refresh}``, or 401 with ``{"refresh": true}``
    """
    return to_response(await refresh_token_pair_use_case.execute(request))


@router.get("/me", response_model=UserDto)
async def get_current_user(
    auth_service: FromDishka[AuthService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Get the user behind the bearer token.

    Returns:
        200 with the user DTO, or 401
    """
    user_id = await require_user(credentials, auth_service)
    return to_response(
        await get_current_user_use_case.execute(GetCurrentUserRequest(user_id=user_id))
    )


@router.post("/logout-all")
async def logout_all(
    auth_service: FromDishka[AuthService],
    logout_all_use_case: FromDishka[LogoutAllUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Revoke every refresh token of the caller.

    Returns:
        200 with an empty body, or 401
    """
    user_id = await require_user(credentials, auth_service)
    logger.info("Logging out all sessions of user %s", user_id)
    return to_response(await logout_all_use_case.execute(LogoutAllRequest(user_id=user_id)))
