"""Bearer token authentication for routes."""

import logging

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from social.domain.result import Success
from social.domain.service import AuthService
from social.domain.value import UserId

logger = logging.getLogger(__name__)

# auto_error=False so a missing header gives 401 (FastAPI's default is 403)
bearer_scheme = HTTPBearer(auto_error=False)


async def require_user(
    credentials: HTTPAuthorizationCredentials | None, auth_service: AuthService
) -> UserId:
    """Resolve the bearer token of a request to an existing user.

    Args:
        credentials: Parsed Authorization header, if any
        auth_service: Authentication domain service

    Returns:
        Id of the authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired, or
            belongs to a user that no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await auth_service.authenticate(credentials.credentials)
    if not isinstance(result, Success):
        logger.debug("Bearer token rejected")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.payload
