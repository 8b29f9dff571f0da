"""Mapping of domain results to HTTP responses."""

from typing import Any, assert_never

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from social.domain.result import (
    AccessViolation,
    Conflict,
    Failure,
    NotFound,
    Success,
    Unauthorized,
    ValidationError,
)


def to_response(
    result: Success[Any] | Failure, success_status: int = status.HTTP_200_OK
) -> Response:
    """Turn a use case result into a response.

    - Success: ``success_status`` with the payload as JSON (empty body for None)
    - ValidationError: 400 with the field map
    - Unauthorized: 401 with the failed token flag, e.g. ``{"refresh": true}``
    - AccessViolation: 403, no body
    - NotFound: 404 with the message
    - Conflict: 400 with the message

    Args:
        result: Result returned by a use case
        success_status: Status code for the success case

    Returns:
        Response to send
    """
    match result:
        case Success(payload=None):
            return Response(status_code=success_status)
        case Success(payload=payload):
            return JSONResponse(jsonable_encoder(payload), status_code=success_status)
        case ValidationError(errors=errors):
            return JSONResponse(errors, status_code=status.HTTP_400_BAD_REQUEST)
        case Unauthorized():
            return JSONResponse(
                result.details(), status_code=status.HTTP_401_UNAUTHORIZED
            )
        case AccessViolation():
            return Response(status_code=status.HTTP_403_FORBIDDEN)
        case NotFound(message=message):
            return JSONResponse(message, status_code=status.HTTP_404_NOT_FOUND)
        case Conflict(message=message):
            return JSONResponse(message, status_code=status.HTTP_400_BAD_REQUEST)
        case _:
            assert_never(result)
