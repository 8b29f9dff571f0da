"""Request validation error handling.

FastAPI reports malformed requests as 422 with a list of errors. This API
answers 400 with a flat ``{field: message}`` map instead, keeping only the
first message per field.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Where a request part is named after its location rather than a field
_LOCATIONS = {"body", "path", "query", "header", "cookie"}

_FIELD_LABELS = {
    "body": "Request body",
    "refresh": "Refresh token",
}


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc if p not in _LOCATIONS]
    if not parts:
        # The whole body (or another location) is missing or malformed
        return str(loc[0]) if loc else "body"
    return ".".join(parts)


def _label(field: str) -> str:
    last = field.rsplit(".", 1)[-1]
    return _FIELD_LABELS.get(last, last.replace("_", " ").capitalize())


def _is_empty(error: dict[str, Any]) -> bool:
    # An empty string where at least one character is needed
    return (
        error.get("type") == "string_too_short"
        and error.get("ctx", {}).get("min_length") == 1
    )


def _message(field: str, error: dict[str, Any]) -> str:
    error_type = error.get("type")
    if error_type == "missing" or _is_empty(error):
        return f"{_label(field)} is required."
    if error_type == "uuid_parsing":
        return f"Invalid {_label(field).lower()}."
    if error_type == "value_error" and "error" in error.get("ctx", {}):
        # Our own validators raise ValueError with a ready-made message
        return str(error["ctx"]["error"])
    return str(error.get("msg", "Invalid value."))


def validation_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    """Collapse pydantic errors into a field to message map.

    Args:
        errors: Errors as returned by ``RequestValidationError.errors()``

    Returns:
        First message per field, e.g. ``{"username": "Username is required."}``
    """
    result: dict[str, str] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        result.setdefault(field, _message(field, error))
    return result


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed requests with 400 and a field map."""
    errors = validation_errors(exc.errors())
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(errors, status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Install the request validation handler on an app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
