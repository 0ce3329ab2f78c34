"""Shared helpers for the API routers."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from ideagraph.exceptions import (
    AuthenticationError,
    DocumentIdError,
    DocumentNotFoundError,
    FileReadError,
    IdeagraphError,
    TreeTooDeepError,
)
from ideagraph.utils.logging_config import get_logger
from server.models import ErrorResponse

logger = get_logger(__name__)

COMMON_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Bad request or invalid input"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Internal server error"},
}

REVISION_RESPONSES: dict[int | str, dict[str, Any]] = {
    **COMMON_RESPONSES,
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or rejected access token"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Document not found"},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse, "description": "Document API failure"},
}


def status_for_error(exc: IdeagraphError) -> int:
    """Map a library error to an HTTP status code."""
    if isinstance(exc, (FileReadError, DocumentIdError, TreeTooDeepError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, DocumentNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_502_BAD_GATEWAY


def error_response(exc: IdeagraphError, **context: Any) -> JSONResponse:
    """Log a failed request and build its JSON error response."""
    status_code = status_for_error(exc)
    logger.error(
        "Request failed (%s): %s",
        status_code,
        exc,
        extra={"status_code": status_code, "error": str(exc), **context},
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )


def error_message(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    """Build a JSON error response from a plain message."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
