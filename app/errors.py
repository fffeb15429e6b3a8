"""
Error types for the posts API and the FastAPI handlers that render them.

Every handled error becomes a JSON body of the form::

    {"timestamp": ..., "status": 404, "error": "Not Found",
     "message": "...", "path": "/api/post/x/contents"}
"""

import logging
import uuid
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

HTTP_422_UNPROCESSABLE_ENTITY = 422

logger = logging.getLogger(__name__)


class PostsError(Exception):
    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PostsError):
    status_code = HTTP_404_NOT_FOUND
    error = "Not Found"

    def __init__(self, post_id: str):
        super().__init__(f"Post '{post_id}' not found")
        self.post_id = post_id


class ValidationError(PostsError):
    """A post assembled on the server does not satisfy the content model."""

    error = "Validation Failed"


class DecodeError(PostsError):
    status_code = HTTP_400_BAD_REQUEST
    error = "Bad Request"


class UnknownVariantError(DecodeError):
    def __init__(self, variant: str, location: str = "contents"):
        super().__init__(f"Unknown content block type '{variant}' at {location}")
        self.variant = variant
        self.location = location


class MissingFieldError(DecodeError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field '{field}'")
        self.field = field


def error_body(
    status: int,
    error: str,
    message: str,
    path: Optional[str] = None,
    validation_errors: Optional[Dict[str, str]] = None,
) -> dict:
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status,
        "error": error,
        "message": message,
        "path": path,
    }
    if validation_errors is not None:
        body["validationErrors"] = validation_errors
    return body


def log_and_sanitize_error(
    error: Exception, context: str, user_message: Optional[str] = None
) -> Tuple[str, str]:
    """
    Log full error details server-side and return a sanitized message for the client.

    Returns:
        Tuple of (sanitized_message, error_id) so the client can report the id.
    """
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {error}",
        exc_info=error,
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


async def posts_error_handler(request: Request, exc: PostsError) -> JSONResponse:
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        message, _ = log_and_sanitize_error(exc, request.url.path, exc.message)
    else:
        logger.warning(f"{exc.error} on {request.url.path}: {exc.message}")
        message = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.error, message, request.url.path),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "Error"
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, phrase, str(exc.detail), request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = {
        ".".join(str(part) for part in err["loc"]): err["msg"] for err in exc.errors()
    }
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(
            HTTP_422_UNPROCESSABLE_ENTITY,
            "Validation Failed",
            "Input data validation failed",
            request.url.path,
            validation_errors=errors,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    message, _ = log_and_sanitize_error(exc, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            message,
            request.url.path,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostsError, posts_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
