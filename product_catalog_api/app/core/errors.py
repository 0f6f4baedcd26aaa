"""
Error taxonomy and translation to HTTP responses.

Every failure surfaces to clients through the same JSON envelope::

    {"success": false, "error": "<kind>", "message": "...", "timestamp": "<ISO-8601>"}

Domain errors are subclasses of :class:`ApiError`, each carrying the
HTTP status code and the ``error`` kind reported in the envelope.
Services return them as values; dependencies (authentication, body
parsing) raise them.  Either way they are rendered by
:func:`error_response`.  Anything that is not an ``ApiError`` becomes a
generic 500 whose details are only written to the server log.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto a client-facing response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Bad input: invalid payload or query parameters."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "ValidationError"


class AuthenticationError(ApiError):
    """Missing or wrong API key."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "AuthenticationError"


class NotFoundError(ApiError):
    """Unknown product identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "NotFoundError"


class MalformedBodyError(ApiError):
    """The request body could not be decoded as JSON."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "JSON Parse Error"

    def __init__(self, message: str = "Invalid JSON format in request body") -> None:
        super().__init__(message)


def utc_timestamp() -> str:
    """Current UTC time in ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_body(error: str, message: str) -> Dict[str, Any]:
    return {
        "success": False,
        "error": error,
        "message": message,
        "timestamp": utc_timestamp(),
    }


def error_response(exc: ApiError) -> JSONResponse:
    """Render a domain error as an error envelope."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, exc.message))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s: %s", type(exc).__name__, exc.message)
    return error_response(exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Translate framework HTTP errors, most notably unmatched routes.

    An unknown path and a known path with an unsupported method are
    both reported as a missing route.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body("Not Found", f"Route {url} not found"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("HTTPException", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ValidationError.error, ", ".join(messages)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error", "Something went wrong on the server"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translators on ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
