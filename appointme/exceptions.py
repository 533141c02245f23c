"""Application errors and the handlers that turn them into JSON envelopes.

Every error response has the shape ``{"status": ..., "message": ...}``;
``status`` is ``"fail"`` for client errors and ``"error"`` for server errors.
Validation failures add an ``errors`` list of ``{"field", "message"}``.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldError:
    """A problem with one request field."""

    field: str
    message: str


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None

    def payload(self) -> dict[str, Any]:
        return {}


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, errors: list[FieldError], message: str | None = None):
        self.errors = list(errors)
        super().__init__(message)

    def payload(self) -> dict[str, Any]:
        return {"errors": [asdict(error) for error in self.errors]}


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized to access this resource"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class UpstreamFailure(AppError):
    """A secondary request the current operation depends on failed."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream request failed"


def envelope_status(status_code: int) -> str:
    """JSend-style status word for an HTTP status code."""
    if status_code < 400:
        return "success"
    if status_code < 500:
        return "fail"
    return "error"


def error_body(status_code: int, message: str, **payload: Any) -> dict[str, Any]:
    return {"status": envelope_status(status_code), "message": message, **payload}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.message, **exc.payload()),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for err in exc.errors():
        # loc starts with the source: "body", "path" or "query"
        field = ".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0])
        errors.append({"field": field, "message": err["msg"]})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, "Validation failed", errors=errors),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on an app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
