"""Application errors and their HTTP mapping."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class BlogListError(Exception):
    """Base exception class for application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal Server Error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(BlogListError):
    """Malformed or missing required fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class Unauthorized(BlogListError):
    """Absent or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"


class MissingToken(Unauthorized):
    default_detail = "Token missing"


class InvalidToken(Unauthorized):
    default_detail = "Token invalid"


class InvalidCredentials(Unauthorized):
    default_detail = "Invalid username or password"


class Forbidden(BlogListError):
    """Authenticated but not permitted."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not permitted"


class NotFound(BlogListError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


async def app_error_handler(request: Request, exc: BlogListError) -> JSONResponse:
    """Render an application error as ``{"detail": ...}`` with its status."""
    logger.info(f"{request.method} {request.url.path} failed: {exc.status_code} {exc.detail}")
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and path parameters as 400."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(messages) or "Invalid request"},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(BlogListError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
