# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Domain errors raised by core/services are translated into HTTP responses
# here. Anything not listed falls through to the error-handling middleware.
# =============================================================================

import logging

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class UserManagementException(Exception):
    """
    Base exception for the User Management API.

    All custom exceptions inherit from this class. The message becomes the
    plain-text response body; an empty message means an empty body.
    """

    def __init__(self, message: str = "", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self) -> Response:
        """Convert exception to an HTTP response."""
        if not self.message:
            return Response(status_code=self.status_code)
        return PlainTextResponse(self.message, status_code=self.status_code)


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UserManagementException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: int):
        super().__init__(status_code=404)
        self.user_id = user_id


class EmailRequiredError(UserManagementException):
    """Raised when a new user has no email."""

    def __init__(self):
        super().__init__(message="El email es requerido", status_code=400)


class EmailAlreadyRegisteredError(UserManagementException):
    """Raised when a new user's email already belongs to another user."""

    def __init__(self, email: str):
        super().__init__(message="El email ya está registrado", status_code=409)
        self.email = email


# =============================================================================
# Exception Handlers
# =============================================================================

async def user_management_exception_handler(
    request: Request,
    exc: UserManagementException
) -> Response:
    """Convert UserManagementException to its HTTP response."""
    logger.debug(f"{type(exc).__name__} on {request.method} {request.url.path}")
    return exc.to_response()


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed bodies and path parameters are client errors, so they are
    answered with 400 rather than FastAPI's default 422.
    """
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
