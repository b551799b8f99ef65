# =============================================================================
# app/middleware/authentication.py - Static Token Gate
# =============================================================================
# Rejects any request whose Authorization header does not match the
# configured token. Rejected requests never reach later stages.
#
# This is a placeholder check: one shared token, no expiry, no identity.
# =============================================================================

import logging

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Unauthorized: Missing or invalid token."
INVALID_TOKEN_MESSAGE = "Unauthorized: Invalid token."


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Compare the Authorization header against a fixed token.

    - Missing or empty header: 401 with MISSING_TOKEN_MESSAGE
    - Any other value that differs (ignoring case): 401 with INVALID_TOKEN_MESSAGE
    """

    def __init__(self, app: ASGIApp, token: str):
        super().__init__(app)
        self.token = token

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        authorization = request.headers.get("Authorization")

        if not authorization:
            logger.debug(f"Missing Authorization header: {request.method} {request.url.path}")
            return PlainTextResponse(MISSING_TOKEN_MESSAGE, status_code=401)

        if authorization.lower() != self.token.lower():
            logger.debug(f"Invalid Authorization header: {request.method} {request.url.path}")
            return PlainTextResponse(INVALID_TOKEN_MESSAGE, status_code=401)

        return await call_next(request)
