# =============================================================================
# app/middleware/request_logging.py - Request/Response Logger
# =============================================================================
# Logs one line when a request comes in and one when its response goes out.
# Runs after the auth gate, so rejected requests are not logged here.
# =============================================================================

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and path before the request, status code after."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.info(f"Incoming Request: {request.method} {request.url.path}")

        response = await call_next(request)

        logger.info(f"Outgoing Response: {response.status_code}")
        return response
