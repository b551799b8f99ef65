# =============================================================================
# app/middleware/error_handling.py - Error Boundary
# =============================================================================
# Outermost stage of the pipeline. Any exception raised further down is
# turned into a fixed 500 JSON response and never reaches the server.
# =============================================================================

import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error."}


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Catch unhandled exceptions and answer with a generic 500."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            # Detail is only recorded at DEBUG and never sent to the client
            logger.debug(f"Unhandled error on {request.method} {request.url.path}", exc_info=True)
            return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)
