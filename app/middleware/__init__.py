# =============================================================================
# app/middleware/ - Request Pipeline
# =============================================================================
# Three stages wrap every request, outermost first:
#   1. ErrorHandlingMiddleware   - turns unhandled exceptions into a 500
#   2. AuthenticationMiddleware  - static Authorization token check
#   3. RequestLoggingMiddleware  - logs method/path and response status
#
# Usage:
#   from app.middleware import install_middleware
#   install_middleware(app, settings)
# =============================================================================

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.config import Settings
from app.middleware.authentication import AuthenticationMiddleware
from app.middleware.error_handling import ErrorHandlingMiddleware
from app.middleware.request_logging import RequestLoggingMiddleware


def install_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Register the pipeline stages on the app.

    Starlette runs the most recently added middleware first, so stages
    are added innermost to outermost.
    """
    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(AuthenticationMiddleware, token=settings.AUTH_TOKEN)
    app.add_middleware(ErrorHandlingMiddleware)


__all__ = [
    "AuthenticationMiddleware",
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "install_middleware",
]
