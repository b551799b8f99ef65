# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User Management API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from app.config import Settings, settings as default_settings
from app.exceptions import (
    UserManagementException,
    user_management_exception_handler,
    validation_exception_handler,
)
from app.middleware import install_middleware
from app.routers import users
from core.services.user_service import UserService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ROOT_MESSAGE = "UserManagementAPI está funcionando correctamente!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup and shutdown. The store itself lives on app.state and
    is created by create_app, so it exists even without a lifespan run.
    """
    config: Settings = app.state.settings
    logger.info(f"Starting {config.API_TITLE} in {config.ENVIRONMENT} mode")
    logger.info(f"User store holds {len(app.state.user_service)} users")

    yield

    logger.info(f"Shutting down {config.API_TITLE}")


def create_app(config: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Settings to use (defaults to the global settings)

    Returns:
        A configured app with its own in-memory user store
    """
    config = config or default_settings

    docs_url = "/docs" if config.docs_enabled else None
    openapi_url = f"/docs/{config.API_VERSION}/openapi.json" if config.docs_enabled else None

    app = FastAPI(
        title=config.API_TITLE,
        description=config.API_DESCRIPTION,
        version=config.API_VERSION,
        contact={
            "name": config.API_CONTACT_NAME,
            "email": config.API_CONTACT_EMAIL,
        },
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=openapi_url,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
        ],
    )

    app.state.settings = config
    app.state.user_service = (
        UserService.with_default_users() if config.SEED_USERS else UserService()
    )

    # =========================================================================
    # Middleware
    # =========================================================================

    install_middleware(app, config)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(UserManagementException, user_management_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        users.router,
        prefix="/api/users",
        tags=["Users"]
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        """Liveness probe."""
        return ROOT_MESSAGE

    return app


app = create_app()
