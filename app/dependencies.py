# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """
    Get the user service instance.

    Returns the process-wide service created by the app factory.
    """
    return request.app.state.user_service


# Type alias for dependency injection
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
