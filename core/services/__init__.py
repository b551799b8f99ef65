# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService, default_users

__all__ = [
    "UserService",
    "default_users",
]
