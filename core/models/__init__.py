# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record, create and partial-update schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    CamelModel,
    User,
    UserCreate,
    UserUpdate,
)

__all__ = [
    "CamelModel",
    "User",
    "UserCreate",
    "UserUpdate",
]
