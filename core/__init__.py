# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the user management logic:
# - models/: Pydantic schemas for users
# - services/: The in-memory user store and its CRUD rules
#
# Code in this package should NOT import from FastAPI directly.
# Domain errors live in app/exceptions.py and are raised from here.
# =============================================================================
