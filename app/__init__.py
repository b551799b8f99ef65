# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware pipeline, error handlers
# - config.py: Environment variable loading and settings
# - middleware/: Error boundary, auth gate and request logger
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# user logic to the core/ package.
# =============================================================================
