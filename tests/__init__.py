# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User Management API:
# - test_models.py: Pydantic model validation and serialization
# - test_user_service.py: In-memory store rules and locking
# - test_users_api.py: CRUD endpoints through the full pipeline
# - test_middleware.py: Error boundary, auth gate, request logger
# - test_app.py: Settings, OpenAPI document, root probe
#
# Run tests with: pytest
# =============================================================================
