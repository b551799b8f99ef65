# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh app (and user store) for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("AUTH_TOKEN", "Bearer mysecrettoken")
os.environ.setdefault("SEED_USERS", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings for the app under test."""
    return Settings()


@pytest.fixture
def app(settings):
    """A fresh app with a freshly seeded store."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client for the app."""
    return TestClient(app)


@pytest.fixture
def service(app):
    """The user service backing the app."""
    return app.state.user_service


@pytest.fixture
def auth_headers():
    """Headers that pass the auth middleware."""
    return {"Authorization": "Bearer mysecrettoken"}


@pytest.fixture
def new_user_payload():
    """A valid create payload with a fresh email."""
    return {
        "firstName": "Ana",
        "lastName": "García",
        "email": "new@x.com",
        "department": "IT",
    }
