"""
Pytest configuration and fixtures for podcast-catalog tests.

This module runs before any test imports, setting up the test environment.
Environment variables are explicitly set to ensure deterministic test behavior
regardless of external environment configuration.
"""

import os
from unittest.mock import Mock

import pytest

# Minimum length for JWT secret key (32 bytes for HS256)
_MIN_JWT_SECRET_LENGTH = 32

# Test JWT secret that meets minimum length requirements
_TEST_JWT_SECRET = "test-jwt-secret-key-for-pytest-minimum-32-chars"

# Force JWT_SECRET_KEY to a compliant test value
# Overwrite if missing or shorter than required minimum
current_secret = os.environ.get("JWT_SECRET_KEY", "")
if len(current_secret) < _MIN_JWT_SECRET_LENGTH:
    os.environ["JWT_SECRET_KEY"] = _TEST_JWT_SECRET

# Keep a developer's LOG_LEVEL from breaking Config validation in tests
os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def test_jwt_secret():
    return os.environ["JWT_SECRET_KEY"]


@pytest.fixture
def podcast_repository():
    return Mock()


@pytest.fixture
def episode_repository():
    return Mock()


@pytest.fixture
def user_repository():
    return Mock()
