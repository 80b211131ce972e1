"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry.config import Settings
from user_registry.main import create_app
from user_registry.services.user_registry import UserRegistry


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the local environment."""
    return Settings(_env_file=None, environment="test", app_version="1.0.0-test")


@pytest.fixture
def registry() -> UserRegistry:
    """A fresh registry holding the seed users."""
    return UserRegistry.with_seed_users()


@pytest.fixture
def app(settings: Settings, registry: UserRegistry) -> FastAPI:
    return create_app(settings=settings, registry=registry)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)
