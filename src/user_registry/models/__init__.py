"""API models package."""

from user_registry.models.greeting import HelloResponse, HomeResponse
from user_registry.models.health import HealthCheckResponse
from user_registry.models.user import ErrorResponse, User, UserCreate, UserUpdate

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "HelloResponse",
    "HomeResponse",
    "User",
    "UserCreate",
    "UserUpdate",
]
