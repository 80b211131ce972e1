"""Service dependency injection."""

from fastapi import Request

from user_registry.config import Settings
from user_registry.services.user_registry import UserRegistry


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


def get_user_registry(request: Request) -> UserRegistry:
    """Get the user registry owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserRegistry instance created by ``create_app``
    """
    return request.app.state.user_registry


__all__ = ["UserRegistry", "get_app_settings", "get_user_registry"]
