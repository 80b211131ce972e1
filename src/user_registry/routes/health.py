"""Health check routes."""

from fastapi import APIRouter, Depends

from user_registry.config import Settings
from user_registry.models.health import HealthCheckResponse
from user_registry.services import UserRegistry, get_app_settings, get_user_registry

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    registry: UserRegistry = Depends(get_user_registry),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and registry size
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=len(registry),
    )
