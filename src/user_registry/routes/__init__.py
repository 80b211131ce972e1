"""Route initialization module."""

from fastapi import APIRouter

from user_registry.routes.health import router as health_router
from user_registry.routes.home import router as home_router
from user_registry.routes.users import router as users_router

# Routes are served from the root; /api is taken by the docs
api_router = APIRouter()

api_router.include_router(home_router)
api_router.include_router(users_router)
api_router.include_router(health_router)


__all__ = ["api_router"]
