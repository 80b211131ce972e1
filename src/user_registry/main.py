"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from user_registry.config import Settings, get_settings
from user_registry.errors import APIError
from user_registry.middleware import get_cors_headers, setup_middleware
from user_registry.models.user import ErrorResponse
from user_registry.routes import api_router
from user_registry.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, registry: UserRegistry | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings, read from the environment if omitted
        registry: User registry to serve, a new one is built if omitted

    Returns:
        Configured FastAPI instance owning ``registry``
    """
    if settings is None:
        settings = get_settings()
    if registry is None:
        registry = UserRegistry.with_seed_users() if settings.seed_users else UserRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Serving {len(registry)} users, docs at http://{settings.api_host}:{settings.api_port}/api")

        yield

        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="An API for managing users",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api",
        redoc_url=None,
        servers=[{"url": f"http://{settings.api_host}:{settings.api_port}", "description": "Local server"}],
    )
    app.state.settings = settings
    app.state.user_registry = registry

    setup_middleware(app, cors_origins=settings.cors_origins)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Render client errors as ``{"error": message}``."""
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    # Unhandled errors bypass CORSMiddleware, so attach the headers here
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s", exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, settings.cors_origins)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
            headers=cors_headers,
        )

    app.include_router(api_router)

    return app


settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "user_registry.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
