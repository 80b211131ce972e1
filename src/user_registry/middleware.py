"""CORS for browser clients calling the registry from another origin."""

import logging
from collections.abc import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def normalize_origins(origins: Iterable[str]) -> list[str]:
    """Strip trailing slashes and blanks, keeping the first occurrence of each origin."""
    cleaned = (origin.strip().rstrip("/") for origin in origins)
    return list(dict.fromkeys(origin for origin in cleaned if origin))


def get_cors_headers(origin: str | None, allowed_origins: Iterable[str]) -> dict[str, str]:
    """Headers granting ``origin`` access, or nothing if it is not configured.

    Responses built by exception handlers do not pass through
    ``CORSMiddleware``, so they add these headers themselves.
    """
    if not origin or origin not in normalize_origins(allowed_origins):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }


def setup_middleware(app: FastAPI, cors_origins: Iterable[str]) -> None:
    """Install ``CORSMiddleware`` for the configured origins.

    Args:
        app: FastAPI application instance
        cors_origins: Origins allowed to call the API; CORS stays off when empty
    """
    allowed_origins = normalize_origins(cors_origins)
    if not allowed_origins:
        logger.info("CORS disabled, no origins configured")
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    logger.info("CORS enabled for origins: %s", allowed_origins)
