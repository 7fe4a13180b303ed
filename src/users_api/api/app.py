"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.middleware import (
    OptionsShortCircuitMiddleware,
    RequestLoggingMiddleware,
)
from users_api.api.routers import health_router, users_router
from users_api.logging_config import setup_logging
from users_api.settings import BackendSettings, get_settings

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    setup_logging(config.log_level)

    app = FastAPI(title="Users API")
    # Starlette wraps in reverse order: logging, then CORS, then OPTIONS handling.
    app.add_middleware(OptionsShortCircuitMiddleware, allow_methods=ALLOWED_METHODS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=False,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(users_router)
    app.include_router(health_router)
    return app
