"""Application entry point for the FastAPI backend."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .error_handlers import register_error_handlers
from .middleware import ResponseDelayMiddleware
from .routers import (
    auth_router,
    friends_router,
    posts_router,
    reactions_router,
    system_router,
    users_router,
)
from .store import JsonStore

logger = logging.getLogger(__name__)


def create_app(*, settings: Settings | None = None, store: JsonStore | None = None) -> FastAPI:
    """Build the API around ``store``; without one the JSON file is loaded on startup."""

    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(ResponseDelayMiddleware, delay_ms=settings.response_delay_ms)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "PUT", "POST", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    app.include_router(system_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(posts_router)
    app.include_router(reactions_router)
    app.include_router(friends_router)

    @app.on_event("startup")
    async def _startup() -> None:
        """Load the backing store before serving when none was injected."""

        if app.state.store is None:
            app.state.store = JsonStore.load(settings.data_path, persist=settings.persist_changes)
        logger.info("%s %s ready (frontend origin %s)", settings.app_name, settings.api_version, settings.frontend_url)

    return app


app = create_app()
