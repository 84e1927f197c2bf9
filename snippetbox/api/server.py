"""FastAPI application factory for the snippet manager."""

from __future__ import annotations

from fastapi import FastAPI

from ..config import Settings
from ..exception_handler import setup_logging
from .route import router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Snippet Manager API",
        version="0.1.0",
    )
    app.state.settings = settings
    app.include_router(router)

    return app


app = create_app()


__all__ = ["app", "create_app"]
