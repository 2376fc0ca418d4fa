"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from board.config import Settings
from board.interface.api.errors import register_error_handlers
from board.interface.api.routes import comments, health, stories
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Board API",
        description="Link aggregator with threaded, ranked comment discussions",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(stories.router)
    app_instance.include_router(comments.router)

    register_error_handlers(app_instance)

    return app_instance
