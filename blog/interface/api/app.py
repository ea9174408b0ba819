"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.routes import health, posts, tags
from blog.interface.error import register_error_handlers
from blog.persistence.database import Database
from blog.persistence.schema import ensure_schema
from blog.util.di.container import create_container, setup_di
from blog.util.logging import setup_logging
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ensure the database schema exists before serving requests."""
    database = await app.state.dishka_container.get(Database)
    await ensure_schema(database)
    logfire.info("Application started")
    yield
    await app.state.dishka_container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Application settings, loaded from the environment if omitted
        container: DI container, the production container if omitted

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending telemetry.
    """
    settings = settings or Settings()
    setup_logging(settings)

    app_instance = FastAPI(
        title="Blog API",
        description="Backend API for a blog: posts, tags and search",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    container = container or create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
