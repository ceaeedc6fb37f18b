"""FastAPI application factory and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from chatql.utils import configure_logging

from .config import get_api_settings, get_logging_settings, get_openai_settings
from .dependencies import get_llm_client
from .handlers import register_exception_handlers
from .middleware import CORSHeadersMiddleware, LoggingMiddleware, RequestIDMiddleware
from .routers import graphql_router, health_router, index_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: FastAPI application

    Yields:
        None
    """
    logger.info("starting_application")
    if not get_openai_settings().api_key:
        logger.warning("openai_api_key_missing")

    yield

    logger.info("shutting_down_application")
    if get_llm_client.cache_info().currsize:
        await get_llm_client().aclose()
        get_llm_client.cache_clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_api_settings()
    log_settings = get_logging_settings()
    configure_logging(level=log_settings.level, json_logs=log_settings.json_logs)

    # Every unmatched path belongs to the index route, so no docs pages
    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # Order matters - first added = last executed
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    register_exception_handlers(app)

    app.include_router(graphql_router)
    app.include_router(health_router)
    # Catch-all, must stay last
    app.include_router(index_router)

    logger.info(
        "application_configured",
        title=settings.title,
        version=settings.version,
        debug=settings.debug,
        playground_enabled=settings.playground_enabled,
    )

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_api_settings()
    uvicorn.run("chatql.api.main:app", host=settings.host, port=settings.port)


# Application instance
app = create_app()
