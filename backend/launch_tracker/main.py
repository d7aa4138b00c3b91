"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from launch_tracker.config import get_settings
from launch_tracker.infrastructure.dependencies import get_launch_repository
from launch_tracker.infrastructure.logging.log_config import setup_logging
from launch_tracker.presentation.api.errors import register_exception_handlers
from launch_tracker.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load the seed launches."""
    setup_logging()

    # Fail fast on a broken seed file instead of on the first request
    repository = get_launch_repository()
    logger.info("Launch store ready with %d records", await repository.count())

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "launch_tracker.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
