"""
Application lifecycle management.

Configures logging on startup and releases database connections on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from store_admin.config.settings import get_settings
from store_admin.core.shared import configure_logging, get_logger
from store_admin.database import dispose_async_engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)
    logger.info("Starting application", environment=settings.ENVIRONMENT, version=settings.VERSION)

    yield  # Application runs here

    await dispose_async_engine()
    logger.info("Application stopped")
