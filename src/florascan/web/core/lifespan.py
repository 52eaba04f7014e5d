"""Application lifespan management for startup and shutdown events."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from florascan.system.structlog_configurator import configure_structlog
from florascan.web.core.container import Container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Context manager for application startup and shutdown events.

    Configures logging, creates the database schema, and owns the shared
    HTTP client used for image enrichment.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control back to the application for normal operation.
    """
    # Get the container from the app (ignore type error - runtime dynamic attribute)
    container: Container = app.container  # type: ignore[attr-defined]

    # Configure structured logging based on loaded config
    config = container.config()
    configure_structlog(config)

    logger.info("Starting application services...")

    database_service = container.database_service()
    image_resolver = container.image_resolver()

    try:
        await database_service.initialize()
        await image_resolver.start()

        # Load the vocabulary now so a broken override file fails startup
        vocabulary = container.vocabulary()
        logger.info("Tag vocabulary %s loaded with %d tags", vocabulary.version, len(vocabulary))

        logger.info("All services started successfully")

        yield

    finally:
        logger.info("Shutting down application services...")

        try:
            await image_resolver.stop()
            await database_service.dispose()

            logger.info("All services stopped successfully")

        except Exception as e:
            logger.error(f"Error during service shutdown: {e}")
            raise
