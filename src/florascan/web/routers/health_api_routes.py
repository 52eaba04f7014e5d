"""Health check endpoint for monitoring service status."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from florascan import __version__
from florascan.database.core import DatabaseService
from florascan.tags.vocabulary import TagVocabulary
from florascan.web.core.container import Container
from florascan.web.models.health import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
@inject
async def health_check(
    db_service: Annotated[DatabaseService, Depends(Provide[Container.database_service])],
    vocabulary: Annotated[TagVocabulary, Depends(Provide[Container.vocabulary])],
    response: Response,
) -> HealthCheckResponse:
    """Check database connectivity and report the loaded vocabulary.

    Returns 503 when the database cannot be queried.
    """
    checks: dict[str, object] = {
        "database": False,
        "vocabulary_version": vocabulary.version,
    }

    try:
        async with db_service.get_async_db() as session:
            await session.execute(text("SELECT 1"))
        checks["database"] = True
    except SQLAlchemyError as e:
        logger.error("Database health check failed: %s", e)

    healthy = bool(checks["database"])
    if not healthy:
        response.status_code = 503

    return HealthCheckResponse(
        status="healthy" if healthy else "degraded",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        service="florascan",
        checks=checks,
    )
