"""Application factory for creating FastAPI application with dependency injection."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from florascan import __version__
from florascan.exceptions import (
    IdentificationError,
    NoMatchError,
    PersistenceError,
    SpeciesNotFoundError,
)
from florascan.web.core.container import Container
from florascan.web.core.lifespan import lifespan
from florascan.web.middleware.request_logging import StructuredRequestLoggingMiddleware
from florascan.web.routers import (
    health_api_routes,
    identification_api_routes,
    species_api_routes,
    vocabulary_api_routes,
)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto HTTP responses."""

    @app.exception_handler(NoMatchError)
    async def no_match_handler(request: Request, exc: NoMatchError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": "No plant match found"})

    @app.exception_handler(SpeciesNotFoundError)
    async def not_found_handler(request: Request, exc: SpeciesNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(IdentificationError)
    async def identification_handler(request: Request, exc: IdentificationError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": "Identification failed"})

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": "Database error"})


def create_app() -> FastAPI:
    """Create FastAPI application with dependency injection.

    Returns:
        FastAPI: The configured application instance.
    """
    # Create container
    container = Container()

    app = FastAPI(
        lifespan=lifespan,
        title="FloraScan API",
        description="Plant identification, species collection and image enrichment",
        version=__version__,
    )

    # Attach container so lifespan and tests can reach it
    app.container = container  # type: ignore[attr-defined]

    # Add structured request logging middleware
    app.add_middleware(StructuredRequestLoggingMiddleware)

    register_exception_handlers(app)

    # Wire dependencies for all router modules
    container.wire(
        modules=[
            "florascan.web.routers.health_api_routes",
            "florascan.web.routers.identification_api_routes",
            "florascan.web.routers.species_api_routes",
            "florascan.web.routers.vocabulary_api_routes",
        ]
    )

    app.include_router(identification_api_routes.router, prefix="/api", tags=["Identification API"])
    app.include_router(species_api_routes.router, prefix="/api", tags=["Species API"])
    app.include_router(vocabulary_api_routes.router, prefix="/api", tags=["Vocabulary API"])
    app.include_router(health_api_routes.router, prefix="/api", tags=["Health Check API"])

    return app
