"""Main FastAPI application for the Dota insights service."""

from contextlib import asynccontextmanager
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .core import get_global_settings, setup_logging
from .core.exceptions import ProviderFailureError, ValidationError
from .core.opendota import OpenDotaClient
from .core.reference_cache import ReferenceDataCache
from .features.insights import insights_router

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up Dota insights application", version=__version__)
    client = OpenDotaClient(
        base_url=settings.opendota_base_url,
        api_key=settings.opendota_api_key,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
    await client.start_session()
    app.state.opendota_client = client
    app.state.reference_cache = ReferenceDataCache()
    yield
    logger.info("Shutting down Dota insights application")
    await client.close()


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "insights",
        "description": "Performance patterns, draft suggestions, matchups and item builds.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

# Create FastAPI application
app = FastAPI(
    title="Dota Insights - Match Analysis Service",
    description="""
    Decision-support analytics over OpenDota match data.

    ## Features

    * **Patterns**: Strengths and weaknesses from recent matches
    * **Draft**: Ranked hero suggestions for the next pick
    * **Matchups**: Best and worst opponents per hero
    * **Builds**: Item and skill order analysis per player and hero
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)


@app.exception_handler(ProviderFailureError)
async def provider_failure_handler(
    request: Request, exc: ProviderFailureError
) -> JSONResponse:
    logger.error("Provider failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "context": exc.context},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "context": exc.context},
    )


# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(insights_router, prefix="/api/v1")


@app.get("/api/v1/health", tags=["health"])
@app.get("/health", tags=["health"], include_in_schema=False)
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns the health status of the application including:
    - Overall health status
    - Application version
    - Reference data population state
    """
    cache = getattr(request.app.state, "reference_cache", None)
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
        "reference_data": cache.stats() if cache else {},
    }


def run() -> None:
    import uvicorn

    uvicorn.run(
        "dota_insights.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
