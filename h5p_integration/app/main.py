"""
H5P Integration Service

FastAPI application entry point.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from h5p_integration import __version__
from h5p_integration.app.api import embed_router, settings_router
from h5p_integration.app.dependencies import get_settings, initialize_services, shutdown_services
from h5p_integration.errors import (
    ContentNotFoundError,
    EmbedRenderError,
    H5PIntegrationError,
    LibraryNotFoundError,
    MalformedIdentifierError,
    ParameterFilterError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[H5PIntegrationError], int] = {
    MalformedIdentifierError: 400,
    ContentNotFoundError: 404,
    LibraryNotFoundError: 404,
    ParameterFilterError: 500,
    EmbedRenderError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the dependency graph on startup and drops it on shutdown.
    """
    logger.info("Starting H5P integration services...")
    try:
        initialize_services()
        logger.info("H5P integration services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down H5P integration services...")
    shutdown_services()


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title="H5P Integration",
    description="Integration settings and embed pages for H5P interactive content",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

# Include routers
app.include_router(embed_router)
app.include_router(settings_router, prefix="/api/v1")


@app.exception_handler(H5PIntegrationError)
async def integration_error_handler(request: Request, exc: H5PIntegrationError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error(f"[app] {request.url.path} failed: {exc}")
    else:
        logger.info(f"[app] {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint with service info."""
    return {
        "service": settings.service_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    from h5p_integration.app.dependencies import get_content_store, get_library_registry

    return {
        "status": "healthy",
        "libraries": type(get_library_registry()).__name__,
        "contents": type(get_content_store()).__name__,
        "export_enabled": settings.export_enabled,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "h5p_integration.app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
