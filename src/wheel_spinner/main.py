# src/wheel_spinner/main.py
"""Main entry point for the Wheel Spinner application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from wheel_spinner.api.v1 import (
    admins_router,
    review_queue_router,
    settings_router,
    shared_wheels_router,
    users_router,
)
from wheel_spinner.core.logging import configure_logging
from wheel_spinner.core.settings import settings
from wheel_spinner.db.session import create_tables
from wheel_spinner.services.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Wheel Spinner API",
    description="Shared wheel publication and moderation API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(shared_wheels_router, prefix="/api/v1")
app.include_router(review_queue_router, prefix="/api/v1")
app.include_router(admins_router, prefix="/api/v1")
app.include_router(settings_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    """Report store failures as an opaque server error."""
    logger.error("Request %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    if settings.auto_create_tables:
        create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Shared wheel publication and moderation API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("wheel_spinner.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
