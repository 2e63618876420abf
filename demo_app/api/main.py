"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance that hosts the
process: its lifespan starts the gRPC server on startup and stops it
on shutdown, and it serves the HTTP mirrors and the health endpoint.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status

from demo_app.adapters.grpc import GrpcServer, start_grpc_server
from demo_app.api.dependencies import get_greeting_service, get_grpc_server, get_summation_service
from demo_app.api.v1 import router as v1_router
from demo_app.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Greeting and sum endpoints - HTTP mirrors of the gRPC services",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Starts the gRPC server on startup
    - Stops the gRPC server gracefully on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    grpc_server = await start_grpc_server(
        settings,
        greeting_service=get_greeting_service(),
        summation_service=get_summation_service(),
    )

    # Store server handle in app state for dependency injection
    app.state.grpc_server = grpc_server

    logger.info("Application startup complete")

    try:
        yield
    finally:
        logger.info("Shutting down application...")
        app.state.grpc_server = None
        await grpc_server.stop()


app = FastAPI(
    title="demo-app",
    description="Greeting and sum services over gRPC, with HTTP mirrors",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(
    grpc_server: GrpcServer | None = Depends(get_grpc_server),
) -> dict[str, str | int]:
    """
    Health check endpoint with gRPC server validation.

    Returns 200 OK with the bound gRPC port while the server is running,
    503 Service Unavailable otherwise.
    """
    if grpc_server is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="gRPC server not running",
        )

    return {"status": "healthy", "grpc_port": grpc_server.port}
