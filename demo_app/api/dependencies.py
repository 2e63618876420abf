"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and the running gRPC server into routes.
"""

from fastapi import Request

from demo_app.adapters.grpc import GrpcServer
from demo_app.domain import GreetingService, SummationService

# Module-level singletons - both domain services are stateless
_greeting_service = GreetingService()
_summation_service = SummationService()


def get_greeting_service() -> GreetingService:
    """Get greeting service (singleton)."""
    return _greeting_service


def get_summation_service() -> SummationService:
    """Get summation service (singleton)."""
    return _summation_service


def get_grpc_server(request: Request) -> GrpcServer | None:
    """
    Get the running gRPC server handle from app state.

    The server is started during app lifespan startup and stored in app.state.
    Returns None when the lifespan has not run (or has already shut down).
    """
    return getattr(request.app.state, "grpc_server", None)
