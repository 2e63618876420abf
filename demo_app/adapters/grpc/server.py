"""
gRPC server bootstrap.

Builds the asyncio gRPC server, registers the demo servicers together with
the standard grpc.health.v1 service, and wraps the running server in a small
handle used by the application lifespan to stop it again.
"""

import logging
from dataclasses import dataclass

import grpc
from grpc_health.v1 import health, health_pb2, health_pb2_grpc

from demo_app.adapters.grpc.interceptors import LoggingInterceptor
from demo_app.adapters.grpc.services import HelloService, SumService
from demo_app.adapters.grpc.stubs import (
    HELLO_SERVICE_NAME,
    SUM_SERVICE_NAME,
    hello_pb2_grpc,
    sum_pb2_grpc,
)
from demo_app.config.settings import Settings
from demo_app.domain import GreetingService, SummationService

logger = logging.getLogger(__name__)

SERVED_SERVICES = (HELLO_SERVICE_NAME, SUM_SERVICE_NAME)


@dataclass
class GrpcServer:
    """Handle on a started gRPC server."""

    server: grpc.aio.Server
    health_servicer: health.aio.HealthServicer
    port: int
    grace_period: float

    async def stop(self) -> None:
        """
        Stop the server gracefully.

        Health checks flip to NOT_SERVING first, then in-flight calls get
        the grace period to finish.
        """
        logger.info("Stopping gRPC server on port %d...", self.port)
        await self.health_servicer.enter_graceful_shutdown()
        await self.server.stop(self.grace_period)
        logger.info("gRPC server stopped")


def create_grpc_server(
    settings: Settings,
    greeting_service: GreetingService,
    summation_service: SummationService,
) -> tuple[grpc.aio.Server, health.aio.HealthServicer]:
    """
    Create a gRPC server with all servicers registered but not yet bound.

    Args:
        settings: Application settings (concurrency limit)
        greeting_service: Domain service behind Hello/SayHello
        summation_service: Domain service behind SumService/Sum

    Returns:
        Tuple of (server, health servicer)
    """
    server = grpc.aio.server(
        interceptors=[LoggingInterceptor()],
        maximum_concurrent_rpcs=settings.grpc_max_concurrent_rpcs,
    )
    hello_pb2_grpc.add_HelloServicer_to_server(HelloService(greeting_service), server)
    sum_pb2_grpc.add_SumServiceServicer_to_server(SumService(summation_service), server)

    health_servicer = health.aio.HealthServicer()
    health_pb2_grpc.add_HealthServicer_to_server(health_servicer, server)
    return server, health_servicer


async def start_grpc_server(
    settings: Settings,
    greeting_service: GreetingService | None = None,
    summation_service: SummationService | None = None,
) -> GrpcServer:
    """
    Create, bind and start the gRPC server.

    Binding port 0 picks a free ephemeral port; the actual port is returned
    on the handle.

    Raises:
        RuntimeError: If the configured address cannot be bound
    """
    server, health_servicer = create_grpc_server(
        settings,
        greeting_service or GreetingService(),
        summation_service or SummationService(),
    )

    port = server.add_insecure_port(settings.grpc_address)
    if port == 0:
        raise RuntimeError(f"Failed to bind gRPC server to {settings.grpc_address}")

    await server.start()

    for service_name in (*SERVED_SERVICES, health.OVERALL_HEALTH):
        await health_servicer.set(service_name, health_pb2.HealthCheckResponse.SERVING)

    logger.info("gRPC server listening on %s (port %d)", settings.grpc_host, port)
    return GrpcServer(
        server=server,
        health_servicer=health_servicer,
        port=port,
        grace_period=settings.grpc_grace_period_seconds,
    )
