"""gRPC adapters - Servicers, interceptors and server bootstrap."""

from .server import GrpcServer, start_grpc_server
from .services import HelloService, SumService

__all__ = ["GrpcServer", "HelloService", "SumService", "start_grpc_server"]
