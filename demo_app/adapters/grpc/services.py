"""
gRPC servicers - Thin adapters from protobuf messages to domain services.

Each servicer converts the incoming message into plain Python values, calls
the domain service, and wraps the result in the reply message. Exceptions
are left to propagate; the framework reports them as RPC failures.
"""

import grpc

from demo_app.adapters.grpc.stubs import hello_pb2, hello_pb2_grpc, sum_pb2, sum_pb2_grpc
from demo_app.domain import GreetingService, SummationService


class HelloService(hello_pb2_grpc.HelloServicer):
    """gRPC service for the greeting RPC."""

    def __init__(self, greeting_service: GreetingService) -> None:
        self._greeting_service = greeting_service

    async def SayHello(self, request, context: grpc.aio.ServicerContext):
        """Greet the requested name, or the default name when none was sent."""
        # proto3 optional: an unset name and an empty name are different
        name = request.name if request.HasField("name") else None
        message = self._greeting_service.greet(name)
        return hello_pb2.HelloReply(message=message)


class SumService(sum_pb2_grpc.SumServiceServicer):
    """gRPC service for the sum RPC."""

    def __init__(self, summation_service: SummationService) -> None:
        self._summation_service = summation_service

    async def Sum(self, request, context: grpc.aio.ServicerContext):
        result = self._summation_service.add(request.arg_one, request.arg_two)
        return sum_pb2.SumResponse(result=result)
