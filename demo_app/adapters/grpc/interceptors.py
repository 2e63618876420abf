"""
gRPC server interceptors.

LoggingInterceptor records one INFO line per completed unary call and logs
unexpected failures with their traceback before letting them propagate, so
the client still sees the framework's default error status.
"""

import logging
import time

import grpc

logger = logging.getLogger(__name__)


class LoggingInterceptor(grpc.aio.ServerInterceptor):
    """Logs method name and latency of every unary-unary call."""

    async def intercept_service(self, continuation, handler_call_details):
        handler = await continuation(handler_call_details)
        # Streaming handlers (e.g. Health/Watch) are passed through untouched
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method
        behavior = handler.unary_unary

        async def logged_behavior(request, context):
            started = time.perf_counter()
            try:
                response = await behavior(request, context)
            except grpc.aio.AbortError:
                logger.info("gRPC call aborted: %s", method)
                raise
            except Exception:
                logger.exception("gRPC call failed: %s", method)
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("gRPC call %s completed in %.2f ms", method, elapsed_ms)
            return response

        return grpc.unary_unary_rpc_method_handler(
            logged_behavior,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )
