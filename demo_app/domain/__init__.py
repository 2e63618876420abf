"""
Domain layer - Pure business logic with zero framework imports.

This package contains the two stateless business rules behind the demo
services: building a greeting and adding two integers. Transport adapters
(gRPC, HTTP) call into it and never the other way around.
"""

from .greeting import ANONYMOUS_NAME, GreetingService
from .summation import SummationService

__all__ = [
    "ANONYMOUS_NAME",
    "GreetingService",
    "SummationService",
]
