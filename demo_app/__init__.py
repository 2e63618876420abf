"""demo-app - Greeting and sum services over gRPC."""

__version__ = "0.1.0"
