"""
API v1 package.

Contains versioned HTTP routes mirroring the greeting and sum RPCs.
"""

from demo_app.api.v1.routes import router

__all__ = ["router"]
