"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings cache isolation
- A running application (FastAPI lifespan + gRPC server) on an ephemeral port
- gRPC channels to that server
"""

from collections.abc import Generator

import grpc
import pytest
from fastapi.testclient import TestClient

from demo_app.api.main import app
from demo_app.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def live_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """
    Run the application lifespan with the gRPC server on a free local port.

    Entering the TestClient context triggers startup; leaving it stops the
    gRPC server again.
    """
    monkeypatch.setenv("GRPC_HOST", "127.0.0.1")
    monkeypatch.setenv("GRPC_PORT", "0")
    monkeypatch.setenv("GRPC_GRACE_PERIOD_SECONDS", "0")

    with TestClient(app) as client:
        yield client


@pytest.fixture
def grpc_channel(live_client: TestClient) -> Generator[grpc.Channel, None, None]:
    """Create a synchronous channel to the running gRPC server."""
    port = live_client.app.state.grpc_server.port
    with grpc.insecure_channel(f"127.0.0.1:{port}") as channel:
        grpc.channel_ready_future(channel).result(timeout=5)
        yield channel
