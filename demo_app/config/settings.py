"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # gRPC server configuration
    grpc_host: str = "[::]"
    grpc_port: int = Field(default=9000, ge=0, le=65535)  # 0 binds an ephemeral port
    grpc_grace_period_seconds: float = Field(default=5.0, ge=0)
    grpc_max_concurrent_rpcs: int | None = Field(default=None, gt=0)  # None = unlimited

    @property
    def grpc_address(self) -> str:
        """Bind address in host:port form."""
        return f"{self.grpc_host}:{self.grpc_port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
