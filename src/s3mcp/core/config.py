"""Server settings: S3 client region and endpoint, MCP transport and log level, read from the environment."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

DEFAULT_REGION = "us-east-1"


class S3Config(BaseSettings):
    """S3 client configuration."""

    model_config = {"env_prefix": "S3MCP_S3_", "populate_by_name": True}

    region: str = Field(
        default=DEFAULT_REGION,
        validation_alias=AliasChoices("AWS_REGION", "S3MCP_S3_REGION"),
    )
    endpoint_url: str | None = None  # LocalStack / MinIO override


class ServerConfig(BaseSettings):
    """MCP server identity and transport."""

    model_config = {"env_prefix": "S3MCP_SERVER_"}

    name: str = "aws-s3-mcp"
    version: str = "1.0.0"
    instructions: str = "MCP Server for AWS S3 operations"
    transport: Literal["stdio", "http", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "S3MCP_"}

    log_level: str = "INFO"

    s3: S3Config = Field(default_factory=S3Config)
    server: ServerConfig = Field(default_factory=ServerConfig)
