"""MCP server composition root and command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from fastmcp import FastMCP

from s3mcp.core.config import AppSettings
from s3mcp.core.protocols import IClientProvider
from s3mcp.server.registry import build_registry
from s3mcp.server.transport import register_tools
from s3mcp.storage.client import S3ClientProvider

log = logging.getLogger(__name__)


def create_server(settings: AppSettings | None = None,
                  provider: IClientProvider | None = None) -> FastMCP:
    """Create the FastMCP server with every storage tool registered.

    One client provider is shared by all tools; pass ``provider`` to
    substitute the backend (tests, alternative endpoints).
    """
    if settings is None:
        settings = AppSettings()
    if provider is None:
        provider = S3ClientProvider(settings.s3)

    server = FastMCP(
        name=settings.server.name,
        instructions=settings.server.instructions,
        version=settings.server.version,
    )
    register_tools(server, build_registry(provider))
    return server


def _parse_args(argv: list[str] | None, settings: AppSettings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MCP server exposing AWS S3 operations as tools")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse", "streamable-http"],
        default=settings.server.transport,
        help="MCP transport (default: %(default)s)",
    )
    parser.add_argument("--host", default=settings.server.host, help="Bind address for HTTP transports")
    parser.add_argument("--port", type=int, default=settings.server.port, help="Port for HTTP transports")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    settings = AppSettings()
    args = _parse_args(argv, settings)

    # stdout carries the stdio transport; logs go to stderr.
    logging.basicConfig(
        level=args.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = create_server(settings)
    log.info("Starting MCP server %s on %s transport", server.name, args.transport)
    if args.transport == "stdio":
        server.run(transport="stdio")
    else:
        server.run(transport=args.transport, host=args.host, port=args.port)
