"""FastMCP adapter: publishes registry tools over the MCP transport."""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from pydantic import Field
from pydantic.json_schema import SkipJsonSchema

from s3mcp.server.registry import ToolRegistry
from s3mcp.tools import StorageTool

log = logging.getLogger(__name__)


class StorageMCPTool(Tool):
    """FastMCP tool whose schema and execution come from a StorageTool."""

    handler: Annotated[SkipJsonSchema[Any], Field(exclude=True)]

    @classmethod
    def from_handler(cls, handler: StorageTool) -> StorageMCPTool:
        descriptor = handler.descriptor()
        return cls(
            name=descriptor.name,
            title=descriptor.title,
            description=descriptor.description,
            parameters=descriptor.input_schema,
            handler=handler,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        outcome = await self.handler(arguments)
        return ToolResult(content=json.dumps(outcome.to_payload(), indent=2))


def register_tools(server: FastMCP, registry: ToolRegistry) -> None:
    """Add every registered tool to the FastMCP server."""
    for handler in registry:
        server.add_tool(StorageMCPTool.from_handler(handler))
    log.info("Published %d tools on MCP server %s", len(registry), server.name)
