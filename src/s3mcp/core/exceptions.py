"""S3 MCP exception hierarchy."""

from __future__ import annotations


class S3MCPError(Exception):
    """Base exception for all S3 MCP errors."""


class InvalidToolParameters(S3MCPError):
    """Tool arguments failed validation before any backend call."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        self.message = message
        super().__init__(message)


class UnknownToolError(S3MCPError):
    """No tool is registered under the requested name."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class DuplicateToolError(S3MCPError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool already registered: {tool_name}")
