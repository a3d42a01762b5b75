"""Tool registry: name -> handler lookup and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from s3mcp.core.exceptions import DuplicateToolError, UnknownToolError
from s3mcp.core.protocols import IClientProvider
from s3mcp.models.results import ToolOutcome
from s3mcp.tools import ALL_TOOLS, StorageTool, ToolDescriptor

log = logging.getLogger(__name__)


class ToolRegistry:
    """Holds the registered tools in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, StorageTool] = {}

    def register(self, tool: StorageTool) -> None:
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        log.debug("Registered tool %s", tool.name)

    def get(self, name: str) -> StorageTool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def descriptors(self) -> list[ToolDescriptor]:
        return [tool.descriptor() for tool in self._tools.values()]

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolOutcome:
        """Route one invocation to its handler; the result is passed through untouched."""
        return await self.get(name)(arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[StorageTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(provider: IClientProvider) -> ToolRegistry:
    """Register every storage tool against one shared client provider."""
    registry = ToolRegistry()
    for tool_cls in ALL_TOOLS:
        registry.register(tool_cls(provider))
    return registry
