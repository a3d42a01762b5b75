"""Type aliases used across the S3 MCP server."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
