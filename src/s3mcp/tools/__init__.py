"""S3 storage tools exposed over MCP."""

from __future__ import annotations

from s3mcp.tools.base import StorageTool, ToolDescriptor
from s3mcp.tools.buckets import CreateBucketTool, DeleteBucketTool, ListBucketsTool
from s3mcp.tools.objects import DeleteObjectTool, DownloadObjectTool, ListObjectsTool, UploadObjectTool
from s3mcp.tools.policies import GetBucketPolicyTool, SetBucketPolicyTool

# Registration order as advertised to clients.
ALL_TOOLS: tuple[type[StorageTool], ...] = (
    ListBucketsTool,
    CreateBucketTool,
    DeleteBucketTool,
    ListObjectsTool,
    UploadObjectTool,
    DownloadObjectTool,
    DeleteObjectTool,
    GetBucketPolicyTool,
    SetBucketPolicyTool,
)

__all__ = [
    "ALL_TOOLS",
    "CreateBucketTool",
    "DeleteBucketTool",
    "DeleteObjectTool",
    "DownloadObjectTool",
    "GetBucketPolicyTool",
    "ListBucketsTool",
    "ListObjectsTool",
    "SetBucketPolicyTool",
    "StorageTool",
    "ToolDescriptor",
    "UploadObjectTool",
]
