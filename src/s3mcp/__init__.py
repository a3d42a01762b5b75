"""MCP server exposing AWS S3 bucket, object and policy operations as tools."""

__version__ = "1.0.0"
