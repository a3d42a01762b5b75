"""Shared test doubles: re-export the in-memory S3 client."""

from __future__ import annotations

from s3mcp.storage.memory import MemoryS3Client

REGION = "us-east-1"
BUCKET = "test-bucket"

__all__ = ["BUCKET", "MemoryS3Client", "REGION"]
