"""Integration test fixtures: S3 tools against LocalStack."""

from __future__ import annotations

import os
import uuid

import boto3
import pytest

from s3mcp.core.config import S3Config
from s3mcp.storage.client import S3ClientProvider

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "us-east-1"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("s3", region_name=REGION, endpoint_url=LOCALSTACK_URL)
        client.list_buckets()
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture
def localstack_provider():
    """Client provider pointing at LocalStack."""
    return S3ClientProvider(S3Config(region=REGION, endpoint_url=LOCALSTACK_URL))


@pytest.fixture
def bucket_name():
    """Unique bucket name per test, removed afterwards if the test left it behind."""
    name = f"s3mcp-inttest-{uuid.uuid4().hex[:12]}"
    yield name
    client = boto3.client("s3", region_name=REGION, endpoint_url=LOCALSTACK_URL)
    try:
        for obj in client.list_objects_v2(Bucket=name).get("Contents", []):
            client.delete_object(Bucket=name, Key=obj["Key"])
        client.delete_bucket(Bucket=name)
    except client.exceptions.NoSuchBucket:
        pass
