"""Shared fixtures: fake AWS credentials, moto-backed and in-memory providers."""

from __future__ import annotations

import pytest
from moto import mock_aws

from s3mcp.core.config import S3Config
from s3mcp.storage.client import S3ClientProvider
from tests.fakes import BUCKET, REGION, MemoryS3Client


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    """Keep real credentials and local overrides out of every test."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    for name in (
        "AWS_REGION", "S3MCP_S3_REGION", "S3MCP_S3_ENDPOINT_URL", "S3MCP_LOG_LEVEL",
        "S3MCP_SERVER_TRANSPORT", "S3MCP_SERVER_HOST", "S3MCP_SERVER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def moto_provider():
    """Provider whose client talks to moto's in-process S3."""
    with mock_aws():
        yield S3ClientProvider(S3Config(region=REGION))


@pytest.fixture
def moto_bucket(moto_provider):
    """moto provider with BUCKET already created."""
    moto_provider.get_client().create_bucket(Bucket=BUCKET)
    return moto_provider


@pytest.fixture
def memory_client():
    return MemoryS3Client()


@pytest.fixture
def memory_provider(memory_client):
    return S3ClientProvider(S3Config(region=REGION), client_factory=lambda config: memory_client)
