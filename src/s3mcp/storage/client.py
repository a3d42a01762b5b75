"""Lazily constructed, shared boto3 S3 client."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

import boto3

from s3mcp.core.config import S3Config
from s3mcp.core.protocols import IStorageClient

log = logging.getLogger(__name__)

ClientFactory = Callable[[S3Config], IStorageClient]


def build_boto3_client(config: S3Config) -> IStorageClient:
    """Create an S3 client; credentials resolve through boto3's default chain."""
    kwargs: dict = {"region_name": config.region}
    if config.endpoint_url:
        kwargs["endpoint_url"] = config.endpoint_url
    return boto3.client("s3", **kwargs)


class S3ClientProvider:
    """Hands out one S3 client per provider, built on first use."""

    def __init__(self, config: S3Config | None = None,
                 client_factory: ClientFactory = build_boto3_client) -> None:
        self._config = config if config is not None else S3Config()
        self._client_factory = client_factory
        self._client: IStorageClient | None = None
        self._lock = threading.Lock()

    @property
    def config(self) -> S3Config:
        return self._config

    def get_client(self) -> IStorageClient:
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                log.info(
                    "Creating S3 client (region=%s, endpoint_url=%s)",
                    self._config.region, self._config.endpoint_url,
                )
                self._client = self._client_factory(self._config)
            return self._client
