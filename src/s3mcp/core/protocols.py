"""Protocol interfaces for the S3 MCP abstractions.

Handlers depend on these Protocols rather than on boto3 directly:
structural typing, no inheritance required, easy to fake in tests.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Storage backend
# ---------------------------------------------------------------------------

@runtime_checkable
class IStorageClient(Protocol):
    """Subset of the boto3 S3 client used by the tool handlers.

    Every method takes boto3-style keyword arguments (``Bucket``, ``Key``, ...)
    and returns the raw response dict, raising ``botocore.exceptions.ClientError``
    for service-side failures.
    """

    def list_buckets(self, **kwargs: Any) -> dict[str, Any]: ...

    def create_bucket(self, **kwargs: Any) -> dict[str, Any]: ...

    def delete_bucket(self, **kwargs: Any) -> dict[str, Any]: ...

    def list_objects_v2(self, **kwargs: Any) -> dict[str, Any]: ...

    def put_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def get_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def delete_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def get_bucket_policy(self, **kwargs: Any) -> dict[str, Any]: ...

    def put_bucket_policy(self, **kwargs: Any) -> dict[str, Any]: ...


# ---------------------------------------------------------------------------
# Client provider
# ---------------------------------------------------------------------------

@runtime_checkable
class IClientProvider(Protocol):
    """Hands out the shared storage client."""

    def get_client(self) -> IStorageClient: ...
