"""Tool result models.

A tool returns either a ``ToolSuccess`` subclass or a ``ToolFailure``; the
``success`` flag is fixed per class so it always agrees with the presence of
``error``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from s3mcp.core.types import JsonDict


class ToolOutcome(BaseModel):
    """Common serialization for success and failure results."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool

    def to_payload(self) -> JsonDict:
        """Wire representation with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class ToolFailure(ToolOutcome):
    success: Literal[False] = False
    error: str = Field(min_length=1)
    bucket_name: str | None = None
    key: str | None = None

    @classmethod
    def from_arguments(cls, error: str, arguments: Mapping[str, Any] | None) -> ToolFailure:
        """Failure carrying whatever identifying params the raw arguments hold."""
        arguments = arguments or {}
        bucket_name = arguments.get("bucketName")
        key = arguments.get("key")
        return cls(
            error=error,
            bucket_name=bucket_name if isinstance(bucket_name, str) else None,
            key=key if isinstance(key, str) else None,
        )

    def to_payload(self) -> JsonDict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ToolSuccess(ToolOutcome):
    success: Literal[True] = True


# ---------------------------------------------------------------------------
# Buckets
# ---------------------------------------------------------------------------

class BucketSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    creation_date: str | None = None


class ListBucketsResult(ToolSuccess):
    buckets: list[BucketSummary] = Field(default_factory=list)
    count: int = 0


class CreateBucketResult(ToolSuccess):
    bucket_name: str
    location: str | None = None


class DeleteBucketResult(ToolSuccess):
    bucket_name: str


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

class StorageObjectRecord(BaseModel):
    """One entry of an object listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    key: str
    size: int = Field(default=0, ge=0)
    last_modified: str | None = None
    etag: str | None = None
    storage_class: str | None = None


class ListObjectsResult(ToolSuccess):
    objects: list[StorageObjectRecord] = Field(default_factory=list)
    count: int = 0
    is_truncated: bool = False
    next_continuation_token: str | None = None


class UploadObjectResult(ToolSuccess):
    bucket_name: str
    key: str
    etag: str | None = None


class DownloadObjectResult(ToolSuccess):
    bucket_name: str
    key: str
    output_path: str | None = None
    content: str | None = None
    content_type: str | None = None
    size: int | None = None


class DeleteObjectResult(ToolSuccess):
    bucket_name: str
    key: str


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------

class GetBucketPolicyResult(ToolSuccess):
    bucket_name: str
    policy: Any = None


class SetBucketPolicyResult(ToolSuccess):
    bucket_name: str


ToolResult = Union[
    ListBucketsResult,
    CreateBucketResult,
    DeleteBucketResult,
    ListObjectsResult,
    UploadObjectResult,
    DownloadObjectResult,
    DeleteObjectResult,
    GetBucketPolicyResult,
    SetBucketPolicyResult,
    ToolFailure,
]
