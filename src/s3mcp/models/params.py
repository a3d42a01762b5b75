"""Tool parameter models.

Each tool declares one model. Attribute names are snake_case; the wire names
are the camelCase aliases (``bucketName``, ``maxKeys``, ...). Cross-field
rules live in model validators so a handler only ever sees consistent input.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from s3mcp.core.exceptions import InvalidToolParameters
from s3mcp.core.types import JsonDict

UPLOAD_SOURCE_ERROR = "Either filePath OR content must be provided, but not both"
DOWNLOAD_TARGET_ERROR = "Either outputPath or returnContent must be provided"
INVALID_POLICY_ERROR = "Invalid policy JSON format"


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(messages)


class ToolParams(BaseModel):
    """Base for all tool parameter models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @classmethod
    def parse_arguments(cls, tool_name: str, arguments: Mapping[str, Any] | None) -> Self:
        """Validate raw tool arguments, raising InvalidToolParameters on failure."""
        try:
            return cls.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise InvalidToolParameters(tool_name, _describe_validation_error(exc)) from exc

    @classmethod
    def input_schema(cls) -> JsonDict:
        """JSON schema of the wire-level (camelCase) arguments."""
        return cls.model_json_schema(by_alias=True)


class NoParams(ToolParams):
    pass


class CreateBucketParams(ToolParams):
    bucket_name: str = Field(
        description="Name of the bucket to create. Must be globally unique across all AWS accounts.",
    )
    region: str | None = Field(
        default=None,
        description="AWS region where the bucket should be created. "
        "Defaults to the client's configured region.",
    )


class DeleteBucketParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to delete")


class ListObjectsParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to list objects from")
    prefix: str | None = Field(default=None, description="Filter objects by prefix (folder path)")
    max_keys: int | None = Field(
        default=None,
        description="Maximum number of objects to return (default: 1000, max: 1000)",
    )
    continuation_token: str | None = Field(
        default=None, description="Token to retrieve the next set of results",
    )


@dataclass(frozen=True)
class FileSource:
    """Upload the bytes of a local file."""

    path: str


@dataclass(frozen=True)
class TextSource:
    """Upload a string verbatim."""

    text: str


UploadSource = Union[FileSource, TextSource]


class UploadObjectParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to upload to")
    key: str = Field(description="Object key (path) in the bucket")
    file_path: str | None = Field(
        default=None, description="Local file path to upload (mutually exclusive with content)",
    )
    content: str | None = Field(
        default=None, description="String content to upload (mutually exclusive with filePath)",
    )
    content_type: str | None = Field(
        default=None,
        description="MIME type of the content (e.g., 'text/plain', 'application/json')",
    )

    @model_validator(mode="after")
    def _exactly_one_source(self) -> UploadObjectParams:
        # Empty strings count as absent.
        if bool(self.file_path) == bool(self.content):
            raise PydanticCustomError("upload_source", UPLOAD_SOURCE_ERROR)
        return self

    @property
    def source(self) -> UploadSource:
        if self.file_path:
            return FileSource(self.file_path)
        return TextSource(self.content or "")


class DownloadObjectParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to download from")
    key: str = Field(description="Object key (path) in the bucket")
    output_path: str | None = Field(
        default=None, description="Local file path to save the downloaded object",
    )
    return_content: bool = Field(
        default=False,
        description="If true, returns the object content in the response (for text files)",
    )

    @model_validator(mode="after")
    def _has_target(self) -> DownloadObjectParams:
        if not self.output_path and not self.return_content:
            raise PydanticCustomError("download_target", DOWNLOAD_TARGET_ERROR)
        return self


class DeleteObjectParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket containing the object")
    key: str = Field(description="Object key (path) to delete")


class GetBucketPolicyParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to get the policy for")


class SetBucketPolicyParams(ToolParams):
    bucket_name: str = Field(description="Name of the bucket to set the policy for")
    policy: Union[dict[str, Any], str] = Field(
        description="The policy document as a JSON string or object",
    )

    @model_validator(mode="after")
    def _policy_is_json(self) -> SetBucketPolicyParams:
        if isinstance(self.policy, str):
            try:
                json.loads(self.policy)
            except ValueError:
                raise PydanticCustomError("policy_json", INVALID_POLICY_ERROR) from None
        return self

    @property
    def policy_document(self) -> str:
        """Policy text as sent to the backend."""
        if isinstance(self.policy, str):
            return self.policy
        return json.dumps(self.policy)
