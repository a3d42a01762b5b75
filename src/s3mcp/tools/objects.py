"""Object tools: list, upload, download, delete."""

from __future__ import annotations

import asyncio
from pathlib import Path

from s3mcp.core.protocols import IStorageClient
from s3mcp.models.params import (
    DeleteObjectParams,
    DownloadObjectParams,
    FileSource,
    ListObjectsParams,
    UploadObjectParams,
)
from s3mcp.models.results import (
    DeleteObjectResult,
    DownloadObjectResult,
    ListObjectsResult,
    StorageObjectRecord,
    UploadObjectResult,
)
from s3mcp.tools.base import StorageTool, isoformat


class ListObjectsTool(StorageTool[ListObjectsParams]):
    name = "list_objects"
    title = "List Objects"
    description = "Lists objects in an S3 bucket with optional prefix filtering."
    params_model = ListObjectsParams
    fallback_error = "Failed to list objects"

    async def execute(self, client: IStorageClient,
                      params: ListObjectsParams) -> ListObjectsResult:
        kwargs: dict = {"Bucket": params.bucket_name}
        if params.prefix is not None:
            kwargs["Prefix"] = params.prefix
        if params.max_keys is not None:
            kwargs["MaxKeys"] = params.max_keys
        if params.continuation_token is not None:
            kwargs["ContinuationToken"] = params.continuation_token

        resp = await asyncio.to_thread(client.list_objects_v2, **kwargs)
        objects = [
            StorageObjectRecord(
                key=obj.get("Key", ""),
                size=obj.get("Size") or 0,
                last_modified=isoformat(obj.get("LastModified")),
                etag=obj.get("ETag"),
                storage_class=obj.get("StorageClass"),
            )
            for obj in resp.get("Contents", [])
        ]
        return ListObjectsResult(
            objects=objects,
            count=len(objects),
            is_truncated=bool(resp.get("IsTruncated", False)),
            next_continuation_token=resp.get("NextContinuationToken"),
        )


class UploadObjectTool(StorageTool[UploadObjectParams]):
    name = "upload_object"
    title = "Upload Object"
    description = "Uploads a file or content to an S3 bucket."
    params_model = UploadObjectParams
    fallback_error = "Failed to upload object"

    async def execute(self, client: IStorageClient,
                      params: UploadObjectParams) -> UploadObjectResult:
        source = params.source
        if isinstance(source, FileSource):
            body = await asyncio.to_thread(Path(source.path).read_bytes)
        else:
            body = source.text.encode("utf-8")

        kwargs: dict = {"Bucket": params.bucket_name, "Key": params.key, "Body": body}
        if params.content_type:
            kwargs["ContentType"] = params.content_type
        resp = await asyncio.to_thread(client.put_object, **kwargs)
        return UploadObjectResult(
            bucket_name=params.bucket_name, key=params.key, etag=resp.get("ETag"),
        )


class DownloadObjectTool(StorageTool[DownloadObjectParams]):
    name = "download_object"
    title = "Download Object"
    description = "Downloads an object from an S3 bucket."
    params_model = DownloadObjectParams
    fallback_error = "Failed to download object"

    async def execute(self, client: IStorageClient,
                      params: DownloadObjectParams) -> DownloadObjectResult:
        resp = await asyncio.to_thread(
            client.get_object, Bucket=params.bucket_name, Key=params.key,
        )

        content: str | None = None
        body = resp.get("Body")
        if body is not None:
            data: bytes = await asyncio.to_thread(body.read)
            if params.output_path:
                await asyncio.to_thread(Path(params.output_path).write_bytes, data)
            if params.return_content:
                content = data.decode("utf-8", errors="replace")

        return DownloadObjectResult(
            bucket_name=params.bucket_name,
            key=params.key,
            output_path=params.output_path,
            content=content,
            content_type=resp.get("ContentType"),
            size=resp.get("ContentLength"),
        )


class DeleteObjectTool(StorageTool[DeleteObjectParams]):
    name = "delete_object"
    title = "Delete Object"
    description = "Deletes an object from an S3 bucket."
    params_model = DeleteObjectParams
    fallback_error = "Failed to delete object"

    async def execute(self, client: IStorageClient,
                      params: DeleteObjectParams) -> DeleteObjectResult:
        await asyncio.to_thread(
            client.delete_object, Bucket=params.bucket_name, Key=params.key,
        )
        return DeleteObjectResult(bucket_name=params.bucket_name, key=params.key)
