"""Bucket lifecycle tools: list, create, delete."""

from __future__ import annotations

import asyncio

from s3mcp.core.protocols import IStorageClient
from s3mcp.models.params import CreateBucketParams, DeleteBucketParams, NoParams
from s3mcp.models.results import (
    BucketSummary,
    CreateBucketResult,
    DeleteBucketResult,
    ListBucketsResult,
)
from s3mcp.tools.base import StorageTool, isoformat


class ListBucketsTool(StorageTool[NoParams]):
    name = "list_buckets"
    title = "List Buckets"
    description = "Lists all S3 buckets in the AWS account."
    params_model = NoParams
    fallback_error = "Failed to list buckets"

    async def execute(self, client: IStorageClient, params: NoParams) -> ListBucketsResult:
        resp = await asyncio.to_thread(client.list_buckets)
        buckets = [
            BucketSummary(
                name=bucket.get("Name", ""),
                creation_date=isoformat(bucket.get("CreationDate")),
            )
            for bucket in resp.get("Buckets", [])
        ]
        return ListBucketsResult(buckets=buckets, count=len(buckets))


class CreateBucketTool(StorageTool[CreateBucketParams]):
    name = "create_bucket"
    title = "Create Bucket"
    description = "Creates a new S3 bucket with the specified name."
    params_model = CreateBucketParams
    fallback_error = "Failed to create bucket"

    async def execute(self, client: IStorageClient,
                      params: CreateBucketParams) -> CreateBucketResult:
        kwargs: dict = {"Bucket": params.bucket_name}
        if params.region:
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": params.region}
        resp = await asyncio.to_thread(client.create_bucket, **kwargs)
        return CreateBucketResult(bucket_name=params.bucket_name, location=resp.get("Location"))


class DeleteBucketTool(StorageTool[DeleteBucketParams]):
    name = "delete_bucket"
    title = "Delete Bucket"
    description = "Deletes an S3 bucket. The bucket must be empty."
    params_model = DeleteBucketParams
    fallback_error = "Failed to delete bucket"

    async def execute(self, client: IStorageClient,
                      params: DeleteBucketParams) -> DeleteBucketResult:
        await asyncio.to_thread(client.delete_bucket, Bucket=params.bucket_name)
        return DeleteBucketResult(bucket_name=params.bucket_name)
