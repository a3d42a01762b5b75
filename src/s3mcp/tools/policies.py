"""Bucket policy tools: get, set."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from botocore.exceptions import ClientError

from s3mcp.core.protocols import IStorageClient
from s3mcp.models.params import GetBucketPolicyParams, SetBucketPolicyParams
from s3mcp.models.results import GetBucketPolicyResult, SetBucketPolicyResult
from s3mcp.storage.errors import NO_SUCH_BUCKET_POLICY, error_code
from s3mcp.tools.base import StorageTool


def _parse_policy(text: str | None) -> Any:
    """JSON-decoded policy, or the raw text when it is not valid JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


class GetBucketPolicyTool(StorageTool[GetBucketPolicyParams]):
    name = "get_bucket_policy"
    title = "Get Bucket Policy"
    description = "Retrieves the policy for an S3 bucket."
    params_model = GetBucketPolicyParams
    fallback_error = "Failed to get bucket policy"

    async def execute(self, client: IStorageClient,
                      params: GetBucketPolicyParams) -> GetBucketPolicyResult:
        try:
            resp = await asyncio.to_thread(client.get_bucket_policy, Bucket=params.bucket_name)
        except ClientError as exc:
            # A bucket without a policy is a valid, empty answer.
            if error_code(exc) == NO_SUCH_BUCKET_POLICY:
                return GetBucketPolicyResult(bucket_name=params.bucket_name, policy=None)
            raise
        return GetBucketPolicyResult(
            bucket_name=params.bucket_name, policy=_parse_policy(resp.get("Policy")),
        )


class SetBucketPolicyTool(StorageTool[SetBucketPolicyParams]):
    name = "set_bucket_policy"
    title = "Set Bucket Policy"
    description = "Sets or updates the policy for an S3 bucket."
    params_model = SetBucketPolicyParams
    fallback_error = "Failed to set bucket policy"

    async def execute(self, client: IStorageClient,
                      params: SetBucketPolicyParams) -> SetBucketPolicyResult:
        await asyncio.to_thread(
            client.put_bucket_policy, Bucket=params.bucket_name, Policy=params.policy_document,
        )
        return SetBucketPolicyResult(bucket_name=params.bucket_name)
