"""Tests for tool parameter models."""

from __future__ import annotations

import json

import pytest

from s3mcp.core.exceptions import InvalidToolParameters
from s3mcp.models.params import (
    DOWNLOAD_TARGET_ERROR,
    INVALID_POLICY_ERROR,
    UPLOAD_SOURCE_ERROR,
    CreateBucketParams,
    DownloadObjectParams,
    FileSource,
    ListObjectsParams,
    NoParams,
    SetBucketPolicyParams,
    TextSource,
    UploadObjectParams,
)


class TestAliases:
    def test_camel_case_wire_names(self):
        params = ListObjectsParams.parse_arguments(
            "list_objects",
            {"bucketName": "b", "prefix": "docs/", "maxKeys": 5, "continuationToken": "tok"},
        )
        assert params.bucket_name == "b"
        assert params.prefix == "docs/"
        assert params.max_keys == 5
        assert params.continuation_token == "tok"

    def test_input_schema_uses_wire_names(self):
        schema = ListObjectsParams.input_schema()
        assert set(schema["properties"]) == {"bucketName", "prefix", "maxKeys", "continuationToken"}
        assert schema["required"] == ["bucketName"]

    def test_upload_schema_optionality(self):
        schema = UploadObjectParams.input_schema()
        assert sorted(schema["required"]) == ["bucketName", "key"]
        assert "filePath" in schema["properties"]
        assert "contentType" in schema["properties"]

    def test_no_params_schema_is_empty_object(self):
        schema = NoParams.input_schema()
        assert schema["type"] == "object"
        assert schema["properties"] == {}

    def test_parameter_descriptions_are_published(self):
        schema = CreateBucketParams.input_schema()
        assert "globally unique" in schema["properties"]["bucketName"]["description"]


class TestRequiredFields:
    def test_missing_bucket_name_names_the_field(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            CreateBucketParams.parse_arguments("create_bucket", {})
        assert exc_info.value.tool_name == "create_bucket"
        assert exc_info.value.message.startswith("bucketName:")

    def test_none_arguments_treated_as_empty(self):
        assert NoParams.parse_arguments("list_buckets", None) == NoParams()


class TestUploadSource:
    def test_content_selects_text_source(self):
        params = UploadObjectParams.parse_arguments(
            "upload_object", {"bucketName": "b", "key": "k", "content": "hi"},
        )
        assert params.source == TextSource("hi")

    def test_file_path_selects_file_source(self):
        params = UploadObjectParams.parse_arguments(
            "upload_object", {"bucketName": "b", "key": "k", "filePath": "/tmp/x"},
        )
        assert params.source == FileSource("/tmp/x")

    def test_both_sources_rejected(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            UploadObjectParams.parse_arguments(
                "upload_object",
                {"bucketName": "b", "key": "k", "filePath": "/tmp/x", "content": "hi"},
            )
        assert exc_info.value.message == UPLOAD_SOURCE_ERROR

    def test_no_source_rejected(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            UploadObjectParams.parse_arguments("upload_object", {"bucketName": "b", "key": "k"})
        assert exc_info.value.message == UPLOAD_SOURCE_ERROR

    def test_empty_content_counts_as_absent(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            UploadObjectParams.parse_arguments(
                "upload_object", {"bucketName": "b", "key": "k", "content": ""},
            )
        assert exc_info.value.message == UPLOAD_SOURCE_ERROR


class TestDownloadTarget:
    def test_neither_target_rejected(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            DownloadObjectParams.parse_arguments("download_object", {"bucketName": "b", "key": "k"})
        assert exc_info.value.message == DOWNLOAD_TARGET_ERROR

    def test_return_content_false_alone_rejected(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            DownloadObjectParams.parse_arguments(
                "download_object", {"bucketName": "b", "key": "k", "returnContent": False},
            )
        assert exc_info.value.message == DOWNLOAD_TARGET_ERROR

    def test_both_targets_allowed(self):
        params = DownloadObjectParams.parse_arguments(
            "download_object",
            {"bucketName": "b", "key": "k", "outputPath": "/tmp/out", "returnContent": True},
        )
        assert params.output_path == "/tmp/out"
        assert params.return_content is True


class TestPolicyDocument:
    POLICY = {"Version": "2012-10-17", "Statement": []}

    def test_object_serialized_to_json(self):
        params = SetBucketPolicyParams.parse_arguments(
            "set_bucket_policy", {"bucketName": "b", "policy": self.POLICY},
        )
        assert json.loads(params.policy_document) == self.POLICY

    def test_valid_string_forwarded_verbatim(self):
        text = json.dumps(self.POLICY)
        params = SetBucketPolicyParams.parse_arguments(
            "set_bucket_policy", {"bucketName": "b", "policy": text},
        )
        assert params.policy_document == text

    def test_object_and_equivalent_string_match(self):
        from_object = SetBucketPolicyParams.parse_arguments(
            "set_bucket_policy", {"bucketName": "b", "policy": self.POLICY},
        )
        from_string = SetBucketPolicyParams.parse_arguments(
            "set_bucket_policy", {"bucketName": "b", "policy": json.dumps(self.POLICY)},
        )
        assert from_object.policy_document == from_string.policy_document

    def test_invalid_string_rejected(self):
        with pytest.raises(InvalidToolParameters) as exc_info:
            SetBucketPolicyParams.parse_arguments(
                "set_bucket_policy", {"bucketName": "b", "policy": "{not valid json"},
            )
        assert exc_info.value.message == INVALID_POLICY_ERROR
