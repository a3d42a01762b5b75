"""In-memory S3 client for unit tests: a dict-backed fake."""

from __future__ import annotations

import base64
import hashlib
import io
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from botocore.exceptions import ClientError

DEFAULT_MAX_KEYS = 1000


def _client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@dataclass
class _StoredObject:
    body: bytes
    content_type: str
    last_modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def etag(self) -> str:
        return f'"{hashlib.md5(self.body).hexdigest()}"'


class MemoryS3Client:
    """Dict-backed IStorageClient that records every call it receives."""

    def __init__(self) -> None:
        self._buckets: dict[str, dict[str, _StoredObject]] = {}
        self._created: dict[str, datetime] = {}
        self._policies: dict[str, str] = {}
        self._failures: dict[str, ClientError] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def fail(self, method: str, code: str, message: str = "") -> None:
        """Make every later call to ``method`` raise a ClientError."""
        self._failures[method] = _client_error(code, message, method)

    def _record(self, method: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((method, kwargs))
        if method in self._failures:
            raise self._failures[method]

    def _bucket(self, name: str, operation: str) -> dict[str, _StoredObject]:
        if name not in self._buckets:
            raise _client_error("NoSuchBucket", "The specified bucket does not exist", operation)
        return self._buckets[name]

    # ---- buckets ----

    def list_buckets(self, **kwargs: Any) -> dict[str, Any]:
        self._record("list_buckets", kwargs)
        return {
            "Buckets": [
                {"Name": name, "CreationDate": self._created[name]} for name in sorted(self._buckets)
            ],
        }

    def create_bucket(self, **kwargs: Any) -> dict[str, Any]:
        self._record("create_bucket", kwargs)
        name = kwargs["Bucket"]
        if name in self._buckets:
            raise _client_error(
                "BucketAlreadyOwnedByYou",
                "Your previous request to create the named bucket succeeded and you already own it.",
                "CreateBucket",
            )
        self._buckets[name] = {}
        self._created[name] = datetime.now(timezone.utc)
        return {"Location": f"/{name}"}

    def delete_bucket(self, **kwargs: Any) -> dict[str, Any]:
        self._record("delete_bucket", kwargs)
        name = kwargs["Bucket"]
        if self._bucket(name, "DeleteBucket"):
            raise _client_error(
                "BucketNotEmpty", "The bucket you tried to delete is not empty", "DeleteBucket",
            )
        del self._buckets[name]
        del self._created[name]
        self._policies.pop(name, None)
        return {}

    # ---- objects ----

    def list_objects_v2(self, **kwargs: Any) -> dict[str, Any]:
        self._record("list_objects_v2", kwargs)
        objects = self._bucket(kwargs["Bucket"], "ListObjectsV2")
        prefix = kwargs.get("Prefix", "")
        max_keys = min(kwargs.get("MaxKeys", DEFAULT_MAX_KEYS), DEFAULT_MAX_KEYS)
        keys = sorted(k for k in objects if k.startswith(prefix))

        token = kwargs.get("ContinuationToken")
        if token:
            start_after = base64.urlsafe_b64decode(token.encode()).decode()
            keys = [k for k in keys if k > start_after]

        page, rest = keys[:max_keys], keys[max_keys:]
        resp: dict[str, Any] = {
            "IsTruncated": bool(rest),
            "KeyCount": len(page),
            "MaxKeys": max_keys,
            "Contents": [
                {
                    "Key": key,
                    "Size": len(objects[key].body),
                    "LastModified": objects[key].last_modified,
                    "ETag": objects[key].etag,
                    "StorageClass": "STANDARD",
                }
                for key in page
            ],
        }
        if rest and page:
            resp["NextContinuationToken"] = base64.urlsafe_b64encode(page[-1].encode()).decode()
        if not page:
            del resp["Contents"]
        return resp

    def put_object(self, **kwargs: Any) -> dict[str, Any]:
        self._record("put_object", kwargs)
        objects = self._bucket(kwargs["Bucket"], "PutObject")
        body = kwargs.get("Body", b"")
        if isinstance(body, str):
            body = body.encode("utf-8")
        stored = _StoredObject(body=body, content_type=kwargs.get("ContentType", "binary/octet-stream"))
        objects[kwargs["Key"]] = stored
        return {"ETag": stored.etag}

    def get_object(self, **kwargs: Any) -> dict[str, Any]:
        self._record("get_object", kwargs)
        objects = self._bucket(kwargs["Bucket"], "GetObject")
        stored = objects.get(kwargs["Key"])
        if stored is None:
            raise _client_error("NoSuchKey", "The specified key does not exist.", "GetObject")
        return {
            "Body": io.BytesIO(stored.body),
            "ContentType": stored.content_type,
            "ContentLength": len(stored.body),
            "ETag": stored.etag,
            "LastModified": stored.last_modified,
        }

    def delete_object(self, **kwargs: Any) -> dict[str, Any]:
        self._record("delete_object", kwargs)
        self._bucket(kwargs["Bucket"], "DeleteObject").pop(kwargs["Key"], None)
        return {}

    # ---- policies ----

    def get_bucket_policy(self, **kwargs: Any) -> dict[str, Any]:
        self._record("get_bucket_policy", kwargs)
        name = kwargs["Bucket"]
        self._bucket(name, "GetBucketPolicy")
        if name not in self._policies:
            raise _client_error(
                "NoSuchBucketPolicy", "The bucket policy does not exist", "GetBucketPolicy",
            )
        return {"Policy": self._policies[name]}

    def put_bucket_policy(self, **kwargs: Any) -> dict[str, Any]:
        self._record("put_bucket_policy", kwargs)
        name = kwargs["Bucket"]
        self._bucket(name, "PutBucketPolicy")
        self._policies[name] = kwargs["Policy"]
        return {}
