"""Helpers for reading botocore errors."""

from __future__ import annotations

from botocore.exceptions import ClientError

NO_SUCH_BUCKET_POLICY = "NoSuchBucketPolicy"


def error_code(exc: BaseException) -> str | None:
    """Service error code of a ClientError, else None."""
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return None


def error_message(exc: BaseException, fallback: str) -> str:
    """Human-readable message for a backend or local I/O failure."""
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message")
    else:
        message = str(exc)
    return message or fallback
