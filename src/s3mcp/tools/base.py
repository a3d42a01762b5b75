"""Base class shared by all storage tools."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from s3mcp.core.exceptions import InvalidToolParameters
from s3mcp.core.protocols import IClientProvider, IStorageClient
from s3mcp.core.types import JsonDict
from s3mcp.models.params import ToolParams
from s3mcp.models.results import ToolFailure, ToolOutcome, ToolSuccess
from s3mcp.storage.errors import error_message

log = logging.getLogger(__name__)

P = TypeVar("P", bound=ToolParams)


@dataclass(frozen=True)
class ToolDescriptor:
    """Registration info for one tool."""

    name: str
    title: str
    description: str
    input_schema: JsonDict = field(default_factory=dict)


def isoformat(value: Any) -> str | None:
    """UTC ISO-8601 text with millisecond precision (`...T00:00:00.000Z`), None when absent."""
    if value is None:
        return None
    if isinstance(value, datetime):
        # Naive timestamps are taken as UTC.
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    return str(value)


class StorageTool(ABC, Generic[P]):
    """One MCP tool backed by a single S3 call.

    Subclasses declare their wire name, description and parameter model and
    implement ``execute``. Calling the tool never raises: bad arguments and
    backend failures both come back as ``ToolFailure``.
    """

    name: ClassVar[str]
    title: ClassVar[str]
    description: ClassVar[str]
    params_model: ClassVar[type[ToolParams]]
    fallback_error: ClassVar[str]

    def __init__(self, provider: IClientProvider) -> None:
        self._provider = provider

    @classmethod
    def descriptor(cls) -> ToolDescriptor:
        return ToolDescriptor(
            name=cls.name,
            title=cls.title,
            description=cls.description,
            input_schema=cls.params_model.input_schema(),
        )

    async def __call__(self, arguments: Mapping[str, Any] | None = None) -> ToolOutcome:
        try:
            params = self.params_model.parse_arguments(self.name, arguments)
        except InvalidToolParameters as exc:
            log.warning("Rejected %s arguments: %s", self.name, exc.message)
            return ToolFailure.from_arguments(exc.message, arguments)

        try:
            client = self._provider.get_client()
            return await self.execute(client, params)  # type: ignore[arg-type]
        except (ClientError, BotoCoreError, OSError) as exc:
            message = error_message(exc, self.fallback_error)
            log.error("%s failed: %s", self.name, message)
        except Exception as exc:
            message = error_message(exc, self.fallback_error)
            log.exception("%s failed unexpectedly", self.name)
        return ToolFailure.from_arguments(message, arguments)

    @abstractmethod
    async def execute(self, client: IStorageClient, params: P) -> ToolSuccess:
        """Issue the backend request and map its response."""
