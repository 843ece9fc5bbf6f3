from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from .entities import utcnow
from .enums import ErrorCode, ProviderEnum

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorInfo:
    code: ErrorCode
    message: str


@dataclass(frozen=True)
class ResponseMetadata:
    provider: ProviderEnum
    cached: bool = False
    fetched_at: datetime = field(default_factory=utcnow)
    quota_used: int | None = None
    quota_remaining: int | None = None


@dataclass(frozen=True)
class DataLayerResponse(Generic[T]):
    """
    Uniform envelope returned by every public data-layer call.

    Expected absence (unknown sport, team not found, no odds...) is an
    error envelope, never an exception.
    """

    success: bool
    metadata: ResponseMetadata
    data: T | None = None
    error: ErrorInfo | None = None

    @classmethod
    def ok(
        cls,
        data: T,
        *,
        provider: ProviderEnum,
        quota_used: int | None = None,
        quota_remaining: int | None = None,
    ) -> DataLayerResponse[T]:
        return cls(
            success=True,
            data=data,
            metadata=ResponseMetadata(
                provider=provider, quota_used=quota_used, quota_remaining=quota_remaining
            ),
        )

    @classmethod
    def fail(
        cls, code: ErrorCode, message: str, *, provider: ProviderEnum
    ) -> DataLayerResponse[T]:
        return cls(
            success=False,
            error=ErrorInfo(code=code, message=message),
            metadata=ResponseMetadata(provider=provider),
        )

    def as_cached(self) -> DataLayerResponse[T]:
        # `data` stays the very same object that was stored.
        return dataclasses.replace(
            self, metadata=dataclasses.replace(self.metadata, cached=True)
        )


def to_jsonable(value: Any) -> Any:
    """Convert envelopes/entities into plain JSON-ready structures."""

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, list | tuple):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    return value
