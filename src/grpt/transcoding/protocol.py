"""Transcoding protocols: what the adapter needs from its input, HTTP client and error reporter."""
from __future__ import annotations

from typing import Any, Awaitable, Mapping, Protocol, runtime_checkable

from grpt.transcoding.errors import TranscodingError


@runtime_checkable
class FieldSource(Protocol):
    """
    Keyed access to an input message: field name -> value, or None when absent.
    as_dict() gives every set field, for use as JSON body or query params.
    """

    def lookup(self, name: str) -> Any | None:
        ...

    def as_dict(self) -> dict[str, Any]:
        ...


@runtime_checkable
class HttpClient(Protocol):
    """
    Underlying HTTP client. httpx.AsyncClient satisfies it as is.
    Pooling, retries, auth and timeouts are configured on the client, not here.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Awaitable[Any]:
        ...


@runtime_checkable
class ErrorReporter(Protocol):
    """Presentation side: decides whether and how a transcoding error is shown."""

    def report(self, error: TranscodingError) -> None:
        ...
