"""
TranscodingAdapter: runs a generated RPC stub call as a plain HTTP request.
The method's google.api.http annotation picks verb and path; the input becomes
the body, the path parameters or the query string. Decision is synchronous;
the HTTP request is returned un-awaited, as the stub's call would be.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Mapping

from grpt.transcoding.errors import (
    NoHttpMethodAnnotation,
    TranscodingError,
    UnsupportedHttpMethodAnnotation,
)
from grpt.transcoding.fields import query_params, to_payload
from grpt.transcoding.path_params import has_placeholders, resolve_path
from grpt.transcoding.protocol import ErrorReporter, HttpClient
from grpt.transcoding.types import UNARY, MethodInfo, ResolvedRequest, RpcOptions
from grpt.transcoding.urls import compose_url

logger = logging.getLogger(__name__)


class LoggingReporter:
    """Default reporter: transcoding errors go to the log, nowhere else."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("grpt.errors")

    def report(self, error: TranscodingError) -> None:
        self._logger.error("%s", error.message, extra={"code": error.code})


class TranscodingAdapter:
    """
    Adapter over one HTTP client. execute() takes the stub's call descriptor
    (call kind, transport, method, options, input) in the stub's parameter order.
    """

    def __init__(self, http_client: HttpClient | None = None, reporter: ErrorReporter | None = None) -> None:
        self._http = http_client
        self._reporter = reporter or LoggingReporter()

    @property
    def http_client(self) -> HttpClient | None:
        return self._http

    def execute(
        self,
        call_kind: str,
        transport: Any,
        method: MethodInfo,
        options: RpcOptions | Mapping[str, Any] | None,
        input: Any,
    ) -> Awaitable[Any]:
        """Resolve the call and dispatch it. Raises TranscodingError before any I/O."""
        if self._http is None:
            raise RuntimeError("TranscodingAdapter built without an HTTP client can only resolve()")
        logger.debug(
            "RPC call: kind=%s transport=%r method=%s options=%r input=%r",
            call_kind, transport, method.full_name, options, input,
        )
        if call_kind != UNARY:
            logger.warning("Call kind %r for %s sent as a single request", call_kind, method.full_name)
        request = self.resolve(method, options, input)
        logger.debug("HTTP method: %s, full URL: %s", request.method, request.url)
        return self._http.request(request.method, request.url, **request.as_httpx_kwargs())

    def resolve(
        self,
        method: MethodInfo,
        options: RpcOptions | Mapping[str, Any] | None,
        input: Any,
    ) -> ResolvedRequest:
        """Verb, URL, params/body and headers for one call; no I/O."""
        try:
            return self._resolve(method, RpcOptions.coerce(options), input)
        except TranscodingError as e:
            self.report(e)
            raise

    def _resolve(self, method: MethodInfo, options: RpcOptions, input: Any) -> ResolvedRequest:
        rule = method.http_rule
        verb = rule.verb()
        if verb is None:
            keys = rule.keys()
            if not keys:
                raise NoHttpMethodAnnotation(method.full_name)
            raise UnsupportedHttpMethodAnnotation(keys, method.full_name)
        path = rule.template(verb)

        params: dict[str, Any] | None = None
        body: Any = None
        if rule.body_is_whole_input:
            body = to_payload(input)
        elif has_placeholders(path):
            path = resolve_path(path, input)
        else:
            params = query_params(input)

        return ResolvedRequest(
            method=verb.upper(),
            url=compose_url(options.base_url, path),
            params=params,
            body=body,
            headers=dict(options.meta or {}),
        )

    def report(self, error: TranscodingError) -> None:
        """Hand error to the reporter; a failing reporter is logged, never raised."""
        try:
            self._reporter.report(error)
        except Exception:
            logger.exception("Error reporter failed while reporting %s", error.code)


_default_adapter: TranscodingAdapter | None = None
# True when get_default_adapter() built the client itself and so must close it.
_owns_default_client = False


def set_default_adapter(adapter: TranscodingAdapter | None) -> None:
    """
    Adapter used by the module-level execute(); None resets to a lazily built one.
    The caller keeps ownership of the adapter's client. Set it from inside the
    running event loop: an httpx.AsyncClient pool is bound to the loop that uses it.
    """
    global _default_adapter, _owns_default_client
    _default_adapter = adapter
    _owns_default_client = False


def get_default_adapter() -> TranscodingAdapter:
    """The default adapter, built over a fresh httpx.AsyncClient on first use."""
    global _default_adapter, _owns_default_client
    if _default_adapter is None:
        import httpx

        _default_adapter = TranscodingAdapter(httpx.AsyncClient())
        _owns_default_client = True
    return _default_adapter


async def aclose_default_adapter() -> None:
    """
    Drop the default adapter, closing its client if it was built here.
    Call before the event loop that used it ends.
    """
    global _default_adapter, _owns_default_client
    adapter, owned = _default_adapter, _owns_default_client
    _default_adapter = None
    _owns_default_client = False
    if owned and adapter is not None and adapter.http_client is not None:
        await adapter.http_client.aclose()


def execute(
    call_kind: str,
    transport: Any,
    method: MethodInfo,
    options: RpcOptions | Mapping[str, Any] | None,
    input: Any,
) -> Awaitable[Any]:
    """Stub-facing entry point: same five arguments as the generated dispatcher call."""
    return get_default_adapter().execute(call_kind, transport, method, options, input)
