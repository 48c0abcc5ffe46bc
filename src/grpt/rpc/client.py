"""
RpcClient: call RPC methods by service and name, served over plain HTTP.
Base URL comes from call options or service discovery; the adapter does the rest.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Mapping

from grpt.discovery.protocol import ServiceDiscovery
from grpt.transcoding.adapter import TranscodingAdapter
from grpt.transcoding.errors import ServiceUnavailable, TranscodingError
from grpt.transcoding.types import HTTP_RULE_OPTION, UNARY, MethodInfo, RpcOptions


@dataclass(frozen=True)
class ServiceInfo:
    """An RPC service and its methods, as a generated stub describes it."""

    name: str
    methods: tuple[MethodInfo, ...] = field(default_factory=tuple)

    @classmethod
    def from_annotations(cls, name: str, annotations: Mapping[str, Mapping[str, Any]]) -> ServiceInfo:
        """ServiceInfo from method name -> google.api.http annotation."""
        methods = tuple(
            MethodInfo(name=method_name, service_name=name, options={HTTP_RULE_OPTION: dict(rule)})
            for method_name, rule in annotations.items()
        )
        return cls(name=name, methods=methods)

    def method(self, name: str) -> MethodInfo:
        for m in self.methods:
            if m.name == name:
                return m
        raise KeyError(f"{self.name} has no method {name!r}")


class RpcClient:
    """
    Facade: call(service, method, input) -> awaitable HTTP response.
    Uses ServiceDiscovery when options carry no base URL; meta is sent on every call.
    """

    def __init__(
        self,
        adapter: TranscodingAdapter,
        discovery: ServiceDiscovery | None = None,
        *,
        meta: Mapping[str, str] | None = None,
    ) -> None:
        self._adapter = adapter
        self._discovery = discovery
        self._meta = dict(meta or {})

    def options_for(self, service_name: str, options: RpcOptions | Mapping[str, Any] | None = None) -> RpcOptions:
        opts = RpcOptions.coerce(options)
        base_url = opts.base_url
        if not base_url and self._discovery is not None:
            urls = self._discovery.resolve(service_name)
            base_url = urls[0] if urls else ""
        if not base_url:
            error = ServiceUnavailable(service_name)
            self._adapter.report(error)
            raise error
        return RpcOptions(base_url=base_url, meta={**self._meta, **(opts.meta or {})})

    def call(
        self,
        service: ServiceInfo,
        method: MethodInfo | str,
        input: Any,
        *,
        options: RpcOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        m = service.method(method) if isinstance(method, str) else method
        return self._adapter.execute(m.kind, self, m, self.options_for(service.name, options), input)


class TranscodingRpcTransport:
    """
    Byte-level RPC transport (call(url, method, payload) -> bytes) backed by transcoding.
    method is a method name of the given service; payload is the JSON-encoded input.
    """

    def __init__(self, adapter: TranscodingAdapter, service: ServiceInfo) -> None:
        self._adapter = adapter
        self._service = service

    async def call(self, url: str, method: str, payload: bytes) -> bytes:
        params = json.loads(payload.decode() or "{}") if payload else {}
        try:
            m = self._service.method(method)
        except KeyError as e:
            raise TranscodingError(str(e), code="NOT_FOUND") from e
        response = await self._adapter.execute(UNARY, self, m, RpcOptions(base_url=url), params)
        return response.content
